from django.apps import AppConfig


class CartConfig(AppConfig):
    """Session cart app."""

    name = "cart"
