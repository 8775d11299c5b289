import os

import django
import pytest

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'sessioncart.settings')
django.setup()

from django.contrib.sessions.backends.signed_cookies import SessionStore  # noqa: E402


@pytest.fixture
def session():
    """In-memory session; nothing is written until save()"""
    return SessionStore()


@pytest.fixture
def client():
    from django.test import Client
    return Client()
