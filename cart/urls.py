from django.urls import path
from . import views

urlpatterns = [
     # === PANIER (AJAX / SESSIONS) ===

    # Ajouter un produit au panier
    path('add/<str:product_id>/', views.add_to_cart, name='add-to-cart'),

    # Mettre à jour la quantité ou les options d'une ligne
    path('update/<int:key>/', views.update_cart, name='update-cart'),

    # Supprimer une ligne du panier
    path('remove/<int:key>/', views.remove_from_cart, name='remove-from-cart'),

    # Supprimer toutes les lignes d'un produit
    path('remove-product/<str:product_id>/', views.remove_product, name='remove-product'),

    # Vider complètement le panier
    path('clear/', views.clear_cart, name='clear-cart'),

    # Récupérer le résumé du panier (AJAX)
    path('summary/', views.cart_summary_view, name='cart-summary'),

]
