import json

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from .cart import Cart


def get_cart_data(session):
    """Helper function to get cart lines and count"""
    cart = Cart(session)
    cart_data = cart.read() or {}
    return cart_data, len(cart_data)


def cart_response(session, status=200, **extra):
    cart_data, cart_count = get_cart_data(session)
    payload = {
        'success': status < 400,
        'cart_count': cart_count,
        'cart': cart_data,
    }
    payload.update(extra)
    return JsonResponse(payload, status=status)


def parse_options(raw):
    if raw in (None, ''):
        return None
    return json.loads(raw)


@require_http_methods(["POST"])
def add_to_cart(request, product_id):
    try:
        quantity = int(request.POST.get('quantity', 1))
        options = parse_options(request.POST.get('options'))
    except (ValueError, TypeError):
        return JsonResponse({'error': 'Quantité ou options invalides'}, status=400)

    cart = Cart(request.session, product_id, quantity, options)
    if cart.is_max():
        return cart_response(request.session, status=400, error='Le panier est plein')
    if not cart.validate():
        return cart_response(request.session, status=400, error='La quantité doit être positive')
    # a duplicate only bumps the existing line, whose key is returned
    existing = cart.get_item(product_id) if cart.increment_on_duplicate else None
    if not cart.insert():
        return cart_response(request.session, status=400, error="Impossible d'ajouter l'article")

    return cart_response(request.session, key=existing['key'] if existing else cart.key)


@require_http_methods(["POST"])
def update_cart(request, key):
    try:
        quantity = request.POST.get('quantity')
        quantity = int(quantity) if quantity not in (None, '') else None
        options = parse_options(request.POST.get('options'))
    except (ValueError, TypeError):
        return JsonResponse({'error': 'Quantité ou options invalides'}, status=400)

    cart = Cart(request.session)
    if not cart.key_exists(key):
        return cart_response(request.session, status=404, error='Article introuvable')

    patch = {name: value for name, value in (('quantity', quantity), ('options', options)) if value is not None}
    if quantity is not None and quantity <= 0:
        cart.remove_by_key(key)
    elif not cart.update(key, patch):
        return cart_response(request.session, status=400, error='Rien à mettre à jour')

    return cart_response(request.session)


@require_http_methods(["POST"])
def remove_from_cart(request, key):
    if not Cart(request.session).remove_by_key(key):
        return cart_response(request.session, status=404, error='Article introuvable')
    return cart_response(request.session)


@require_http_methods(["POST"])
def remove_product(request, product_id):
    if not Cart(request.session).remove_by_id(product_id):
        return cart_response(request.session, status=404, error='Produit absent du panier')
    return cart_response(request.session)


@require_http_methods(["POST"])
def clear_cart(request):
    Cart(request.session).destroy()
    return cart_response(request.session)


@require_http_methods(["GET"])
def cart_summary_view(request):
    return cart_response(request.session)
