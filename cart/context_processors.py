from .cart import Cart, cart_summary


def cart(request):
    """
    Cart context processor for templates.
    Exposes line and unit counts of the session cart.
    """
    summary = cart_summary(Cart(request.session).read())
    return {
        'cart_count': summary['line_count'],
        'cart_item_count': summary['item_count'],
        'cart_has_items': summary['line_count'] > 0,
    }
