"""
Session access for the cart.
The cart lives in the session under a single key as a dict:
{ "<key>": {key, product_id, quantity, options} }
JSON sessions turn int keys into strings, so stored keys are always str.
"""


def get_cart(session, session_key):
    return session.get(session_key)

def save_cart(session, session_key, cart):
    session[session_key] = cart
    session.modified = True

def clear_cart(session, session_key):
    if session_key in session:
        del session[session_key]
        session.modified = True
        return True
    return False
