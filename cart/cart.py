"""
Session-based cart.
Store cart in session as dict: { key: {key, product_id, quantity, options} }
key is a generated int handle, distinct from the product id.
"""
import copy
import logging
import random

from django.conf import settings

from .utils.cart_utils import get_cart, save_cart, clear_cart

logger = logging.getLogger(__name__)

CART_SESSION_KEY = 'cart'
CART_MAX_ITEMS = 10
MAX_KEY = 2 ** 31 - 1
KEY_GENERATION_ATTEMPTS = 32


class Cart:
    """
    One cart line candidate bound to the session cart.
    The constructor values describe the item that insert() will add.
    """

    def __init__(self, session, product_id=None, quantity=1, options=None, *,
                 max_items=None, increment_on_duplicate=None, session_key=None):
        self.session = session
        self.session_key = session_key or getattr(settings, 'CART_SESSION_KEY', CART_SESSION_KEY)
        self.max_items = max_items if max_items is not None else getattr(settings, 'CART_MAX_ITEMS', CART_MAX_ITEMS)
        if increment_on_duplicate is None:
            increment_on_duplicate = getattr(settings, 'CART_INCREMENT_ON_DUPLICATE', True)
        self.increment_on_duplicate = increment_on_duplicate
        self.product_id = product_id
        self.quantity = quantity
        self.options = options
        self.key = self.generate_key()

    # --- session mapping ---

    def _load(self):
        stored = get_cart(self.session, self.session_key)
        if stored is None:
            return None
        return {int(k): copy.deepcopy(item) for k, item in stored.items()}

    def _save(self, cart):
        save_cart(self.session, self.session_key, {str(k): item for k, item in cart.items()})

    def _create(self):
        return {
            'key': self.key,
            'product_id': self.product_id,
            'quantity': self.quantity,
            'options': self.options,
        }

    # --- public operations ---

    def insert(self):
        """
        Insert the item, or bump the quantity of an existing line with the same
        product id by one when increment_on_duplicate is set.
        Returns False when the cart is full or the item is invalid.
        """
        if self.is_max():
            logger.warning("Cart full (%s items), product %s rejected", self.max_items, self.product_id)
            return False
        if not self.validate():
            logger.warning("Invalid cart item: product_id=%r quantity=%r", self.product_id, self.quantity)
            return False
        if self.key is None:
            return False

        cart = self._load()
        if cart:
            if self.increment_on_duplicate:
                item = self.get_item(self.product_id)
                if item is not None:
                    data = {'quantity': item['quantity'] + 1, 'options': item['options']}
                    return self.update(item['key'], data)
            if self.key in cart:
                self.key = self.generate_key()
                if self.key is None:
                    return False
            cart[self.key] = self._create()
        else:
            cart = {self.key: self._create()}
        self._save(cart)
        logger.info("Cart item added: key=%s product=%s qty=%s", self.key, self.product_id, self.quantity)
        return True

    def update(self, key, data):
        """
        Replace the line at key. quantity and options missing from data keep
        their current values; product_id and key never change.
        """
        if not data or not isinstance(data, dict):
            return False
        cart = self._load()
        if not cart or key not in cart:
            return False
        current = cart[key]
        quantity = current['quantity'] if data.get('quantity') is None else data['quantity']
        if not _is_positive_int(quantity):
            return False
        cart[key] = {
            'key': key,
            'product_id': current['product_id'],
            'quantity': quantity,
            'options': current['options'] if data.get('options') is None else data['options'],
        }
        self._save(cart)
        logger.debug("Cart item updated: key=%s qty=%s", key, quantity)
        return True

    def read(self, key=None):
        cart = self._load()
        if cart is None:
            return None
        if key is None:
            return cart
        return cart.get(key)

    def count(self):
        return len(self._load() or {})

    def item_exists(self, product_id):
        return self.get_item(product_id) is not None

    def get_item(self, product_id):
        """Return the first line holding product_id, or None."""
        for item in (self._load() or {}).values():
            if item['product_id'] == product_id:
                return item
        return None

    def remove_by_key(self, key):
        cart = self._load()
        if not cart or key not in cart:
            return False
        del cart[key]
        self._save(cart)
        logger.debug("Cart item removed: key=%s", key)
        return True

    def remove_by_id(self, product_id):
        """Remove every line holding product_id."""
        cart = self._load()
        if not cart:
            return False
        remaining = {k: item for k, item in cart.items() if item['product_id'] != product_id}
        if len(remaining) == len(cart):
            return False
        self._save(remaining)
        logger.debug("Cart lines removed for product %s: %s", product_id, len(cart) - len(remaining))
        return True

    def destroy(self):
        cart = self._load()
        # an empty leftover mapping is dropped too, but does not count as a cart
        clear_cart(self.session, self.session_key)
        if not cart:
            return False
        logger.info("Cart destroyed (%s items)", len(cart))
        return True

    # --- helpers ---

    def is_max(self):
        return self.count() >= self.max_items

    def get_cart_keys(self):
        return list((self._load() or {}).keys())

    def key_exists(self, key):
        return key in self.get_cart_keys()

    def validate(self):
        return bool(self.product_id) and _is_positive_int(self.quantity)

    def generate_key(self):
        """
        Draw a random key not used by the current cart.
        Returns None after KEY_GENERATION_ATTEMPTS collisions.
        """
        keys = set(self.get_cart_keys())
        for _ in range(KEY_GENERATION_ATTEMPTS):
            key = random.randint(0, MAX_KEY)
            if key not in keys:
                return key
        logger.warning("Could not generate a free cart key after %s attempts", KEY_GENERATION_ATTEMPTS)
        return None


def _is_positive_int(value):
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def cart_summary(cart):
    """Line and unit counts for a mapping returned by Cart.read()."""
    cart = cart or {}
    return {
        'line_count': len(cart),
        'item_count': sum(int(item.get('quantity', 0)) for item in cart.values()),
    }
