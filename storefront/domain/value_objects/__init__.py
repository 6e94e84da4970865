"""
Value objects for shop context resolution.

Immutable request scopes and the translation context derived from a shop.
"""

from .scopes import CheckoutScope, CustomerScope, ShopScope
from .translation_context import TranslationContext

__all__ = ["ShopScope", "CustomerScope", "CheckoutScope", "TranslationContext"]
