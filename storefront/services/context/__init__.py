"""
Shop context resolution services.

This package turns request scopes into a ShopContext, following SOLID
principles: every lookup is an injected protocol implementation.
"""

from .factories import create_context_resolver
from .resolver import ContextResolver
from .translation_context import TranslationContextProvider

__all__ = ["ContextResolver", "TranslationContextProvider", "create_context_resolver"]
