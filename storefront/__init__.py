"""Storefront shop context resolution."""

__version__ = "0.1.0"
