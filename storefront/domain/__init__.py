"""
Domain layer for storefront context resolution.

This layer contains business entities and value objects, independent of
persistence and infrastructure concerns.
"""
