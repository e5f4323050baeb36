"""Catalog adapters."""

from .in_memory import InMemoryIngredientCatalog, InMemoryPackagingCatalog

__all__ = [
    "InMemoryIngredientCatalog",
    "InMemoryPackagingCatalog",
]
