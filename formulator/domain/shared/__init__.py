"""Shared domain primitives."""

from .errors import (
    CatalogError,
    ConfigurationError,
    DomainError,
    DuplicateCatalogEntryError,
    IngredientNotFoundError,
    PackagingNotFoundError,
)

__all__ = [
    "DomainError",
    "CatalogError",
    "IngredientNotFoundError",
    "PackagingNotFoundError",
    "DuplicateCatalogEntryError",
    "ConfigurationError",
]
