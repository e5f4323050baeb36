"""
Domain exceptions.

Typed exceptions for explicit error handling.

The formulation engine itself raises none of these: degenerate recipes
resolve to zero/default values. They are raised by the collaborators
around it (catalog lookups, configuration).
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# CATALOG EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class CatalogError(DomainError):
    """Base exception for ingredient and packaging catalogs."""

    pass


class IngredientNotFoundError(CatalogError):
    """
    Ingredient not found in catalog.

    Example:
        >>> raise IngredientNotFoundError("ing_42")
    """

    def __init__(self, ingredient_id: str):
        super().__init__(f"Ingredient not found: {ingredient_id}")
        self.ingredient_id = ingredient_id


class PackagingNotFoundError(CatalogError):
    """
    Packaging not found in catalog.

    Example:
        >>> raise PackagingNotFoundError("p9")
    """

    def __init__(self, packaging_id: str):
        super().__init__(f"Packaging not found: {packaging_id}")
        self.packaging_id = packaging_id


class DuplicateCatalogEntryError(CatalogError):
    """
    Catalog entry already registered.

    Raised when:
    - Adding an ingredient whose id is already present
    - Adding a packaging whose id is already present
    """

    def __init__(self, kind: str, entry_id: str):
        super().__init__(f"{kind} already exists: {entry_id}")
        self.kind = kind
        self.entry_id = entry_id


# ═══════════════════════════════════════════════════════════
# CONFIGURATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ConfigurationError(DomainError):
    """
    Invalid configuration value.

    Raised when:
    - An environment variable cannot be parsed
    - A parsed value is out of range

    Example:
        >>> raise ConfigurationError(
        ...     "FORMULATOR_DEFAULT_TARGET_MARGIN must be a number, got 'abc'"
        ... )
    """

    pass
