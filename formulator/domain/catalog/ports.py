"""
Ports (Interfaces) for reference data catalogs.

The formulation engine consumes plain lists of ingredients and
packagings; these ports describe where the application layer gets
those lists from.

Design Pattern: Ports & Adapters (Hexagonal Architecture)
"""

from typing import Optional, Protocol, runtime_checkable

from formulator.domain.catalog.models import Ingredient, Packaging


@runtime_checkable
class IIngredientCatalog(Protocol):
    """
    Port for the ingredient reference catalog.

    Implementations may be backed by memory, a database or a file.
    """

    def get(self, ingredient_id: str) -> Ingredient:
        """
        Get ingredient by id.

        Raises:
            IngredientNotFoundError: If the id is unknown
        """
        ...

    def find(self, ingredient_id: str) -> Optional[Ingredient]:
        """Get ingredient by id, or None if unknown."""
        ...

    def list_all(self) -> list[Ingredient]:
        """All ingredients in insertion order."""
        ...


@runtime_checkable
class IPackagingCatalog(Protocol):
    """Port for the packaging reference catalog."""

    def get(self, packaging_id: str) -> Packaging:
        """
        Get packaging by id.

        Raises:
            PackagingNotFoundError: If the id is unknown
        """
        ...

    def find(self, packaging_id: str) -> Optional[Packaging]:
        """Get packaging by id, or None if unknown."""
        ...

    def list_all(self) -> list[Packaging]:
        """All packagings in insertion order."""
        ...
