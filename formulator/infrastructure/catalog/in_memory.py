"""In-memory implementations of the ingredient and packaging catalogs."""

from typing import Iterable, Optional

import structlog

from formulator.domain.catalog.models import Ingredient, Packaging
from formulator.domain.shared.errors import (
    DuplicateCatalogEntryError,
    IngredientNotFoundError,
    PackagingNotFoundError,
)

logger = structlog.get_logger(__name__)


class InMemoryIngredientCatalog:
    """
    In-memory ingredient catalog.

    Uses a dictionary keyed by id, preserving insertion order. Entries
    are immutable models, so they are stored and returned as-is.
    """

    def __init__(self, ingredients: Iterable[Ingredient] = ()) -> None:
        """Initialize catalog, optionally seeded."""
        self._ingredients: dict[str, Ingredient] = {}
        for ingredient in ingredients:
            self.add(ingredient)

    def add(self, ingredient: Ingredient) -> None:
        """
        Register an ingredient.

        Raises:
            DuplicateCatalogEntryError: If the id is already registered
        """
        if ingredient.id in self._ingredients:
            raise DuplicateCatalogEntryError("Ingredient", ingredient.id)
        self._ingredients[ingredient.id] = ingredient
        logger.debug("Ingredient registered", ingredient_id=ingredient.id)

    def replace(self, ingredient: Ingredient) -> None:
        """Insert or overwrite an ingredient."""
        self._ingredients[ingredient.id] = ingredient

    def remove(self, ingredient_id: str) -> None:
        """
        Remove an ingredient.

        Raises:
            IngredientNotFoundError: If the id is unknown
        """
        if ingredient_id not in self._ingredients:
            raise IngredientNotFoundError(ingredient_id)
        del self._ingredients[ingredient_id]

    def get(self, ingredient_id: str) -> Ingredient:
        """
        Get ingredient by id.

        Raises:
            IngredientNotFoundError: If the id is unknown
        """
        ingredient = self._ingredients.get(ingredient_id)
        if ingredient is None:
            raise IngredientNotFoundError(ingredient_id)
        return ingredient

    def find(self, ingredient_id: str) -> Optional[Ingredient]:
        """Get ingredient by id, or None."""
        return self._ingredients.get(ingredient_id)

    def list_all(self) -> list[Ingredient]:
        """All ingredients in insertion order."""
        return list(self._ingredients.values())

    def __len__(self) -> int:
        return len(self._ingredients)


class InMemoryPackagingCatalog:
    """In-memory packaging catalog."""

    def __init__(self, packagings: Iterable[Packaging] = ()) -> None:
        """Initialize catalog, optionally seeded."""
        self._packagings: dict[str, Packaging] = {}
        for packaging in packagings:
            self.add(packaging)

    def add(self, packaging: Packaging) -> None:
        """
        Register a packaging.

        Raises:
            DuplicateCatalogEntryError: If the id is already registered
        """
        if packaging.id in self._packagings:
            raise DuplicateCatalogEntryError("Packaging", packaging.id)
        self._packagings[packaging.id] = packaging
        logger.debug("Packaging registered", packaging_id=packaging.id)

    def replace(self, packaging: Packaging) -> None:
        """Insert or overwrite a packaging."""
        self._packagings[packaging.id] = packaging

    def remove(self, packaging_id: str) -> None:
        """
        Remove a packaging.

        Raises:
            PackagingNotFoundError: If the id is unknown
        """
        if packaging_id not in self._packagings:
            raise PackagingNotFoundError(packaging_id)
        del self._packagings[packaging_id]

    def get(self, packaging_id: str) -> Packaging:
        """
        Get packaging by id.

        Raises:
            PackagingNotFoundError: If the id is unknown
        """
        packaging = self._packagings.get(packaging_id)
        if packaging is None:
            raise PackagingNotFoundError(packaging_id)
        return packaging

    def find(self, packaging_id: str) -> Optional[Packaging]:
        """Get packaging by id, or None."""
        return self._packagings.get(packaging_id)

    def list_all(self) -> list[Packaging]:
        """All packagings in insertion order."""
        return list(self._packagings.values())

    def __len__(self) -> int:
        return len(self._packagings)
