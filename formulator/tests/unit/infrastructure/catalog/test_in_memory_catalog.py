"""Unit tests for the in-memory catalogs."""

import pytest

from formulator.domain.catalog.models import Ingredient, Packaging
from formulator.domain.catalog.ports import IIngredientCatalog, IPackagingCatalog
from formulator.domain.shared.errors import (
    CatalogError,
    DuplicateCatalogEntryError,
    IngredientNotFoundError,
    PackagingNotFoundError,
)
from formulator.infrastructure.catalog.in_memory import (
    InMemoryIngredientCatalog,
    InMemoryPackagingCatalog,
)


class TestInMemoryIngredientCatalog:
    """Test ingredient catalog operations."""

    def test_implements_port(self, ingredient_catalog: InMemoryIngredientCatalog) -> None:
        """Satisfies the catalog protocol."""
        assert isinstance(ingredient_catalog, IIngredientCatalog)

    def test_seeded_in_order(self, ingredient_catalog: InMemoryIngredientCatalog) -> None:
        """list_all keeps insertion order."""
        assert [i.id for i in ingredient_catalog.list_all()] == ["1", "2", "3", "4", "5", "6"]
        assert len(ingredient_catalog) == 6

    def test_get_and_find(self, ingredient_catalog: InMemoryIngredientCatalog) -> None:
        """get raises on unknown id, find returns None."""
        assert ingredient_catalog.get("3").name == "Beurre Doux 82% Bio"
        assert ingredient_catalog.find("99") is None

        with pytest.raises(IngredientNotFoundError, match="Ingredient not found: 99"):
            ingredient_catalog.get("99")

    def test_duplicate_add_rejected(self, flour: Ingredient) -> None:
        """Ids are unique."""
        catalog = InMemoryIngredientCatalog([flour])

        with pytest.raises(DuplicateCatalogEntryError) as exc_info:
            catalog.add(flour)

        assert exc_info.value.kind == "Ingredient"
        assert exc_info.value.entry_id == "1"
        assert isinstance(exc_info.value, CatalogError)

    def test_replace(self, flour: Ingredient) -> None:
        """replace overwrites in place."""
        catalog = InMemoryIngredientCatalog([flour])
        cheaper = flour.model_copy(update={"cost_per_kg": 0.9})

        catalog.replace(cheaper)

        assert catalog.get("1").cost_per_kg == 0.9
        assert len(catalog) == 1

    def test_remove(self, flour: Ingredient) -> None:
        """remove deletes, and raises on unknown id."""
        catalog = InMemoryIngredientCatalog([flour])

        catalog.remove("1")

        assert len(catalog) == 0
        with pytest.raises(IngredientNotFoundError):
            catalog.remove("1")


class TestInMemoryPackagingCatalog:
    """Test packaging catalog operations."""

    def test_implements_port(self, packaging_catalog: InMemoryPackagingCatalog) -> None:
        """Satisfies the catalog protocol."""
        assert isinstance(packaging_catalog, IPackagingCatalog)

    def test_get_and_find(self, packaging_catalog: InMemoryPackagingCatalog) -> None:
        """get raises on unknown id, find returns None."""
        assert packaging_catalog.get("p2").name == "Carton 12U"
        assert packaging_catalog.find("zz") is None

        with pytest.raises(PackagingNotFoundError):
            packaging_catalog.get("zz")

    def test_duplicate_add_rejected(self, packagings: list[Packaging]) -> None:
        """Ids are unique."""
        catalog = InMemoryPackagingCatalog(packagings)

        with pytest.raises(DuplicateCatalogEntryError, match="Packaging already exists: p1"):
            catalog.add(packagings[0])

    def test_empty_catalog(self) -> None:
        """Catalog can start empty."""
        catalog = InMemoryPackagingCatalog()

        assert catalog.list_all() == []
        with pytest.raises(PackagingNotFoundError):
            catalog.remove("p1")
