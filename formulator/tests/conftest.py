"""
Shared fixtures for formulator tests.

Seed catalog modelled on a small bakery: a pure-butter brioche with
flour, water, butter, sugar and eggs, plus a strawberry purée.
"""

import pytest

from formulator.domain.catalog.models import (
    Allergen,
    Ingredient,
    LabelTag,
    NutrientProfile,
    Packaging,
    PackagingType,
    PhysicoChemical,
    Recyclability,
)
from formulator.domain.recipe.models import Recipe, RecipeItem, RecipePackagingItem
from formulator.infrastructure.catalog.in_memory import (
    InMemoryIngredientCatalog,
    InMemoryPackagingCatalog,
)


# ═══════════════════════════════════════════════════════════
# INGREDIENT FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def flour() -> Ingredient:
    """Organic wheat flour T55."""
    return Ingredient(
        id="1",
        name="Farine de Blé T55 Bio",
        supplier_id="s1",
        cost_per_kg=1.10,
        nutrients=NutrientProfile(
            energy_kcal=364,
            protein=10.3,
            fat=1,
            saturated_fat=0.1,
            carbohydrates=76,
            sugars=0.3,
            fiber=2.7,
            salt=0.01,
        ),
        allergens=[Allergen.GLUTEN],
        labels=[LabelTag.ORGANIC, LabelTag.VEGAN],
        carbon_footprint=0.8,
    )


@pytest.fixture
def water() -> Ingredient:
    """Spring water."""
    return Ingredient(
        id="2",
        name="Eau de source",
        cost_per_kg=0.15,
        allergens=["Aucun"],
        labels=[LabelTag.VEGAN, LabelTag.ORGANIC, LabelTag.HALAL],
        physico=PhysicoChemical(ph=7, aw=1),
        is_liquid=True,
    )


@pytest.fixture
def butter() -> Ingredient:
    """Organic unsalted butter 82%."""
    return Ingredient(
        id="3",
        name="Beurre Doux 82% Bio",
        supplier_id="s3",
        cost_per_kg=9.50,
        nutrients=NutrientProfile(
            energy_kcal=743,
            protein=0.7,
            fat=82,
            saturated_fat=55,
            carbohydrates=0.6,
            sugars=0.6,
            salt=0.02,
        ),
        allergens=[Allergen.MILK],
        labels=[LabelTag.ORGANIC, LabelTag.VEGETARIAN],
        carbon_footprint=9.0,
    )


@pytest.fixture
def sugar() -> Ingredient:
    """Organic cane sugar."""
    return Ingredient(
        id="4",
        name="Sucre Canne Bio",
        supplier_id="s2",
        cost_per_kg=1.40,
        nutrients=NutrientProfile(energy_kcal=400, carbohydrates=100, sugars=100),
        labels=[LabelTag.ORGANIC, LabelTag.VEGAN],
        physico=PhysicoChemical(brix=100),
    )


@pytest.fixture
def egg() -> Ingredient:
    """Free-range whole egg."""
    return Ingredient(
        id="5",
        name="Œuf Entier Plein Air",
        cost_per_kg=3.80,
        nutrients=NutrientProfile(
            energy_kcal=140,
            protein=12.5,
            fat=9.5,
            saturated_fat=3.1,
            carbohydrates=0.7,
            sugars=0.7,
            salt=0.3,
        ),
        allergens=[Allergen.EGGS],
        traces=[Allergen.MILK, Allergen.MUSTARD],
        labels=[LabelTag.VEGETARIAN],
        is_liquid=True,
    )


@pytest.fixture
def strawberry() -> Ingredient:
    """Strawberry purée."""
    return Ingredient(
        id="6",
        name="Purée de Fraise",
        cost_per_kg=4.50,
        nutrients=NutrientProfile(
            energy_kcal=32,
            protein=0.7,
            fat=0.3,
            carbohydrates=7.7,
            sugars=4.9,
            fiber=2,
        ),
        labels=[LabelTag.VEGAN, LabelTag.ORGANIC],
        physico=PhysicoChemical(brix=10, ph=3.5),
        fruit_vegetable_percent=100,
        is_liquid=True,
    )


@pytest.fixture
def ingredients(
    flour: Ingredient,
    water: Ingredient,
    butter: Ingredient,
    sugar: Ingredient,
    egg: Ingredient,
    strawberry: Ingredient,
) -> list[Ingredient]:
    """Full ingredient reference list."""
    return [flour, water, butter, sugar, egg, strawberry]


# ═══════════════════════════════════════════════════════════
# PACKAGING FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def packagings() -> list[Packaging]:
    """Sachet (not recyclable), carton (recyclable) and label (recyclable)."""
    return [
        Packaging(
            id="p1",
            name="Sachet PE 500g",
            type=PackagingType.PRIMARY,
            material="PEBD",
            recyclability=Recyclability.NON_RECYCLABLE,
            weight=8,
            cost_per_unit=0.05,
        ),
        Packaging(
            id="p2",
            name="Carton 12U",
            type=PackagingType.SECONDARY,
            material="Carton Recyclé",
            recyclability=Recyclability.RECYCLABLE,
            weight=250,
            cost_per_unit=0.45,
        ),
        Packaging(
            id="p3",
            name="Etiquette Adhésive",
            type=PackagingType.PRIMARY,
            material="Papier",
            recyclability=Recyclability.RECYCLABLE,
            weight=1,
            cost_per_unit=0.02,
        ),
    ]


# ═══════════════════════════════════════════════════════════
# RECIPE FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def brioche() -> Recipe:
    """Pure-butter brioche, 1080g of dough, 12% baking loss."""
    return Recipe(
        id="R1",
        name="Brioche Bio Pur Beurre",
        version="1.2",
        items=[
            RecipeItem(id="i1", ingredient_id="1", quantity=500, group="Pâte"),
            RecipeItem(id="i2", ingredient_id="2", quantity=150, group="Pâte"),
            RecipeItem(id="i3", ingredient_id="3", quantity=200, group="Pâte"),
            RecipeItem(id="i4", ingredient_id="4", quantity=80, group="Pâte"),
            RecipeItem(id="i5", ingredient_id="5", quantity=120, group="Pâte"),
            RecipeItem(id="i6", ingredient_id="5", quantity=30, group="Dorure"),
        ],
        packaging_items=[
            RecipePackagingItem(id="pk1", packaging_id="p1", quantity=2),
            RecipePackagingItem(id="pk2", packaging_id="p3", quantity=2),
        ],
        moisture_loss=12,
        labor_cost=15,
        target_margin=40,
    )


# ═══════════════════════════════════════════════════════════
# CATALOG FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def ingredient_catalog(ingredients: list[Ingredient]) -> InMemoryIngredientCatalog:
    """Ingredient catalog seeded with every ingredient fixture."""
    return InMemoryIngredientCatalog(ingredients)


@pytest.fixture
def packaging_catalog(packagings: list[Packaging]) -> InMemoryPackagingCatalog:
    """Packaging catalog seeded with every packaging fixture."""
    return InMemoryPackagingCatalog(packagings)
