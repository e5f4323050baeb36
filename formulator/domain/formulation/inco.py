"""
INCO ingredient declaration.

Ingredients listed by descending input weight, allergens emphasised
in upper case, e.g.:

    Farine de Blé T55 Bio (dont GLUTEN), Beurre Doux 82% Bio (dont LAIT), Eau de source.
"""

from typing import Iterable, Mapping, Optional

from formulator.domain.catalog.models import Ingredient
from formulator.domain.recipe.models import RecipeItem

UNKNOWN_INGREDIENT_NAME = "Inconnu"


def declaration_entry(ingredient: Optional[Ingredient]) -> str:
    """Render one ingredient of the declaration, allergens in declared order."""
    if ingredient is None:
        return UNKNOWN_INGREDIENT_NAME

    if not ingredient.allergens:
        return ingredient.name
    emphasised = ", ".join(a.value for a in ingredient.allergens).upper()
    return f"{ingredient.name} (dont {emphasised})"


def build_ingredient_declaration(
    items: Iterable[RecipeItem],
    ingredients_by_id: Mapping[str, Ingredient],
) -> str:
    """
    Build the INCO declaration string.

    Lines referencing an unknown ingredient are listed as "Inconnu".
    Equal quantities keep recipe order.

    Args:
        items: Recipe lines
        ingredients_by_id: Catalog ingredients keyed by id

    Returns:
        Comma-separated declaration ending with a period
    """
    ordered = sorted(items, key=lambda item: item.quantity, reverse=True)
    entries = [
        declaration_entry(ingredients_by_id.get(item.ingredient_id)) for item in ordered
    ]
    return ", ".join(entries) + "."
