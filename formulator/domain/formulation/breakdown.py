"""Per-line and per-group composition of a recipe, for display."""

from typing import Iterable

from formulator.domain.catalog.models import Ingredient
from formulator.domain.formulation.calculator import index_by_id
from formulator.domain.formulation.inco import UNKNOWN_INGREDIENT_NAME
from formulator.domain.formulation.models import (
    CompositionBreakdown,
    GroupBreakdown,
    ItemBreakdown,
)
from formulator.domain.recipe.models import Recipe


def _percent(weight: float, total: float) -> float:
    return weight / total * 100 if total > 0 else 0.0


def build_breakdown(
    recipe: Recipe,
    ingredients: Iterable[Ingredient],
    total_input_weight: float,
) -> CompositionBreakdown:
    """
    Break a recipe down by line and by display group.

    Groups are reported in first-seen order; ungrouped lines only appear
    as lines. Unknown ingredients are named "Inconnu" and cost nothing.

    Args:
        recipe: Recipe to break down
        ingredients: Ingredient reference list
        total_input_weight: Denominator for percentages (from the formulation result)

    Returns:
        CompositionBreakdown
    """
    ingredients_by_id = index_by_id(ingredients)

    lines: list[ItemBreakdown] = []
    for item in recipe.items:
        ingredient = ingredients_by_id.get(item.ingredient_id)
        cost = (item.quantity / 1000) * ingredient.cost_per_kg if ingredient else 0.0
        lines.append(
            ItemBreakdown(
                item_id=item.id,
                ingredient_name=ingredient.name if ingredient else UNKNOWN_INGREDIENT_NAME,
                group=item.group,
                quantity=item.quantity,
                percent=_percent(item.quantity, total_input_weight),
                cost=cost,
            )
        )

    groups: list[GroupBreakdown] = []
    for name in recipe.groups():
        members = [line for line in lines if line.group == name]
        weight = sum(line.quantity for line in members)
        groups.append(
            GroupBreakdown(
                group=name,
                weight=weight,
                percent=_percent(weight, total_input_weight),
                cost=sum(line.cost for line in members),
            )
        )

    return CompositionBreakdown(items=tuple(lines), groups=tuple(groups))
