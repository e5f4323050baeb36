"""Costing summary: selling price from production cost and target margin."""

from formulator.domain.formulation.models import CostingSummary, FormulationResult
from formulator.domain.recipe.models import Recipe

DEFAULT_TARGET_MARGIN = 30.0


def summarize_costing(
    recipe: Recipe,
    result: FormulationResult,
    default_margin: float = DEFAULT_TARGET_MARGIN,
) -> CostingSummary:
    """
    Price a batch from its full production cost.

    Formula:
        selling price = production cost × (1 + margin / 100)
        margin value  = selling price - production cost
        cost per kg   = production cost / final weight × 1000

    A recipe margin of 0 means "not set" and falls back to default_margin.

    Args:
        recipe: Recipe carrying the target margin
        result: Formulation result of that recipe
        default_margin: Margin in % used when the recipe has none

    Returns:
        CostingSummary

    Example:
        >>> summary = summarize_costing(recipe, result)  # production cost 10.0
        >>> summary.selling_price
        13.0
    """
    margin = recipe.target_margin or default_margin
    production_cost = result.total_production_cost
    selling_price = production_cost * (1 + margin / 100)

    full_cost_per_kg = (
        production_cost / result.final_weight * 1000 if result.final_weight > 0 else 0.0
    )

    return CostingSummary(
        target_margin=margin,
        total_production_cost=production_cost,
        selling_price=selling_price,
        margin_value=selling_price - production_cost,
        full_cost_per_kg=full_cost_per_kg,
    )
