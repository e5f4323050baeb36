"""
Formulation result models.

Immutable value objects produced by the formulation engine. A fresh
instance is built on every calculation.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from formulator.domain.catalog.models import Allergen, LabelTag, NutrientProfile


class NutriScoreGrade(str, Enum):
    """Nutri-Score letter, A (best) to E (worst)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"


class EcoScoreClass(str, Enum):
    """
    Packaging eco-score class.

    Shares the A-E scale with Nutri-Score, but the packaging heuristic
    never assigns E.
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"


class NutriScoreResult(BaseModel):
    """
    Nutri-Score grading outcome.

    Attributes:
        grade: Letter grade
        score: Final numeric score (negative points minus counted positive points)
        negative_points: Energy + sugars + saturated fat + salt points
        positive_points: Positive points actually subtracted
        protein_points_counted: False when the protein rule withheld protein points
    """

    model_config = ConfigDict(frozen=True)

    grade: NutriScoreGrade
    score: int
    negative_points: int = 0
    positive_points: int = 0
    protein_points_counted: bool = True


class EcoScore(BaseModel):
    """Packaging sustainability heuristic."""

    model_config = ConfigDict(frozen=True)

    ratio: float = Field(0.0, description="Packaging weight / product weight, in %")
    recyclable_rate: float = Field(0.0, description="Recyclable share of packaging weight, in %")
    eco_class: EcoScoreClass = EcoScoreClass.C


class FormulationResult(BaseModel):
    """
    Derived metrics for a recipe.

    Weights are in g, costs in the catalog currency.

    Attributes:
        total_input_weight: Sum of resolved ingredient quantities
        final_weight: Net weight after moisture loss
        gross_weight: Net weight plus packaging weight
        yield_percent: final / input weight, in %
        cost_per_kg: Material cost per kg of finished product
        nutrients_per_100g: Nutrient profile of the finished product
        allergens: Declared allergens, sorted
        traces: "May contain" allergens not already declared, sorted
        ingredient_list: INCO ingredient declaration
        calculated_labels: Labels shared by every ingredient
        theoretical_brix: Brix concentrated by moisture loss, capped at 100
        fruit_vegetable_percent: Fruit/veg/legume share fed to Nutri-Score
    """

    model_config = ConfigDict(frozen=True)

    total_input_weight: float
    final_weight: float
    gross_weight: float
    yield_percent: float

    cost_per_kg: float
    total_material_cost: float
    total_packaging_cost: float
    total_energy_cost: float
    total_production_cost: float

    nutrients_per_100g: NutrientProfile
    allergens: tuple[Allergen, ...] = ()
    traces: tuple[Allergen, ...] = ()
    ingredient_list: str = ""

    nutri_score: NutriScoreGrade
    nutri_score_score: int
    calculated_labels: tuple[LabelTag, ...] = ()
    theoretical_brix: float = 0.0
    fruit_vegetable_percent: float = 0.0

    carbon_footprint_per_kg: float = 0.0
    eco_score: EcoScore = Field(default_factory=EcoScore)


class CostingSummary(BaseModel):
    """Selling price derived from the production cost and target margin."""

    model_config = ConfigDict(frozen=True)

    target_margin: float
    total_production_cost: float
    selling_price: float
    margin_value: float
    full_cost_per_kg: float


class ItemBreakdown(BaseModel):
    """Share and cost of one recipe line."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    ingredient_name: str
    group: Optional[str] = None
    quantity: float
    percent: float
    cost: float


class GroupBreakdown(BaseModel):
    """Totals for one display group."""

    model_config = ConfigDict(frozen=True)

    group: str
    weight: float
    percent: float
    cost: float


class CompositionBreakdown(BaseModel):
    """Per-line and per-group composition of a recipe."""

    model_config = ConfigDict(frozen=True)

    items: tuple[ItemBreakdown, ...] = ()
    groups: tuple[GroupBreakdown, ...] = ()


class FormulationReport(BaseModel):
    """Everything the recipe editor displays for a recipe."""

    model_config = ConfigDict(frozen=True)

    recipe_id: str
    result: FormulationResult
    costing: CostingSummary
    breakdown: CompositionBreakdown
    unresolved_ingredient_ids: tuple[str, ...] = ()
    unresolved_packaging_ids: tuple[str, ...] = ()
