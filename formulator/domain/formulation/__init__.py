"""Formulation engine: calculator, Nutri-Score grader and derived views."""

from .breakdown import build_breakdown
from .calculator import FormulationCalculator, calculate_formulation
from .costing import DEFAULT_TARGET_MARGIN, summarize_costing
from .eco_score import classify_packaging
from .inco import build_ingredient_declaration
from .models import (
    CompositionBreakdown,
    CostingSummary,
    EcoScore,
    EcoScoreClass,
    FormulationReport,
    FormulationResult,
    GroupBreakdown,
    ItemBreakdown,
    NutriScoreGrade,
    NutriScoreResult,
)
from .nutriscore import grade_nutri_score

__all__ = [
    "FormulationCalculator",
    "calculate_formulation",
    "grade_nutri_score",
    "classify_packaging",
    "build_ingredient_declaration",
    "summarize_costing",
    "build_breakdown",
    "DEFAULT_TARGET_MARGIN",
    "FormulationResult",
    "FormulationReport",
    "NutriScoreGrade",
    "NutriScoreResult",
    "EcoScore",
    "EcoScoreClass",
    "CostingSummary",
    "CompositionBreakdown",
    "ItemBreakdown",
    "GroupBreakdown",
]
