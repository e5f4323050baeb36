"""Ingredient and packaging reference data."""

from .models import (
    Allergen,
    Ingredient,
    LabelTag,
    NutrientProfile,
    Packaging,
    PackagingType,
    PhysicoChemical,
    Recyclability,
)
from .ports import IIngredientCatalog, IPackagingCatalog

__all__ = [
    "Allergen",
    "LabelTag",
    "NutrientProfile",
    "PhysicoChemical",
    "Ingredient",
    "Packaging",
    "PackagingType",
    "Recyclability",
    "IIngredientCatalog",
    "IPackagingCatalog",
]
