"""
Formulation Service.

Orchestrates catalog lookups, the formulation engine, costing and
composition breakdown for the recipe editor.
"""

from typing import Optional

import structlog

from formulator.domain.catalog.ports import IIngredientCatalog, IPackagingCatalog
from formulator.domain.formulation.breakdown import build_breakdown
from formulator.domain.formulation.calculator import FormulationCalculator
from formulator.domain.formulation.costing import summarize_costing
from formulator.domain.formulation.models import FormulationReport, FormulationResult
from formulator.domain.recipe.models import Recipe
from formulator.infrastructure.config import get_default_target_margin

logger = structlog.get_logger(__name__)


class FormulationService:
    """Computes formulation reports from catalog data.

    Flow:
    1. Read ingredient and packaging lists from the catalogs
    2. Run the formulation calculator
    3. Derive costing summary and composition breakdown

    Unknown ingredient/packaging references never fail the calculation;
    they are reported on the FormulationReport and logged.
    """

    def __init__(
        self,
        ingredient_catalog: IIngredientCatalog,
        packaging_catalog: IPackagingCatalog,
        calculator: Optional[FormulationCalculator] = None,
        default_margin: Optional[float] = None,
    ) -> None:
        """Initialize service.

        Args:
            ingredient_catalog: Ingredient reference data
            packaging_catalog: Packaging reference data
            calculator: Formulation calculator (default instance if None)
            default_margin: Margin for recipes without one (read from config if None)
        """
        self.ingredient_catalog = ingredient_catalog
        self.packaging_catalog = packaging_catalog
        self.calculator = calculator or FormulationCalculator()
        self.default_margin = (
            default_margin if default_margin is not None else get_default_target_margin()
        )

    def calculate(self, recipe: Recipe) -> FormulationResult:
        """Run the formulation calculator against the catalogs.

        Args:
            recipe: Recipe to evaluate

        Returns:
            FormulationResult
        """
        return self.calculator.calculate(
            recipe,
            self.ingredient_catalog.list_all(),
            self.packaging_catalog.list_all(),
        )

    def formulate(self, recipe: Recipe) -> FormulationReport:
        """Build the full report displayed for a recipe.

        Args:
            recipe: Recipe to evaluate

        Returns:
            FormulationReport with result, costing and breakdown

        Example:
            >>> service = FormulationService(ingredients, packagings)
            >>> report = service.formulate(recipe)
            >>> report.result.nutri_score
            <NutriScoreGrade.D: 'D'>
        """
        ingredients = self.ingredient_catalog.list_all()
        packagings = self.packaging_catalog.list_all()

        result = self.calculator.calculate(recipe, ingredients, packagings)
        costing = summarize_costing(recipe, result, default_margin=self.default_margin)
        breakdown = build_breakdown(recipe, ingredients, result.total_input_weight)

        unresolved_ingredients = self._unresolved_ingredient_ids(recipe)
        unresolved_packagings = self._unresolved_packaging_ids(recipe)
        if unresolved_ingredients or unresolved_packagings:
            logger.warning(
                "Unresolved recipe references skipped",
                recipe_id=recipe.id,
                ingredient_ids=list(unresolved_ingredients),
                packaging_ids=list(unresolved_packagings),
            )

        logger.info(
            "formulation_calculated",
            recipe_id=recipe.id,
            final_weight=result.final_weight,
            nutri_score=result.nutri_score.value,
            eco_class=result.eco_score.eco_class.value,
            unresolved=len(unresolved_ingredients) + len(unresolved_packagings),
        )

        return FormulationReport(
            recipe_id=recipe.id,
            result=result,
            costing=costing,
            breakdown=breakdown,
            unresolved_ingredient_ids=unresolved_ingredients,
            unresolved_packaging_ids=unresolved_packagings,
        )

    def _unresolved_ingredient_ids(self, recipe: Recipe) -> tuple[str, ...]:
        missing: list[str] = []
        for item in recipe.items:
            if self.ingredient_catalog.find(item.ingredient_id) is None:
                if item.ingredient_id not in missing:
                    missing.append(item.ingredient_id)
        return tuple(missing)

    def _unresolved_packaging_ids(self, recipe: Recipe) -> tuple[str, ...]:
        missing: list[str] = []
        for item in recipe.packaging_items:
            if self.packaging_catalog.find(item.packaging_id) is None:
                if item.packaging_id not in missing:
                    missing.append(item.packaging_id)
        return tuple(missing)
