"""FormulationCalculator - derived metrics of a recipe."""

from dataclasses import dataclass, field
from typing import Iterable

from formulator.domain.catalog.models import (
    Allergen,
    Ingredient,
    LabelTag,
    NutrientProfile,
    Packaging,
)
from formulator.domain.formulation.eco_score import classify_packaging
from formulator.domain.formulation.inco import build_ingredient_declaration
from formulator.domain.formulation.models import FormulationResult
from formulator.domain.formulation.nutriscore import grade_nutri_score
from formulator.domain.recipe.models import Recipe, RecipeItem, RecipePackagingItem


def index_by_id(entries: Iterable[Ingredient | Packaging]) -> dict:
    """Index catalog entries by id; the first entry wins on duplicate ids."""
    indexed: dict = {}
    for entry in entries:
        indexed.setdefault(entry.id, entry)
    return indexed


@dataclass
class _IngredientTotals:
    """Running totals of the ingredient pass."""

    input_weight: float = 0.0
    material_cost: float = 0.0
    co2: float = 0.0
    weighted_brix: float = 0.0
    fruit_veg_weight: float = 0.0
    has_red_meat: bool = False
    nutrients: NutrientProfile = field(default_factory=NutrientProfile.zero)
    labels: frozenset[LabelTag] = frozenset(LabelTag)
    allergens: set[Allergen] = field(default_factory=set)
    traces: set[Allergen] = field(default_factory=set)

    def add(self, item: RecipeItem, ingredient: Ingredient) -> None:
        quantity = item.quantity
        self.input_weight += quantity
        self.material_cost += (quantity / 1000) * ingredient.cost_per_kg
        if ingredient.carbon_footprint:
            self.co2 += (quantity / 1000) * ingredient.carbon_footprint
        if ingredient.is_red_meat:
            self.has_red_meat = True
        if ingredient.physico.brix is not None:
            self.weighted_brix += ingredient.physico.brix * quantity
        if ingredient.fruit_vegetable_percent:
            self.fruit_veg_weight += quantity * (ingredient.fruit_vegetable_percent / 100)

        self.labels = self.labels & ingredient.labels
        self.allergens.update(ingredient.allergens)
        self.traces.update(ingredient.traces)
        self.nutrients = self.nutrients.plus(ingredient.nutrients.scale(quantity / 100))


@dataclass
class _PackagingTotals:
    """Running totals of the packaging pass."""

    cost: float = 0.0
    weight: float = 0.0
    recyclable_weight: float = 0.0

    def add(self, item: RecipePackagingItem, packaging: Packaging) -> None:
        self.cost += item.quantity * packaging.cost_per_unit
        weight = item.quantity * packaging.weight
        self.weight += weight
        if packaging.is_recyclable:
            self.recyclable_weight += weight


class FormulationCalculator:
    """
    Aggregate a recipe into weight, cost, nutrition, regulatory,
    environmental and packaging metrics.

    Pure: inputs are never mutated, the same inputs always give the same
    result, and nothing is raised for well-formed inputs. Lines whose
    ingredient or packaging id is not in the reference lists contribute
    nothing (the INCO declaration still lists them as "Inconnu").

    Weights:
        final = max(0, input × (1 - moisture_loss / 100))
        yield = final / input × 100
        gross = final + packaging weight

    Concentration:
        nutrients per 100g = totals × 100 / final
        brix = min(100, Σ(brix × qty) / input × input / final)

    Every ratio is 0 when its divisor is 0 (empty recipe, 100% loss).
    """

    def calculate(
        self,
        recipe: Recipe,
        ingredients: Iterable[Ingredient],
        packagings: Iterable[Packaging],
    ) -> FormulationResult:
        """Calculate the formulation result of a recipe.

        Args:
            recipe: Recipe to evaluate
            ingredients: Ingredient reference list
            packagings: Packaging reference list

        Returns:
            FormulationResult: Freshly built result

        Example:
            >>> flour = Ingredient(id="1", name="Farine", cost_per_kg=10)
            >>> recipe = Recipe(
            ...     id="R1", items=[RecipeItem(id="i1", ingredient_id="1", quantity=500)]
            ... )
            >>> result = FormulationCalculator().calculate(recipe, [flour], [])
            >>> result.total_material_cost, result.cost_per_kg
            (5.0, 10.0)
        """
        ingredients_by_id = index_by_id(ingredients)
        packagings_by_id = index_by_id(packagings)

        # 1. Ingredients
        totals = _IngredientTotals()
        for item in recipe.items:
            ingredient = ingredients_by_id.get(item.ingredient_id)
            if ingredient is None:
                continue
            totals.add(item, ingredient)

        # Declared presence supersedes "may contain"
        traces = totals.traces - totals.allergens

        # 2. Packaging
        pack = _PackagingTotals()
        for pack_item in recipe.packaging_items:
            packaging = packagings_by_id.get(pack_item.packaging_id)
            if packaging is None:
                continue
            pack.add(pack_item, packaging)

        # 3. Energy
        energy_cost = recipe.energy_cost_config.cost() if recipe.energy_cost_config else 0.0

        # 4. Weights
        input_weight = totals.input_weight
        loss_factor = recipe.moisture_loss / 100
        final_weight = max(0.0, input_weight * (1 - loss_factor))
        yield_percent = final_weight / input_weight * 100 if input_weight > 0 else 0.0
        gross_weight = final_weight + pack.weight

        # 5. Costs
        cost_per_kg = _per_kg(totals.material_cost, final_weight)
        production_cost = totals.material_cost + pack.cost + recipe.labor_cost + energy_cost
        carbon_per_kg = _per_kg(totals.co2, final_weight)

        # 6. Nutrients per 100g of finished product
        concentration = 100 / final_weight if final_weight > 0 else 0.0
        nutrients_per_100g = totals.nutrients.scale(concentration)

        # 7. Brix
        brix = totals.weighted_brix / input_weight if input_weight > 0 else 0.0
        final_brix = min(100.0, brix * (input_weight / final_weight)) if final_weight > 0 else 0.0

        # 8-9. Nutri-Score
        fruit_veg_percent = (
            totals.fruit_veg_weight / input_weight * 100 if input_weight > 0 else 0.0
        )
        nutri_score = grade_nutri_score(nutrients_per_100g, fruit_veg_percent, totals.has_red_meat)

        return FormulationResult(
            total_input_weight=input_weight,
            final_weight=final_weight,
            gross_weight=gross_weight,
            yield_percent=yield_percent,
            cost_per_kg=cost_per_kg,
            total_material_cost=totals.material_cost,
            total_packaging_cost=pack.cost,
            total_energy_cost=energy_cost,
            total_production_cost=production_cost,
            nutrients_per_100g=nutrients_per_100g,
            allergens=_sorted_allergens(totals.allergens),
            traces=_sorted_allergens(traces),
            ingredient_list=build_ingredient_declaration(recipe.items, ingredients_by_id),
            nutri_score=nutri_score.grade,
            nutri_score_score=nutri_score.score,
            calculated_labels=tuple(tag for tag in LabelTag if tag in totals.labels),
            theoretical_brix=final_brix,
            fruit_vegetable_percent=fruit_veg_percent,
            carbon_footprint_per_kg=carbon_per_kg,
            eco_score=classify_packaging(pack.weight, pack.recyclable_weight, final_weight),
        )


def _per_kg(amount: float, weight_g: float) -> float:
    return amount / (weight_g / 1000) if weight_g > 0 else 0.0


def _sorted_allergens(allergens: Iterable[Allergen]) -> tuple[Allergen, ...]:
    return tuple(sorted(allergens, key=lambda a: a.value))


def calculate_formulation(
    recipe: Recipe,
    ingredients: Iterable[Ingredient],
    packagings: Iterable[Packaging],
) -> FormulationResult:
    """Module-level shortcut for FormulationCalculator().calculate()."""
    return FormulationCalculator().calculate(recipe, ingredients, packagings)
