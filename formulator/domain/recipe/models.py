"""
Recipe domain models.

A recipe is the aggregate root the formulation engine reads. It is
owned and mutated by the recipe editor; the engine never modifies it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipeItem(BaseModel):
    """
    Ingredient line of a recipe.

    Attributes:
        ingredient_id: Reference to a catalog ingredient
        quantity: Input (mise en œuvre) weight in g
        group: Optional display group (e.g. "Pâte", "Dorure")
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Line identifier")
    ingredient_id: str = Field(..., description="Ingredient reference")
    quantity: float = Field(0.0, description="Input weight in g")
    group: Optional[str] = Field(None, description="Display group")


class RecipePackagingItem(BaseModel):
    """Packaging line of a recipe; quantity is a (possibly fractional) unit count."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Line identifier")
    packaging_id: str = Field(..., description="Packaging reference")
    quantity: float = Field(0.0, description="Number of units")


class EnergyCostConfig(BaseModel):
    """
    Process energy cost settings.

    Cost = (duration_minutes / 60) × power_kw × cost_per_kwh, applied
    only when all three values are non-zero.
    """

    model_config = ConfigDict(frozen=True)

    duration_minutes: float = Field(0.0, ge=0, description="Machine time in minutes")
    power_kw: float = Field(0.0, ge=0, description="Power in kW")
    cost_per_kwh: float = Field(0.0, ge=0, description="Tariff in currency/kWh")

    def is_complete(self) -> bool:
        """All three factors are set."""
        return bool(self.duration_minutes and self.power_kw and self.cost_per_kwh)

    def cost(self) -> float:
        """Energy cost for one batch, 0 when incomplete."""
        if not self.is_complete():
            return 0.0
        return (self.duration_minutes / 60) * self.power_kw * self.cost_per_kwh


class Recipe(BaseModel):
    """
    Recipe aggregate.

    Attributes:
        items: Ingredient lines, in editor order
        packaging_items: Packaging lines
        moisture_loss: Weight lost during processing, in %
        labor_cost: Flat labor cost per batch
        energy_cost_config: Optional energy cost settings
        target_margin: Target margin in %

    Example:
        >>> recipe = Recipe(
        ...     id="R1",
        ...     name="Brioche",
        ...     items=[RecipeItem(id="i1", ingredient_id="1", quantity=500)],
        ...     moisture_loss=12,
        ... )
        >>> len(recipe.items)
        1
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Recipe identifier")
    name: str = Field("", description="Recipe name")
    version: str = Field("1.0", description="Recipe version")
    items: tuple[RecipeItem, ...] = ()
    packaging_items: tuple[RecipePackagingItem, ...] = ()
    moisture_loss: float = Field(0.0, ge=0, le=100, description="Moisture loss in %")
    labor_cost: float = Field(0.0, ge=0, description="Flat labor cost")
    energy_cost_config: Optional[EnergyCostConfig] = None
    target_margin: float = Field(0.0, ge=0, description="Target margin in %")
    target_batch_weight: float = Field(0.0, ge=0, description="Target batch weight in g")

    def groups(self) -> list[str]:
        """Distinct item groups, in first-seen order."""
        seen: list[str] = []
        for item in self.items:
            if item.group and item.group not in seen:
                seen.append(item.group)
        return seen
