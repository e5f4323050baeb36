"""
Catalog domain models.

Reference entities supplied by the ingredient and packaging management
collaborators. The formulation engine reads them and never mutates them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Placeholder values used upstream to mean "no allergen".
ALLERGEN_SENTINELS = frozenset({"aucun", "none", ""})

KCAL_TO_KJ = 4.184


class Allergen(str, Enum):
    """
    EU regulated allergens (Regulation 1169/2011, Annex II).

    Values are the French display names printed on labels.
    """

    GLUTEN = "Gluten"
    CRUSTACEANS = "Crustacés"
    EGGS = "Œufs"
    FISH = "Poisson"
    PEANUTS = "Arachides"
    SOY = "Soja"
    MILK = "Lait"
    NUTS = "Fruits à coque"
    CELERY = "Céleri"
    MUSTARD = "Moutarde"
    SESAME = "Sésame"
    SULPHITES = "Sulfites"
    LUPIN = "Lupin"
    MOLLUSCS = "Mollusques"


class LabelTag(str, Enum):
    """
    Marketing/regulatory label an ingredient may carry.

    Declaration order is the canonical order of calculated labels.
    """

    ORGANIC = "Bio"
    VEGAN = "Vegan"
    VEGETARIAN = "Végétarien"
    KOSHER = "Casher"
    HALAL = "Halal"
    CLEAN_LABEL = "Clean Label"
    FROZEN = "Surgelé"


class PackagingType(str, Enum):
    """Packaging level: primary (contact), secondary (box), tertiary (pallet)."""

    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    TERTIARY = "Tertiary"


class Recyclability(str, Enum):
    """End-of-life class of a packaging material."""

    RECYCLABLE = "Recyclable"
    NON_RECYCLABLE = "Non-Recyclable"
    COMPOSTABLE = "Compostable"
    REUSABLE = "Reusable"

    def counts_as_recyclable(self) -> bool:
        """Whether the material counts towards the recyclable share.

        Returns:
            bool: True for recyclable, compostable and reusable materials
        """
        return self is not Recyclability.NON_RECYCLABLE


class NutrientProfile(BaseModel):
    """
    Nutrient values for a reference quantity.

    On an ingredient the reference quantity is 100g. The engine also
    uses this model for running totals and for the per-100g result, so
    values are not sign-constrained.

    Attributes:
        energy_kcal: Energy in kcal
        protein: Protein in g
        fat: Total fat in g
        saturated_fat: Saturated fatty acids in g
        carbohydrates: Carbohydrates in g
        sugars: Sugars in g
        fiber: Dietary fiber in g
        salt: Salt in g

    Example:
        >>> flour = NutrientProfile(energy_kcal=364, protein=10.3, carbohydrates=76)
        >>> flour.scale(5.0).energy_kcal
        1820.0
    """

    model_config = ConfigDict(frozen=True)

    energy_kcal: float = Field(0.0, description="Energy in kcal")
    protein: float = Field(0.0, description="Protein in g")
    fat: float = Field(0.0, description="Total fat in g")
    saturated_fat: float = Field(0.0, description="Saturated fat in g")
    carbohydrates: float = Field(0.0, description="Carbohydrates in g")
    sugars: float = Field(0.0, description="Sugars in g")
    fiber: float = Field(0.0, description="Fiber in g")
    salt: float = Field(0.0, description="Salt in g")

    @classmethod
    def zero(cls) -> NutrientProfile:
        """Profile with every nutrient at 0."""
        return cls()

    def scale(self, factor: float) -> NutrientProfile:
        """
        Multiply every nutrient by factor.

        Args:
            factor: Scaling factor (e.g. quantity_g / 100)

        Returns:
            New scaled NutrientProfile
        """
        return NutrientProfile(
            energy_kcal=self.energy_kcal * factor,
            protein=self.protein * factor,
            fat=self.fat * factor,
            saturated_fat=self.saturated_fat * factor,
            carbohydrates=self.carbohydrates * factor,
            sugars=self.sugars * factor,
            fiber=self.fiber * factor,
            salt=self.salt * factor,
        )

    def plus(self, other: NutrientProfile) -> NutrientProfile:
        """Nutrient-wise sum of two profiles."""
        return NutrientProfile(
            energy_kcal=self.energy_kcal + other.energy_kcal,
            protein=self.protein + other.protein,
            fat=self.fat + other.fat,
            saturated_fat=self.saturated_fat + other.saturated_fat,
            carbohydrates=self.carbohydrates + other.carbohydrates,
            sugars=self.sugars + other.sugars,
            fiber=self.fiber + other.fiber,
            salt=self.salt + other.salt,
        )

    @property
    def energy_kj(self) -> float:
        """Energy in kJ (1 kcal = 4.184 kJ)."""
        return self.energy_kcal * KCAL_TO_KJ


class PhysicoChemical(BaseModel):
    """Optional physico-chemical attributes of an ingredient."""

    model_config = ConfigDict(frozen=True)

    brix: Optional[float] = Field(None, description="Sugar concentration in °Bx")
    ph: Optional[float] = Field(None, description="pH")
    aw: Optional[float] = Field(None, description="Water activity")


def _strip_allergen_sentinels(value: Any) -> Any:
    """Drop "no allergen" placeholders from a raw allergen collection."""
    if value is None:
        return ()
    if isinstance(value, (str, Allergen)):
        value = [value]
    cleaned = []
    for entry in value:
        if entry is None:
            continue
        if isinstance(entry, str) and entry.strip().lower() in ALLERGEN_SENTINELS:
            continue
        cleaned.append(entry)
    return cleaned


class Ingredient(BaseModel):
    """
    Raw material used in recipes.

    Nutrients are expressed per 100g of ingredient. Traces are allergens
    the ingredient may contain through cross-contamination. Allergens
    and traces keep their declared order, which the INCO declaration uses.

    Example:
        >>> butter = Ingredient(
        ...     id="3",
        ...     name="Beurre Doux 82% Bio",
        ...     cost_per_kg=9.5,
        ...     nutrients=NutrientProfile(energy_kcal=743, fat=82, saturated_fat=55),
        ...     allergens=["Lait"],
        ...     labels=[LabelTag.ORGANIC, LabelTag.VEGETARIAN],
        ... )
        >>> Allergen.MILK in butter.allergens
        True
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Ingredient identifier")
    name: str = Field(..., description="Display name")
    supplier_id: Optional[str] = Field(None, description="Supplier reference")
    cost_per_kg: float = Field(0.0, ge=0, description="Cost in currency/kg")
    nutrients: NutrientProfile = Field(default_factory=NutrientProfile)
    allergens: tuple[Allergen, ...] = ()
    traces: tuple[Allergen, ...] = ()
    labels: frozenset[LabelTag] = Field(default_factory=frozenset)
    physico: PhysicoChemical = Field(default_factory=PhysicoChemical)
    fruit_vegetable_percent: float = Field(0.0, ge=0, le=100, description="Fruit/veg/legume %")
    carbon_footprint: Optional[float] = Field(None, description="kg CO2e per kg")
    is_liquid: bool = False
    is_red_meat: bool = False

    @field_validator("allergens", "traces", mode="before")
    @classmethod
    def drop_sentinels(cls, v: Any) -> Any:
        """Remove "Aucun"/"none" placeholders."""
        return _strip_allergen_sentinels(v)

    @field_validator("allergens", "traces")
    @classmethod
    def dedupe_allergens(cls, v: tuple[Allergen, ...]) -> tuple[Allergen, ...]:
        """Keep the first occurrence of each allergen, in declared order."""
        return tuple(dict.fromkeys(v))


class Packaging(BaseModel):
    """
    Packaging component.

    Attributes:
        weight: Unit weight in g
        cost_per_unit: Unit cost
        recyclability: End-of-life class (absent means not recyclable)
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Packaging identifier")
    name: str = Field(..., description="Display name")
    supplier_id: Optional[str] = None
    type: PackagingType = PackagingType.PRIMARY
    material: str = ""
    recyclability: Optional[Recyclability] = None
    weight: float = Field(0.0, ge=0, description="Unit weight in g")
    cost_per_unit: float = Field(0.0, ge=0, description="Unit cost")

    @property
    def is_recyclable(self) -> bool:
        """Recyclable, compostable or reusable."""
        return self.recyclability is not None and self.recyclability.counts_as_recyclable()
