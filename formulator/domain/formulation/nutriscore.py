"""
Nutri-Score grading (2023 update, general solid foods).

Point tables and the protein rule follow the 2023 update of the
Nutri-Score scientific committee. Each table is a monotonic step
function; values outside the table range clamp to its floor or cap.

Known deviations kept for compatibility with existing formulations:
- Salt points are read from salt grams × 1000, not from sodium
  (salt × 400). A product with 1g salt/100g scores 10 salt points.
- The red-meat flag is accepted but does not change the grading; the
  official red-meat protein cap is not applied.

References:
    Scientific Committee of the Nutri-Score. Update report from the
    Scientific Committee of the Nutri-Score 2022 (algorithm for foods).
"""

import math

from formulator.domain.catalog.models import NutrientProfile
from formulator.domain.formulation.models import NutriScoreGrade, NutriScoreResult

# Negative score from which protein points stop counting (unless the
# product is mostly fruit/vegetables).
PROTEIN_RULE_THRESHOLD = 11
FRUIT_VEG_PROTEIN_EXEMPTION = 80


def energy_points(kj: float) -> int:
    """Energy points, 0-10 (one step per 335 kJ)."""
    if kj <= 335:
        return 0
    if kj > 3350:
        return 10
    return math.floor((kj - 1) / 335) + 1


def saturated_fat_points(g: float) -> int:
    """Saturated fat points, 0-10 (one step per g)."""
    if g <= 1:
        return 0
    if g > 10:
        return 10
    return math.floor(g)


def sugar_points(g: float) -> int:
    """Sugar points, 0-15 (one step per 4.5 g; the cap was 10 before 2023)."""
    if g <= 0:
        return 0
    if g > 67.5:
        return 15
    return math.floor(g / 4.5)


def salt_points(salt_g: float) -> int:
    """
    Salt points, 0-20 (the cap was 10 before 2023).

    The table is indexed with salt_g × 1000 as the milligram figure.
    """
    salt_mg = salt_g * 1000
    if salt_mg <= 200:
        return 0
    if salt_mg > 2000:
        return 20
    return min(20, math.floor(salt_mg / 100))


def fiber_points(g: float) -> int:
    """Fiber points, 0-5 (AOAC thresholds)."""
    if g <= 3.0:
        return 0
    if g > 7.4:
        return 5
    return math.floor((g - 3.0) / 0.8) + 1


def protein_points(g: float) -> int:
    """Protein points, 0-7."""
    if g <= 2.4:
        return 0
    if g > 17:
        return 7
    return math.floor((g - 2.4) / 2.4) + 1


def fruit_veg_points(percent: float) -> int:
    """Fruit, vegetable and legume points: 0, 1, 2 or 5."""
    if percent <= 40:
        return 0
    if percent <= 60:
        return 1
    if percent <= 80:
        return 2
    return 5


def grade_for_score(score: int) -> NutriScoreGrade:
    """
    Map a final score to its letter.

    Thresholds (inclusive upper bounds): A ≤ 0, B ≤ 2, C ≤ 10, D ≤ 18, E above.
    """
    if score <= 0:
        return NutriScoreGrade.A
    if score <= 2:
        return NutriScoreGrade.B
    if score <= 10:
        return NutriScoreGrade.C
    if score <= 18:
        return NutriScoreGrade.D
    return NutriScoreGrade.E


def grade_nutri_score(
    nutrients: NutrientProfile,
    fruit_veg_percent: float,
    is_red_meat: bool = False,
) -> NutriScoreResult:
    """
    Grade a per-100g nutrient profile.

    Scoring:
        N = energy + sugars + saturated fat + salt points
        P = fiber + protein + fruit/veg points
        If N < 11, or fruit/veg > 80%:  score = N - P
        Otherwise:                      score = N - (fiber + fruit/veg)

    Args:
        nutrients: Nutrient profile per 100g of product
        fruit_veg_percent: Fruit/vegetable/legume share in %
        is_red_meat: Red-meat product flag (not used by the current rules)

    Returns:
        NutriScoreResult with grade, score and point breakdown

    Example:
        >>> result = grade_nutri_score(NutrientProfile(), 0.0)
        >>> result.grade, result.score
        (<NutriScoreGrade.A: 'A'>, 0)
    """
    negative = (
        energy_points(nutrients.energy_kj)
        + sugar_points(nutrients.sugars)
        + saturated_fat_points(nutrients.saturated_fat)
        + salt_points(nutrients.salt)
    )

    p_fiber = fiber_points(nutrients.fiber)
    p_protein = protein_points(nutrients.protein)
    p_fruit_veg = fruit_veg_points(fruit_veg_percent)

    count_protein = (
        negative < PROTEIN_RULE_THRESHOLD or fruit_veg_percent > FRUIT_VEG_PROTEIN_EXEMPTION
    )
    positive = p_fiber + p_fruit_veg + (p_protein if count_protein else 0)
    score = negative - positive

    return NutriScoreResult(
        grade=grade_for_score(score),
        score=score,
        negative_points=negative,
        positive_points=positive,
        protein_points_counted=count_protein,
    )
