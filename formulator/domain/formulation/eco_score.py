"""Packaging eco-score heuristic."""

from formulator.domain.formulation.models import EcoScore, EcoScoreClass


def classify_packaging(
    packaging_weight: float,
    recyclable_weight: float,
    product_weight: float,
) -> EcoScore:
    """
    Classify packaging sustainability.

    ratio = packaging / product weight × 100, recyclable_rate =
    recyclable / packaging weight × 100 (both 0 when the divisor is 0).
    First match wins:
        no packaging and product weight > 0   -> A
        ratio < 5 and recyclable_rate > 90    -> A
        ratio < 10 and recyclable_rate > 80   -> B
        ratio > 20 or recyclable_rate < 50    -> D
        otherwise                             -> C

    Args:
        packaging_weight: Total packaging weight in g
        recyclable_weight: Recyclable, compostable or reusable part in g
        product_weight: Net product weight in g

    Returns:
        EcoScore
    """
    ratio = packaging_weight / product_weight * 100 if product_weight > 0 else 0.0
    recyclable_rate = recyclable_weight / packaging_weight * 100 if packaging_weight > 0 else 0.0

    if packaging_weight == 0 and product_weight > 0:
        # Bulk product
        eco_class = EcoScoreClass.A
    elif ratio < 5 and recyclable_rate > 90:
        eco_class = EcoScoreClass.A
    elif ratio < 10 and recyclable_rate > 80:
        eco_class = EcoScoreClass.B
    elif ratio > 20 or recyclable_rate < 50:
        eco_class = EcoScoreClass.D
    else:
        eco_class = EcoScoreClass.C

    return EcoScore(ratio=ratio, recyclable_rate=recyclable_rate, eco_class=eco_class)
