"""
Formulator.

Food-product formulation engine: derives cost, nutrition, regulatory,
environmental and packaging metrics from a recipe and its reference data.

Structure:
- domain/: Business logic and domain models (pure, side-effect free)
- application/: Use cases orchestrating domain services
- infrastructure/: Configuration and in-memory catalogs
- tests/: Test suite
"""

__version__ = "1.0.0"
