"""Domain layer for the formulation engine."""
