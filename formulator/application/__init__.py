"""Application layer: use cases orchestrating the formulation engine."""
