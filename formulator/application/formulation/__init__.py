"""Formulation use cases."""

from .service import FormulationService

__all__ = ["FormulationService"]
