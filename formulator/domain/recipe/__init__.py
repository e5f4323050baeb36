"""Recipe aggregate."""

from .models import EnergyCostConfig, Recipe, RecipeItem, RecipePackagingItem

__all__ = [
    "Recipe",
    "RecipeItem",
    "RecipePackagingItem",
    "EnergyCostConfig",
]
