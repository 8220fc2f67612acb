"""Attach live rating statistics to recipes."""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from flavorhub.domain.recipes import Recipe
from flavorhub.services.ratings import RatingAggregator


@dataclass
class RecipeEnricher:
    """Populates the derived rating fields of recipes."""

    aggregator: RatingAggregator

    def enrich(self, recipe: Recipe | None) -> Recipe | None:
        """Return a copy of the recipe with average and count filled in."""
        if recipe is None:
            return None
        stats = self.aggregator.stats(recipe.id)
        return replace(
            recipe,
            average_rating=stats.average,
            rating_count=stats.count or 0,
        )

    def enrich_all(self, recipes: Iterable[Recipe]) -> list[Recipe]:
        """Enrich each recipe, keeping input order."""
        return [self.enrich(recipe) for recipe in recipes]
