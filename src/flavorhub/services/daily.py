"""Recipe of the day selection."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime
from zoneinfo import ZoneInfo

from flavorhub.domain.recipes import Recipe
from flavorhub.services.enrichment import RecipeEnricher
from flavorhub.services.recipes import RecipeRepository


def local_today() -> date:
    """Return the current date in the process's local timezone."""
    return date.today()  # noqa: DTZ011


def zoned_today(timezone_name: str) -> Callable[[], date]:
    """Return a clock yielding the current date in the given IANA timezone."""
    tz = ZoneInfo(timezone_name)

    def today() -> date:
        return datetime.now(tz=tz).date()

    return today


@dataclass
class DailySelector:
    """Deterministically picks one recipe per calendar day.

    The pick is ``recipes[day_of_year % len(recipes)]`` over the catalog in
    repository order, so adding, removing or reordering recipes can change
    the pick within the same day.
    """

    repository: RecipeRepository
    enricher: RecipeEnricher
    today: Callable[[], date] = field(default_factory=lambda: local_today)

    def pick_of_the_day(self) -> Recipe | None:
        """Return today's recipe, or None when the catalog is empty."""
        recipes = self.repository.list_recipes()
        if not recipes:
            return None
        day_of_year = self.today().timetuple().tm_yday
        return self.enricher.enrich(recipes[day_of_year % len(recipes)])
