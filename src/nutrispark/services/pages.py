"""Page state for the search and food detail pages.

Each page fetches its data from the foods API once per load, keeps the
result in instance state, and exposes what the renderer needs. Fetch
failures are logged and swallowed: the search page shows an empty list and
the detail page keeps showing its loading placeholder.
"""

import logging
from dataclasses import dataclass, field

from nutrispark.adapters.foods_api_client import FoodsApiClient
from nutrispark.domain.foods import (
    Food,
    FoodSummary,
    MacronutrientEntry,
    macronutrient_entries,
    parse_food,
    summarize,
)

_logger = logging.getLogger(__name__)

SELECT_PLACEHOLDER = "Select foods..."


def food_route(value: str) -> str:
    """Return the detail page route for a food slug."""
    return f"/food/{value}"


@dataclass
class SearchPage:
    """Landing page listing every food for selection."""

    client: FoodsApiClient
    foods: list[FoodSummary] = field(default_factory=list)
    value: str = ""
    is_loading: bool = True

    async def load(self) -> None:
        """Fetch the food list and derive one summary per food."""
        try:
            payload = await self.client.list_foods()
            self.foods = [summarize(str(item["name"])) for item in payload]
        except Exception:
            _logger.exception("Failed to load food list")
        self.is_loading = False

    def select(self, value: str) -> str | None:
        """Toggle the selection and return the route to navigate to.

        Only listed foods can be selected; any other value leaves the
        selection as it was.
        """
        if value != self.value and not any(f.value == value for f in self.foods):
            return None
        self.value = "" if value == self.value else value
        if self.value:
            return food_route(self.value)
        return None

    def filter(self, query: str | None) -> list[FoodSummary]:
        """Return summaries whose label contains query, ignoring case."""
        needle = (query or "").strip().lower()
        if not needle:
            return list(self.foods)
        return [food for food in self.foods if needle in food.label.lower()]

    @property
    def selected_label(self) -> str:
        """Label shown on the selection trigger."""
        for food in self.foods:
            if food.value == self.value:
                return food.label
        return SELECT_PLACEHOLDER


@dataclass
class DetailPage:
    """Nutrient breakdown for a single food.

    Every call to load() takes a new generation number. A response that
    arrives after a newer load() started is dropped, so a slow request for
    an old slug cannot replace the state of the current one.
    """

    client: FoodsApiClient
    slug: str | None = None
    food: Food | None = None
    macronutrients: list[MacronutrientEntry] = field(default_factory=list)
    is_loading: bool = True
    _generation: int = field(default=0, init=False, repr=False)

    async def load(self, slug: str) -> None:
        """Fetch the food for slug and derive the chart data."""
        self._generation += 1
        generation = self._generation
        if slug != self.slug:
            self.food = None
            self.macronutrients = []
        self.slug = slug
        self.is_loading = True
        try:
            payload = await self.client.get_food(slug)
            food = parse_food(payload)
            entries = macronutrient_entries(food)
        except Exception:
            if generation != self._generation:
                _logger.debug("Dropping stale failure for %s", slug, exc_info=True)
                return
            _logger.exception("Failed to load food", extra={"slug": slug})
            self.is_loading = False
            return
        if generation != self._generation:
            _logger.debug("Dropping stale response for %s", slug)
            return
        self.food = food
        self.macronutrients = entries
        self.is_loading = False

    @property
    def is_ready(self) -> bool:
        """True when the page has data to render."""
        return not self.is_loading and self.food is not None
