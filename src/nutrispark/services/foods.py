"""Food catalog service backing the foods API."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutrispark.domain.foods import Food, slugify
from nutrispark.services.cache import Cache

_logger = logging.getLogger(__name__)


class FoodNotFoundError(LookupError):
    """Raised when no food matches a slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Food not found: {slug}")
        self.slug = slug


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def list_foods(self) -> list[Food]:
        """Return every food ordered by name."""

    def find_by_slug(self, slug: str) -> Food | None:
        """Return the food whose name slugifies to slug, if any."""


@dataclass
class FoodCatalogService:
    """Read-only access to the food catalog with caching."""

    repository: FoodRepository
    cache: Cache
    list_ttl_seconds: int = 300
    food_ttl_seconds: int = 3600

    def list_foods(self) -> list[Food]:
        """Return all known foods."""
        cached = self.cache.get("foods:all")
        if isinstance(cached, list):
            return cached
        foods = self.repository.list_foods()
        self.cache.set("foods:all", foods, ttl_seconds=self.list_ttl_seconds)
        _logger.debug("Loaded %s foods from repository", len(foods))
        return foods

    def get_food(self, slug: str) -> Food:
        """Return the food for a slug or raise FoodNotFoundError."""
        normalized = slugify(slug)
        cache_key = f"foods:slug:{normalized}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, Food):
            return cached
        food = self.repository.find_by_slug(normalized)
        if food is None:
            raise FoodNotFoundError(normalized)
        self.cache.set(cache_key, food, ttl_seconds=self.food_ttl_seconds)
        return food
