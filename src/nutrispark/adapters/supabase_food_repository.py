"""Supabase implementation of the food catalog."""

from dataclasses import dataclass

from supabase import Client

from nutrispark.domain.foods import Food, parse_food, slugify
from nutrispark.services.foods import FoodRepository

_COLUMNS = "name,calories,carbohydrates,protein,fat,vitamins,minerals"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for the foods table."""

    client: Client
    table: str = "foods"

    def list_foods(self) -> list[Food]:
        """Return every food ordered by name."""
        response = (
            self.client.table(self.table).select(_COLUMNS).order("name").execute()
        )
        return [parse_food(row) for row in response.data or []]

    def find_by_slug(self, slug: str) -> Food | None:
        """Return the food whose name slugifies to slug, if any."""
        # A hyphen in a slug stands for either a space or a literal hyphen.
        pattern = slug.replace("-", "_")
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .ilike("name", pattern)
            .execute()
        )
        for row in response.data or []:
            food = parse_food(row)
            if slugify(food.name) == slug:
                return food
        return None
