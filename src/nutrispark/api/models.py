"""Pydantic models for foods API payloads."""

from pydantic import BaseModel

from nutrispark.domain.foods import Food, food_to_payload


class FoodResponse(BaseModel):
    """Food record as served by the foods API."""

    name: str
    calories: int | float
    carbohydrates: int | float
    protein: int | float
    fat: int | float
    vitamins: list[str] = []
    minerals: list[str] = []

    @classmethod
    def from_food(cls, food: Food) -> "FoodResponse":
        """Build the response payload for a domain food."""
        return cls(**food_to_payload(food))
