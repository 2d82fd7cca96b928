"""Food domain models."""

from dataclasses import dataclass

MACRONUTRIENT_NAMES = ("carbohydrates", "protein", "fat")
MACRONUTRIENT_COLORS = ("#F28907", "#5079F2", "#F2220F")


@dataclass(frozen=True)
class Food:
    """Full nutrient record for a food, values per 100 grams."""

    name: str
    calories: float
    carbohydrates: float
    protein: float
    fat: float
    vitamins: tuple[str, ...] = ()
    minerals: tuple[str, ...] = ()


@dataclass(frozen=True)
class FoodSummary:
    """Selectable entry on the search page."""

    value: str
    label: str


@dataclass(frozen=True)
class MacronutrientEntry:
    """One slice of the macronutrient chart."""

    name: str
    value: float


def slugify(name: str) -> str:
    """Return the route slug for a food name."""
    return name.lower().replace(" ", "-")


def summarize(food_name: str) -> FoodSummary:
    """Build the search entry for a food name."""
    return FoodSummary(value=slugify(food_name), label=food_name)


def macronutrient_entries(food: Food) -> list[MacronutrientEntry]:
    """Return carbohydrates, protein and fat in chart order."""
    return [
        MacronutrientEntry(name=name, value=getattr(food, name))
        for name in MACRONUTRIENT_NAMES
    ]


def parse_food(payload: dict[str, object]) -> Food:
    """Parse a food payload from the API or the database."""
    return Food(
        name=str(payload.get("name", "")),
        calories=_number(payload.get("calories")),
        carbohydrates=_number(payload.get("carbohydrates")),
        protein=_number(payload.get("protein")),
        fat=_number(payload.get("fat")),
        vitamins=_strings(payload.get("vitamins")),
        minerals=_strings(payload.get("minerals")),
    )


def food_to_payload(food: Food) -> dict[str, object]:
    """Serialize a food into its JSON payload."""
    return {
        "name": food.name,
        "calories": food.calories,
        "carbohydrates": food.carbohydrates,
        "protein": food.protein,
        "fat": food.fat,
        "vitamins": list(food.vitamins),
        "minerals": list(food.minerals),
    }


def _number(raw: object) -> float:
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, int | float):
        return raw
    return float(str(raw))


def _strings(raw: object) -> tuple[str, ...]:
    if not isinstance(raw, list | tuple):
        return ()
    return tuple(str(item) for item in raw)
