"""Tests for the Supabase food repository."""

import re
from dataclasses import dataclass, field

from nutrispark.adapters.supabase_food_repository import SupabaseFoodRepository


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    rows: list[dict[str, object]]
    selected: str | None = None
    ordered_by: str | None = None
    filters: list[tuple[str, str]] = field(default_factory=list)

    def select(self, columns: str) -> "FakeTable":
        self.selected = columns
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.ordered_by = column
        return self

    def ilike(self, column: str, pattern: str) -> "FakeTable":
        self.filters.append((column, pattern))
        return self

    def execute(self) -> FakeResponse:
        rows = list(self.rows)
        for column, pattern in self.filters:
            regex = "".join(
                "." if char == "_" else ".*" if char == "%" else re.escape(char)
                for char in pattern
            )
            rows = [
                row
                for row in rows
                if re.fullmatch(regex, str(row[column]), flags=re.IGNORECASE)
            ]
        if self.ordered_by:
            rows.sort(key=lambda row: str(row[self.ordered_by]))
        return FakeResponse(data=rows)


@dataclass
class FakeSupabaseClient:
    rows: list[dict[str, object]]
    tables: list[FakeTable] = field(default_factory=list)
    table_names: list[str] = field(default_factory=list)

    def table(self, name: str) -> FakeTable:
        self.table_names.append(name)
        table = FakeTable(rows=self.rows)
        self.tables.append(table)
        return table


_ROWS = [
    {
        "name": "T-Bone Steak",
        "calories": 247,
        "carbohydrates": 0,
        "protein": 19,
        "fat": 18,
        "vitamins": ["Vitamin B12"],
        "minerals": ["Iron", "Zinc"],
    },
    {
        "name": "Brown Rice",
        "calories": 111,
        "carbohydrates": 23,
        "protein": 2.6,
        "fat": 0.9,
        "vitamins": None,
        "minerals": None,
    },
]


def test_list_foods_orders_by_name() -> None:
    client = FakeSupabaseClient(rows=list(_ROWS))
    repository = SupabaseFoodRepository(client, table="foods")  # type: ignore[arg-type]

    foods = repository.list_foods()

    assert [food.name for food in foods] == ["Brown Rice", "T-Bone Steak"]
    assert client.table_names == ["foods"]
    assert client.tables[0].ordered_by == "name"


def test_find_by_slug_resolves_spaces() -> None:
    client = FakeSupabaseClient(rows=list(_ROWS))
    repository = SupabaseFoodRepository(client)  # type: ignore[arg-type]

    food = repository.find_by_slug("brown-rice")

    assert food is not None
    assert food.name == "Brown Rice"
    assert food.vitamins == ()
    assert client.tables[0].filters == [("name", "brown_rice")]


def test_find_by_slug_resolves_literal_hyphens() -> None:
    client = FakeSupabaseClient(rows=list(_ROWS))
    repository = SupabaseFoodRepository(client)  # type: ignore[arg-type]

    food = repository.find_by_slug("t-bone-steak")

    assert food is not None
    assert food.minerals == ("Iron", "Zinc")


def test_find_by_slug_missing_returns_none() -> None:
    client = FakeSupabaseClient(rows=list(_ROWS))
    repository = SupabaseFoodRepository(client)  # type: ignore[arg-type]

    assert repository.find_by_slug("dragon-fruit") is None
