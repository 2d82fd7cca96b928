"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from nutrispark.adapters.foods_api_client import FoodsApiClient
from nutrispark.config import Settings
from nutrispark.containers import AppContainer
from nutrispark.domain.foods import Food, food_to_payload, slugify
from nutrispark.services.cache import InMemoryCache
from nutrispark.services.foods import FoodCatalogService, FoodRepository

APPLE = Food(
    name="Apple",
    calories=52,
    carbohydrates=14,
    protein=0.3,
    fat=0.2,
    vitamins=("Vitamin C", "Vitamin K"),
    minerals=("Potassium",),
)
BROWN_RICE = Food(
    name="Brown Rice",
    calories=111,
    carbohydrates=23,
    protein=2.6,
    fat=0.9,
    vitamins=("Vitamin B6",),
    minerals=("Magnesium", "Manganese"),
)


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: list[Food] = field(default_factory=lambda: [APPLE, BROWN_RICE])
    list_calls: int = 0
    lookup_calls: int = 0

    def list_foods(self) -> list[Food]:
        self.list_calls += 1
        return sorted(self.foods, key=lambda food: food.name)

    def find_by_slug(self, slug: str) -> Food | None:
        self.lookup_calls += 1
        for food in self.foods:
            if slugify(food.name) == slug:
                return food
        return None


@dataclass
class FakeFoodsApiClient(FoodsApiClient):
    """Fake foods API client serving payloads from memory."""

    foods: list[dict[str, object]] = field(
        default_factory=lambda: [food_to_payload(APPLE), food_to_payload(BROWN_RICE)]
    )
    error: Exception | None = None
    requested: list[str] = field(default_factory=list)

    async def list_foods(self) -> list[dict[str, object]]:
        self.requested.append("all")
        if self.error is not None:
            raise self.error
        return self.foods

    async def get_food(self, slug: str) -> dict[str, object]:
        self.requested.append(slug)
        if self.error is not None:
            raise self.error
        for payload in self.foods:
            if slugify(str(payload["name"])) == slug:
                return payload
        raise LookupError(slug)


@dataclass
class GatedFoodsApiClient(FakeFoodsApiClient):
    """Fake client whose responses wait until released per slug."""

    gates: dict[str, asyncio.Event] = field(default_factory=dict)

    def gate(self, slug: str) -> asyncio.Event:
        return self.gates.setdefault(slug, asyncio.Event())

    async def get_food(self, slug: str) -> dict[str, object]:
        await self.gate(slug).wait()
        return await super().get_food(slug)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def foods_api_client() -> FakeFoodsApiClient:
    return FakeFoodsApiClient()


@pytest.fixture
def container(
    settings: Settings,
    food_repository: InMemoryFoodRepository,
    foods_api_client: FakeFoodsApiClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_catalog_service=FoodCatalogService(
            repository=food_repository, cache=InMemoryCache()
        ),
        foods_api_client=foods_api_client,
        close_resources=close_resources,
    )
