"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrispark.adapters.foods_api_client import FoodsApiClient, HttpxFoodsApiClient
from nutrispark.adapters.supabase_food_repository import SupabaseFoodRepository
from nutrispark.config import Settings
from nutrispark.services.cache import InMemoryCache
from nutrispark.services.foods import FoodCatalogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_catalog_service: FoodCatalogService
    foods_api_client: FoodsApiClient
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(
        supabase_client, table=resolved_settings.foods_table
    )
    food_catalog_service = FoodCatalogService(
        repository=food_repository,
        cache=InMemoryCache(),
        list_ttl_seconds=resolved_settings.foods_list_ttl_seconds,
        food_ttl_seconds=resolved_settings.food_ttl_seconds,
    )
    foods_api_client = HttpxFoodsApiClient.create(
        base_url=resolved_settings.api_base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )

    async def close_resources() -> None:
        await foods_api_client.close()

    return AppContainer(
        settings=resolved_settings,
        food_catalog_service=food_catalog_service,
        foods_api_client=foods_api_client,
        close_resources=close_resources,
    )
