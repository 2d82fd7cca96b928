"""Server-rendered NutriSpark pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from nutrispark.api.rendering import render_detail_page, render_search_page
from nutrispark.services.pages import DetailPage, SearchPage

if TYPE_CHECKING:
    from nutrispark.containers import AppContainer

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def search_page(
    request: Request, q: str | None = None, value: str | None = None
) -> Response:
    """Landing page; a selected food redirects to its detail page."""
    container: AppContainer = request.app.state.container
    page = SearchPage(client=container.foods_api_client)
    await page.load()
    if value:
        route = page.select(value)
        if route:
            return RedirectResponse(route, status_code=status.HTTP_303_SEE_OTHER)
    return HTMLResponse(render_search_page(page, query=q))


@router.get("/food/{name}", response_class=HTMLResponse)
async def food_page(name: str, request: Request) -> HTMLResponse:
    """Nutrient breakdown for one food."""
    container: AppContainer = request.app.state.container
    page = DetailPage(client=container.foods_api_client)
    await page.load(name)
    return HTMLResponse(render_detail_page(page))
