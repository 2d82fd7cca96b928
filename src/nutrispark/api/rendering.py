"""HTML rendering for the NutriSpark pages."""

from html import escape

from nutrispark.domain.chart import donut_segments
from nutrispark.domain.foods import MACRONUTRIENT_COLORS
from nutrispark.services.pages import DetailPage, SearchPage, food_route

_STYLE = """
      body { background: #111827; color: #fff; margin: 0;
             font-family: ui-sans-serif, system-ui, sans-serif; }
      .center { min-height: 100vh; display: flex; flex-direction: column;
                align-items: center; justify-content: center; padding: 1.5rem; }
      .title-colored { color: #F28907; }
      .panel { background: #1f2937; border-radius: 0.5rem; padding: 1rem; }
      .swatch { display: inline-block; width: 0.75rem; height: 0.75rem;
                margin-right: 0.5rem; }
      .row { display: flex; align-items: center; margin-bottom: 0.5rem; }
      a { color: #fff; }
"""


def _layout(title: str, body: str) -> str:
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{escape(title)}</title>
    <style>{_STYLE}</style>
  </head>
  <body>
{body}
  </body>
</html>
"""


def format_number(value: float) -> str:
    """Print a number the way the JSON payload carried it."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def render_loading() -> str:
    """Render the loading placeholder."""
    return _layout(
        "NutriSpark",
        '    <div class="center"><p>Loading...</p></div>',
    )


def render_search_page(page: SearchPage, query: str | None = None) -> str:
    """Render the landing page with its food picker."""
    if page.is_loading:
        return render_loading()
    matches = page.filter(query)
    if matches:
        items = "\n".join(
            f'          <li><a href="{escape(food_route(food.value))}">'
            f"{escape(food.label)}</a></li>"
            for food in matches
        )
        results = f"        <ul>\n{items}\n        </ul>"
    else:
        results = "        <p>No food found.</p>"
    options = "\n".join(
        f'            <option value="{escape(food.value)}">'
        f"{escape(food.label)}</option>"
        for food in page.foods
    )
    search_value = escape(query or "")
    body = f"""    <div class="center">
      <h1>Welcome to <span class="title-colored">NutriSpark</span></h1>
      <p>Discover the nutritional values of your favorite foods.
        Use the search below to get started.</p>
      <form method="get" action="/">
        <input name="q" value="{search_value}" placeholder="Search food..." />
        <button type="submit">Search</button>
      </form>
      <form method="get" action="/">
        <select name="value" aria-label="{escape(page.selected_label)}">
            <option value="">{escape(page.selected_label)}</option>
{options}
        </select>
        <button type="submit">Go</button>
      </form>
      <div>
{results}
      </div>
    </div>"""
    return _layout("NutriSpark", body)


def render_detail_page(page: DetailPage) -> str:
    """Render the nutrient breakdown, or the placeholder while not ready."""
    if not page.is_ready or page.food is None:
        return render_loading()
    food = page.food
    arcs = "\n".join(
        f'        <path d="{segment.path}" fill="{segment.color}" />'
        for segment in donut_segments(page.macronutrients)
    )
    colored = list(zip(page.macronutrients, MACRONUTRIENT_COLORS, strict=True))
    legend = "\n".join(
        f'        <span class="swatch" style="background: {color}"></span>'
        f"{entry.name.capitalize()}"
        for entry, color in colored
    )
    rows = "\n".join(
        f'        <div class="row"><span class="swatch" '
        f'style="background: {color}"></span>'
        f"{entry.name.capitalize()}: {format_number(entry.value)} g</div>"
        for entry, color in colored
    )
    vitamins = escape(", ".join(food.vitamins))
    minerals = escape(", ".join(food.minerals))
    body = f"""    <div style="padding: 2rem">
      <a href="/" aria-label="Back">&#8630; Back</a>
      <h1>{escape(food.name)}</h1>
      <svg width="200" height="200" viewBox="0 0 200 200" role="img">
{arcs}
      </svg>
      <div>
{legend}
      </div>
      <h2>Nutritional Information per 100 grams:</h2>
      <div class="panel">
        <div>Calories: {format_number(food.calories)} cal</div>
{rows}
      </div>
      <div class="row"><strong>Vitamins:</strong>&nbsp;{vitamins}</div>
      <div class="row"><strong>Minerals:</strong>&nbsp;{minerals}</div>
    </div>"""
    return _layout(food.name, body)
