"""Donut chart geometry for macronutrient breakdowns."""

import math
from dataclasses import dataclass

from nutrispark.domain.foods import MACRONUTRIENT_COLORS, MacronutrientEntry


@dataclass(frozen=True)
class DonutSegment:
    """A drawable arc of the donut chart."""

    name: str
    value: float
    color: str
    start_angle: float
    end_angle: float
    path: str


@dataclass(frozen=True)
class DonutGeometry:
    """Placement of the donut inside its SVG viewport."""

    cx: float = 100.0
    cy: float = 100.0
    inner_radius: float = 60.0
    outer_radius: float = 80.0
    padding_angle: float = 5.0


def donut_segments(
    entries: list[MacronutrientEntry],
    geometry: DonutGeometry | None = None,
    colors: tuple[str, ...] = MACRONUTRIENT_COLORS,
) -> list[DonutSegment]:
    """Split a full circle into padded arcs proportional to entry values.

    Angles start at 0 degrees (three o'clock) and grow counter-clockwise.
    Entries with a zero value take no space and get no padding; colors are
    assigned by the entry's position, so a skipped entry never shifts them.
    """
    resolved = geometry or DonutGeometry()
    total = sum(max(entry.value, 0.0) for entry in entries)
    visible = [entry for entry in entries if entry.value > 0]
    if total <= 0 or not visible:
        return []

    available = 360.0 - resolved.padding_angle * len(visible)
    if available <= 0:
        return []

    segments: list[DonutSegment] = []
    cursor = 0.0
    for index, entry in enumerate(entries):
        if entry.value <= 0:
            continue
        sweep = entry.value / total * available
        start = cursor
        end = cursor + sweep
        segments.append(
            DonutSegment(
                name=entry.name,
                value=entry.value,
                color=colors[index % len(colors)],
                start_angle=start,
                end_angle=end,
                path=_sector_path(resolved, start, end),
            )
        )
        cursor = end + resolved.padding_angle
    return segments


def _point(geometry: DonutGeometry, radius: float, angle: float) -> tuple[float, float]:
    radians = math.radians(angle)
    return (
        geometry.cx + radius * math.cos(radians),
        geometry.cy - radius * math.sin(radians),
    )


def _sector_path(geometry: DonutGeometry, start: float, end: float) -> str:
    """Return an SVG path for an annular sector."""
    large_arc = 1 if end - start > 180 else 0
    outer_start = _point(geometry, geometry.outer_radius, start)
    outer_end = _point(geometry, geometry.outer_radius, end)
    inner_end = _point(geometry, geometry.inner_radius, end)
    inner_start = _point(geometry, geometry.inner_radius, start)
    return (
        f"M {outer_start[0]:.3f} {outer_start[1]:.3f} "
        f"A {geometry.outer_radius:g} {geometry.outer_radius:g} 0 {large_arc} 0 "
        f"{outer_end[0]:.3f} {outer_end[1]:.3f} "
        f"L {inner_end[0]:.3f} {inner_end[1]:.3f} "
        f"A {geometry.inner_radius:g} {geometry.inner_radius:g} 0 {large_arc} 1 "
        f"{inner_start[0]:.3f} {inner_start[1]:.3f} Z"
    )
