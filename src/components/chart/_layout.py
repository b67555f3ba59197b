"""
Chart layout - marker geometry for the abstractness/instability chart.

Functional core: no I/O, randomness and ids are injected.

Key behaviors:
- Markers are laid out in ascending size order
- Radius interpolates linearly between 5 and 15 over the size range
- Packages closer than BIAS to the main sequence are "good"
- Legend labels sit on the marker outline at a random angle
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from uuid import uuid4

from .models import (
    Classification,
    CollectedMetrics,
    LegendLabel,
    MetricItem,
    PlacedMarker,
)
from .ports import RandomPort

# --- Constants ---

# Maximum distance from the main sequence for a "good" package
BIAS = 0.1

# Radius used for every marker when all packages have the same size
DEFAULT_RADIUS = 15.0
MIN_RADIUS = 5.0

# Plot area of chart.svg
ORIGIN_X = 50.0
ORIGIN_Y = 210.0
PLOT_WIDTH = 320.0
PLOT_HEIGHT = 190.0

# Last segment of a namespaced package name
LABEL_PATTERN = re.compile(r"[\\./]([^\\./]+)$")


def new_marker_id() -> str:
    """Unique id for a cloned marker node."""
    return f"jdepend_{uuid4().hex[:13]}"


# --- Pure Functions ---


def classify(distance: float, bias: float = BIAS) -> Classification:
    """Classify a package by its distance from the main sequence."""
    return "good" if distance < bias else "bad"


def marker_radius(size: int, min_size: int, max_size: int) -> float:
    """Interpolate the marker radius over the collected size range."""
    size_range = (max_size - min_size) / 10
    if size_range == 0:
        return DEFAULT_RADIUS
    return MIN_RADIUS + (size - min_size) / size_range


def marker_position(item: MetricItem, radius: float) -> tuple[float, float]:
    """Top-left translation of a marker of the given radius."""
    x = (ORIGIN_X - radius) + item.abstraction * PLOT_WIDTH
    y = (ORIGIN_Y - radius) - item.instability * PLOT_HEIGHT
    return x, y


def legend_text(name: str) -> str | None:
    """Final segment of a namespaced package name, None if not namespaced."""
    match = LABEL_PATTERN.search(name)
    if match is None:
        return None
    return match.group(1)


def legend_angle(rng: RandomPort) -> float:
    """Random angle in [-1.57, 1.57] with a 0.01 radian step."""
    return rng.randint(0, 314) / 100 - 1.57


def place_label(
    text: str, x: float, y: float, radius: float, angle: float
) -> LegendLabel:
    return LegendLabel(
        text=text,
        x=x + radius * (1 + math.cos(angle)),
        y=y + radius * (1 + math.sin(angle)),
    )


def place_marker(
    item: MetricItem,
    min_size: int,
    max_size: int,
    rng: RandomPort,
    id_factory: Callable[[], str] = new_marker_id,
) -> PlacedMarker:
    """Compute classification, geometry and legend of one marker."""
    radius = marker_radius(item.size, min_size, max_size)
    x, y = marker_position(item, radius)

    label = None
    text = legend_text(item.name)
    if text is not None:
        label = place_label(text, x, y, radius, legend_angle(rng))

    return PlacedMarker(
        item=item,
        classification=classify(item.distance),
        radius=radius,
        scale=radius / DEFAULT_RADIUS,
        x=x,
        y=y,
        marker_id=id_factory(),
        label=label,
    )


def layout_items(
    collected: CollectedMetrics,
    rng: RandomPort,
    id_factory: Callable[[], str] = new_marker_id,
) -> list[PlacedMarker]:
    """Lay out all collected items, smallest first."""
    ordered = sorted(collected.items, key=lambda item: item.size)
    return [
        place_marker(item, collected.min_size, collected.max_size, rng, id_factory)
        for item in ordered
    ]
