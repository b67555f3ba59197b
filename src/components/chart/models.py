"""
Chart component - Data models and errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

# --- Errors ---


class ChartError(Exception):
    """Base class for chart rendering failures."""


class ConfigurationError(ChartError):
    """Raised when no output file has been configured."""

    def __init__(self, message: str = "No output file configured for the chart") -> None:
        super().__init__(message)


class TemplateError(ChartError):
    """Raised when the SVG template cannot be used."""


class ConversionError(ChartError):
    """Raised when the image converter fails."""


# --- Metric Models ---


Classification = Literal["good", "bad"]


@dataclass(frozen=True)
class MetricItem:
    """Metrics of one rendered package."""

    size: int
    abstraction: float
    instability: float
    distance: float
    name: str


@dataclass(frozen=True)
class CollectedMetrics:
    """Collector output: items in package order plus the size range."""

    items: tuple[MetricItem, ...] = ()
    min_size: int = 0
    max_size: int = 0


# --- Layout Models ---


@dataclass(frozen=True)
class LegendLabel:
    """Legend text placed next to a marker."""

    text: str
    x: float
    y: float


@dataclass(frozen=True)
class PlacedMarker:
    """A marker with its computed geometry."""

    item: MetricItem
    classification: Classification
    radius: float
    scale: float
    x: float
    y: float
    marker_id: str
    label: LegendLabel | None = None

    @property
    def transform(self) -> str:
        """SVG affine transform: uniform scale, then translate."""
        return f"matrix({self.scale}, 0, 0, {self.scale}, {self.x}, {self.y})"


# --- Input / Output Models ---


@dataclass(frozen=True)
class RenderChartInput:
    """Input for rendering a chart."""

    output_path: str | None
    template_path: str | None = None


@dataclass(frozen=True)
class RenderChartOutput:
    """Output of a chart render."""

    output_path: str
    markers: tuple[PlacedMarker, ...] = field(default_factory=tuple)
