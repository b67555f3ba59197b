"""
Chart component - JDepend style abstractness/instability chart.
"""

from ._impl import (
    DEFAULT_TEMPLATE_PATH,
    ChartService,
    ChartTemplate,
    collect_metrics,
    temporary_svg,
)
from ._layout import (
    BIAS,
    classify,
    layout_items,
    legend_text,
    marker_radius,
    new_marker_id,
    place_marker,
)
from .component import run
from .models import (
    ChartError,
    CollectedMetrics,
    ConfigurationError,
    ConversionError,
    LegendLabel,
    MetricItem,
    PlacedMarker,
    RenderChartInput,
    RenderChartOutput,
    TemplateError,
)
from .ports import AnalyzerPort, PackagePort, RandomPort

__all__ = [
    # Entry point
    "run",
    # Service
    "ChartService",
    "ChartTemplate",
    "DEFAULT_TEMPLATE_PATH",
    "collect_metrics",
    "temporary_svg",
    # Layout
    "BIAS",
    "classify",
    "layout_items",
    "legend_text",
    "marker_radius",
    "new_marker_id",
    "place_marker",
    # Models
    "CollectedMetrics",
    "LegendLabel",
    "MetricItem",
    "PlacedMarker",
    "RenderChartInput",
    "RenderChartOutput",
    # Errors
    "ChartError",
    "ConfigurationError",
    "ConversionError",
    "TemplateError",
    # Ports
    "AnalyzerPort",
    "PackagePort",
    "RandomPort",
]
