"""
ChartService - JDepend style abstractness/instability chart.

Collects package metrics, lays out one marker per package, instantiates
the marker and legend shapes of an SVG template and hands the resulting
document to an image converter.

Key behaviors:
- Only user-defined packages with metrics are plotted
- Template shapes are cloned, the originals removed from the output
- The intermediate SVG lives in the temp dir and is always removed
- No output file configured is a ConfigurationError, raised before any I/O
"""

from __future__ import annotations

import copy
import logging
import random
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from xml.etree import ElementTree as ET

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as SafeET

from src.ports.converter import ImageConverterPort
from src.ports.tempdir import TempDirPort

from ._layout import layout_items, new_marker_id
from .models import (
    CollectedMetrics,
    ConfigurationError,
    LegendLabel,
    MetricItem,
    PlacedMarker,
    RenderChartOutput,
    TemplateError,
)
from .ports import AnalyzerPort, PackagePort, RandomPort

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_ID = "{http://www.w3.org/XML/1998/namespace}id"

DEFAULT_TEMPLATE_PATH = Path(__file__).with_name("chart.svg")

# Template node identifiers
BAD_ID = "jdepend.bad"
GOOD_ID = "jdepend.good"
LAYER_ID = "jdepend.layer"
LEGEND_ID = "jdepend.legend"

ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)


# --- Metric Collector ---


def collect_metrics(
    packages: Iterable[PackagePort], analyzer: AnalyzerPort
) -> CollectedMetrics:
    """
    Collect the metrics of all user-defined packages.

    min_size starts at 0 and 0 means "unset": a later size replaces it
    whenever it is still 0 or the new size is smaller.
    """
    items: list[MetricItem] = []
    min_size = 0
    max_size = 0

    for package in packages:
        if not package.is_user_defined():
            logger.debug("Skipping external package %s", package.name)
            continue

        metrics = analyzer.get_stats(package)
        if not metrics:
            logger.debug("Skipping package %s without metrics", package.name)
            continue

        size = int(metrics["cc"]) + int(metrics["ac"])
        if size > max_size:
            max_size = size
        if min_size == 0 or size < min_size:
            min_size = size

        items.append(
            MetricItem(
                size=size,
                abstraction=float(metrics["a"]),
                instability=float(metrics["i"]),
                distance=float(metrics["d"]),
                name=package.name,
            )
        )

    return CollectedMetrics(items=tuple(items), min_size=min_size, max_size=max_size)


# --- Template Instantiator ---


class ChartTemplate:
    """SVG template with the marker, legend and layer nodes resolved."""

    def __init__(self, tree: ET.ElementTree) -> None:
        self.tree = tree
        root = tree.getroot()

        nodes: dict[str, ET.Element] = {}
        for element in root.iter():
            node_id = element.get(XML_ID) or element.get("id")
            if node_id in (BAD_ID, GOOD_ID, LAYER_ID, LEGEND_ID):
                nodes.setdefault(node_id, element)

        missing = [n for n in (BAD_ID, GOOD_ID, LAYER_ID, LEGEND_ID) if n not in nodes]
        if missing:
            raise TemplateError(f"Chart template is missing nodes: {', '.join(missing)}")

        self.bad = nodes[BAD_ID]
        self.good = nodes[GOOD_ID]
        self.layer = nodes[LAYER_ID]
        self.legend = nodes[LEGEND_ID]
        self._legend_parent = self._parent_of(self.legend)

    @classmethod
    def load(cls, path: str | Path) -> ChartTemplate:
        """Parse a template file. Raises TemplateError."""
        try:
            tree = SafeET.parse(str(path))
        except (OSError, ET.ParseError, DefusedXmlException) as e:
            raise TemplateError(f"Cannot load chart template {path}: {e}") from e
        return cls(tree)

    def _parent_of(self, node: ET.Element) -> ET.Element:
        for parent in self.tree.getroot().iter():
            for child in parent:
                if child is node:
                    return parent
        raise TemplateError("Template node has no parent element")

    @staticmethod
    def _clone(node: ET.Element) -> ET.Element:
        clone = copy.deepcopy(node)
        clone.attrib.pop(XML_ID, None)
        clone.attrib.pop("id", None)
        return clone

    def add_marker(self, marker: PlacedMarker) -> ET.Element:
        """Clone the good or bad shape for a marker into the layer."""
        source = self.good if marker.classification == "good" else self.bad
        ellipse = self._clone(source)
        ellipse.set("id", marker.marker_id)
        ellipse.set("title", marker.item.name)
        ellipse.set("transform", marker.transform)
        self.layer.append(ellipse)
        return ellipse

    def add_label(self, label: LegendLabel) -> ET.Element:
        """Clone the legend text next to the legend template."""
        legend = self._clone(self.legend)
        for child in list(legend):
            legend.remove(child)
        legend.set("x", str(label.x))
        legend.set("y", str(label.y))
        legend.text = label.text
        self._legend_parent.append(legend)
        return legend

    def finalize(self) -> None:
        """Remove the template shapes from the document."""
        for node in (self.bad, self.good, self.legend):
            self._parent_of(node).remove(node)

    def write(self, path: str | Path) -> None:
        self.tree.write(str(path), encoding="UTF-8", xml_declaration=True)


# --- Temp File Lifecycle ---


@contextmanager
def temporary_svg(temp_dir: TempDirPort) -> Iterator[Path]:
    """Yield a unique temp SVG path, removed on every exit path."""
    path = temp_dir.path() / f"{new_marker_id()}.svg"
    try:
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove temporary chart %s: %s", path, e)


# --- Service ---


class ChartService:
    """
    Chart report generator.

    Lifecycle: set_log_file(), set_artifacts(), log(analyzer), close().
    """

    ACCEPTED_ANALYZERS = ("dependency",)

    def __init__(
        self,
        converter: ImageConverterPort,
        temp_dir: TempDirPort,
        rng: RandomPort | None = None,
        template_path: str | Path | None = None,
        id_factory: Callable[[], str] = new_marker_id,
    ) -> None:
        self.converter = converter
        self.temp_dir = temp_dir
        self.rng = rng if rng is not None else random.Random()
        self.template_path = Path(template_path) if template_path else DEFAULT_TEMPLATE_PATH
        self.id_factory = id_factory

        self.log_file: str | None = None
        self.packages: Iterable[PackagePort] = ()
        self.analyzer: AnalyzerPort | None = None

    def set_log_file(self, log_file: str | None) -> None:
        """Set the output image file."""
        self.log_file = log_file

    def set_artifacts(self, packages: Iterable[PackagePort]) -> None:
        self.packages = packages

    def get_accepted_analyzers(self) -> tuple[str, ...]:
        return self.ACCEPTED_ANALYZERS

    def log(self, analyzer: object) -> bool:
        """Register the dependency analyzer. Returns False for other analyzers."""
        analyzer_type = getattr(analyzer, "analyzer_type", "dependency")
        if analyzer_type in self.ACCEPTED_ANALYZERS and hasattr(analyzer, "get_stats"):
            self.analyzer = analyzer  # type: ignore[assignment]
            return True
        return False

    def build(self, template: ChartTemplate) -> list[PlacedMarker]:
        """Lay out the collected packages into the template."""
        if self.analyzer is None:
            raise ConfigurationError("No dependency analyzer registered for the chart")

        collected = collect_metrics(self.packages, self.analyzer)
        markers = layout_items(collected, self.rng, self.id_factory)

        for marker in markers:
            template.add_marker(marker)
            if marker.label is not None:
                template.add_label(marker.label)

        template.finalize()
        return markers

    def close(self) -> RenderChartOutput:
        """
        Render the chart into the configured output file.

        Raises:
            ConfigurationError: no output file or analyzer configured.
            TemplateError: template missing or incomplete.
            ConversionError: the image converter failed.
        """
        if self.log_file is None:
            raise ConfigurationError()

        template = ChartTemplate.load(self.template_path)
        markers = self.build(template)

        with temporary_svg(self.temp_dir) as temp:
            template.write(temp)
            written = self.converter.convert(str(temp), self.log_file)

        logger.info("Rendered %d packages into %s", len(markers), written)
        return RenderChartOutput(output_path=written, markers=tuple(markers))
