"""
Chart component - JDepend abstractness/instability chart rendering.

Invariants:
- Markers are written in ascending size order
- Template shapes never appear in the output
- The intermediate SVG is removed whether or not conversion succeeds
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from src.ports.converter import ImageConverterPort
from src.ports.tempdir import TempDirPort

from ._impl import ChartService
from ._layout import new_marker_id
from .models import ConfigurationError, RenderChartInput, RenderChartOutput
from .ports import AnalyzerPort, PackagePort, RandomPort


def run(
    inp: RenderChartInput,
    *,
    packages: Iterable[PackagePort],
    analyzer: AnalyzerPort,
    converter: ImageConverterPort,
    temp_dir: TempDirPort,
    rng: RandomPort | None = None,
    id_factory: Callable[[], str] = new_marker_id,
) -> RenderChartOutput:
    """
    Render the chart for the given packages.

    Args:
        inp: Output file and optional template override.
        packages: Source model to plot.
        analyzer: Dependency analyzer providing package metrics.
        converter: Image converter writing the final file.
        temp_dir: Location for the intermediate SVG.
        rng: Optional random source for legend placement.
        id_factory: Optional marker id generator.

    Returns:
        RenderChartOutput with the written path and placed markers.

    Raises:
        ConfigurationError, TemplateError, ConversionError
    """
    service = ChartService(
        converter=converter,
        temp_dir=temp_dir,
        rng=rng,
        template_path=inp.template_path,
        id_factory=id_factory,
    )
    service.set_log_file(inp.output_path)
    service.set_artifacts(packages)
    if not service.log(analyzer):
        raise ConfigurationError("Analyzer is not a dependency analyzer")

    return service.close()
