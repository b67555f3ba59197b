import argparse
import logging
import random
import sys
from pathlib import Path

from src.adapters.fs.tempdir import SystemTempDir
from src.adapters.metrics_file import MetricsFileSource
from src.adapters.render.cairo_converter import CairoImageConverter
from src.app_shell.config import ChartSettings, load_settings
from src.components.chart import ChartError, RenderChartInput, run

logger = logging.getLogger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a JDepend abstractness/instability chart")
    parser.add_argument("metrics", help="YAML or JSON file with package metrics")
    parser.add_argument("-o", "--output", help="Output image file (png, pdf, ps, eps, svg)")
    parser.add_argument("-c", "--config", help="Chart settings YAML file")
    parser.add_argument("--template", help="Alternative SVG template")
    parser.add_argument("--seed", type=int, help="Seed for legend placement")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def resolve_settings(args: argparse.Namespace) -> ChartSettings:
    """Settings file values, overridden by command line flags."""
    settings = load_settings(Path(args.config)) if args.config else ChartSettings()
    overrides = {
        "output_path": args.output,
        "template_path": args.template,
        "seed": args.seed,
    }
    return settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = resolve_settings(args)
        packages, analyzer = MetricsFileSource().load(Path(args.metrics))
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1

    converter = CairoImageConverter(
        font_family=settings.image_convert.font_family,
        font_size=settings.image_convert.font_size,
    )

    try:
        result = run(
            RenderChartInput(
                output_path=settings.output_path,
                template_path=settings.template_path,
            ),
            packages=packages,
            analyzer=analyzer,
            converter=converter,
            temp_dir=SystemTempDir(settings.temp_dir),
            rng=random.Random(settings.seed) if settings.seed is not None else None,
        )
    except ChartError as e:
        logger.error("Chart rendering failed: %s", e)
        return 1

    print(f"Chart written to {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
