import logging
import re
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any

import cairosvg

from src.components.chart.models import ConversionError

logger = logging.getLogger(__name__)

FONT_FAMILY_PATTERN = re.compile(r"font-family:\s*Arial")
FONT_SIZE_PATTERN = re.compile(r"font-size:\s*[\d.]+")

# Output extension -> cairosvg entry point
EXPORTERS: dict[str, Callable[..., Any]] = {
    "png": cairosvg.svg2png,
    "pdf": cairosvg.svg2pdf,
    "ps": cairosvg.svg2ps,
    "eps": cairosvg.svg2eps,
}


class CairoImageConverter:
    def __init__(self, font_family: str | None = None, font_size: float | None = None):
        self.font_family = font_family
        self.font_size = font_size

    def prepare_svg(self, source: Path) -> None:
        """Apply the configured font overrides to an SVG file in place."""
        if self.font_family is None and self.font_size is None:
            return

        svg = source.read_text(encoding="utf-8")
        if self.font_family is not None:
            # CSS separators would break the style attribute
            family = self.font_family.translate(str.maketrans(";:", "  "))
            svg = FONT_FAMILY_PATTERN.sub(f"font-family:{family}", svg)
        if self.font_size is not None:
            svg = FONT_SIZE_PATTERN.sub(f"font-size:{abs(float(self.font_size))}", svg)
        source.write_text(svg, encoding="utf-8")

    def convert(self, source: str, dest: str) -> str:
        """
        Convert source into dest, the format is taken from the extensions.

        A dest without extension reuses the source type. Returns the path
        written.
        """
        source_path = Path(source)
        input_type = source_path.suffix.lstrip(".").lower()
        output_type = Path(dest).suffix.lstrip(".").lower()

        if output_type == "":
            output_type = input_type
            dest = f"{dest}.{output_type}"

        try:
            if input_type == "svg":
                self.prepare_svg(source_path)

            if input_type == output_type:
                shutil.copyfile(source_path, dest)
            else:
                exporter = EXPORTERS.get(output_type)
                if input_type != "svg" or exporter is None:
                    raise ConversionError(
                        f"Cannot convert {input_type or 'unknown'} into {output_type}"
                    )
                exporter(url=str(source_path), write_to=dest)
        except ConversionError:
            raise
        except Exception as e:
            raise ConversionError(f"Image conversion to {dest} failed: {e}") from e

        logger.debug("Converted %s into %s", source, dest)
        return dest
