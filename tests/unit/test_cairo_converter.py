from unittest.mock import Mock

import pytest

from src.adapters.render import cairo_converter
from src.adapters.render.cairo_converter import CairoImageConverter
from src.components.chart.models import ConversionError

SVG_TEXT = (
    '<svg xmlns="http://www.w3.org/2000/svg">'
    '<text style="font-family:Arial;font-size:11px">A</text>'
    '<text style="font-family: Arial;font-size: 9.5px">B</text>'
    "</svg>"
)


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "chart.svg"
    path.write_text(SVG_TEXT)
    return path


@pytest.fixture
def exporter(monkeypatch):
    mock = Mock()
    monkeypatch.setitem(cairo_converter.EXPORTERS, "png", mock)
    return mock


def test_same_type_is_copied(source, tmp_path):
    dest = tmp_path / "out.svg"

    written = CairoImageConverter().convert(str(source), str(dest))

    assert written == str(dest)
    assert dest.read_text() == SVG_TEXT


def test_missing_extension_reuses_source_type(source, tmp_path):
    dest = tmp_path / "out"

    written = CairoImageConverter().convert(str(source), str(dest))

    assert written == f"{dest}.svg"
    assert (tmp_path / "out.svg").read_text() == SVG_TEXT


def test_png_uses_cairosvg(source, tmp_path, exporter):
    dest = tmp_path / "out.png"

    written = CairoImageConverter().convert(str(source), str(dest))

    assert written == str(dest)
    exporter.assert_called_once_with(url=str(source), write_to=str(dest))


def test_extension_is_case_insensitive(source, tmp_path, exporter):
    dest = tmp_path / "out.PNG"

    CairoImageConverter().convert(str(source), str(dest))

    exporter.assert_called_once()


def test_unsupported_format(source, tmp_path):
    with pytest.raises(ConversionError):
        CairoImageConverter().convert(str(source), str(tmp_path / "out.gif"))


def test_exporter_failure_is_wrapped(source, tmp_path, exporter):
    exporter.side_effect = ValueError("bad svg")

    with pytest.raises(ConversionError) as exc:
        CairoImageConverter().convert(str(source), str(tmp_path / "out.png"))

    assert "bad svg" in str(exc.value)
    assert isinstance(exc.value.__cause__, ValueError)


def test_missing_source_is_conversion_error(tmp_path):
    with pytest.raises(ConversionError):
        CairoImageConverter().convert(str(tmp_path / "none.png"), str(tmp_path / "out.png"))


def test_font_overrides(source):
    converter = CairoImageConverter(font_family="DejaVu Sans;bold:x", font_size=-12)

    converter.prepare_svg(source)

    text = source.read_text()
    assert "Arial" not in text
    assert text.count("font-family:DejaVu Sans bold x") == 2
    assert text.count("font-size:12.0") == 2


def test_no_overrides_leaves_file_untouched(source):
    CairoImageConverter().prepare_svg(source)

    assert source.read_text() == SVG_TEXT
