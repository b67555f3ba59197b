from pathlib import Path

import pytest

METRICS_YAML = """\
packages:
  - name: A\\B
    stats: {cc: 10, ac: 0, a: 0.0, i: 0.2, d: 0.05}
  - name: A\\C
    stats: {cc: 2, ac: 0, a: 0.8, i: 0.9, d: 0.3}
  - name: Vendor\\Lib
    user_defined: false
    stats: {cc: 40, ac: 5, a: 0.1, i: 0.1, d: 0.8}
  - name: A\\Empty
"""


@pytest.fixture
def metrics_file(tmp_path) -> Path:
    """
    Metrics export with two plotted packages, one external package and one
    package without stats.
    """
    path = tmp_path / "metrics.yaml"
    path.write_text(METRICS_YAML)
    return path


@pytest.fixture
def settings_file(tmp_path) -> Path:
    path = tmp_path / "chart.yaml"
    path.write_text(
        f"output_path: {tmp_path / 'from-config.svg'}\n"
        f"temp_dir: {tmp_path / 'tmp'}\n"
        "seed: 3\n"
        "image_convert:\n"
        "  font_family: DejaVu Sans\n"
    )
    return path
