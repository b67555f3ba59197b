import tempfile
from pathlib import Path

from src.adapters.fs.tempdir import SystemTempDir


def test_defaults_to_system_temp():
    assert SystemTempDir().path() == Path(tempfile.gettempdir())


def test_configured_dir_is_created(tmp_path):
    target = tmp_path / "charts" / "tmp"

    path = SystemTempDir(str(target)).path()

    assert path == target.resolve()
    assert path.is_dir()


def test_existing_dir_is_reused(tmp_path):
    (tmp_path / "keep.txt").write_text("x")

    path = SystemTempDir(str(tmp_path)).path()

    assert (path / "keep.txt").read_text() == "x"
