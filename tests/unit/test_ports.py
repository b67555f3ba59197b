from typing import Protocol

from src.adapters.fs.tempdir import SystemTempDir
from src.components.chart.ports import AnalyzerPort, PackagePort, RandomPort
from src.ports.converter import ImageConverterPort
from src.ports.tempdir import TempDirPort


def test_ports_are_protocols():
    """Verify all defined ports inherit from Protocol."""
    assert issubclass(ImageConverterPort, Protocol)
    assert issubclass(TempDirPort, Protocol)
    assert issubclass(PackagePort, Protocol)
    assert issubclass(AnalyzerPort, Protocol)
    assert issubclass(RandomPort, Protocol)


def test_adapter_shape():
    """Adapters expose the port methods."""
    assert callable(getattr(SystemTempDir(), "path", None))
