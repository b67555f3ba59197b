"""
Structure lint tests
Verify that the component skeleton exists and follows conventions.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
CHART = PROJECT_ROOT / "src" / "components" / "chart"


class TestProjectStructure:
    """Verify project structure follows ports/adapters conventions."""

    def test_core_directories_exist(self) -> None:
        assert (PROJECT_ROOT / "src" / "ports").is_dir()
        assert (PROJECT_ROOT / "src" / "adapters").is_dir()
        assert (PROJECT_ROOT / "src" / "app_shell").is_dir()

    def test_chart_component_files(self) -> None:
        """Component must have models, ports, component and tests."""
        for name in ("__init__.py", "models.py", "ports.py", "component.py"):
            assert (CHART / name).is_file(), name
        assert (CHART / "tests").is_dir()

    def test_template_shipped_with_component(self) -> None:
        template = (CHART / "chart.svg").read_text()
        for node_id in ("jdepend.bad", "jdepend.good", "jdepend.layer", "jdepend.legend"):
            assert f'xml:id="{node_id}"' in template
