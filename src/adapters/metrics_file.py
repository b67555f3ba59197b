"""
Metrics file adapter.

Loads a pre-computed dependency analysis export (YAML or JSON) and exposes
it through the chart component's package and analyzer ports.

File schema:
    packages:
      - name: "Vendor\\Package"
        user_defined: true
        stats: {cc: 10, ac: 2, a: 0.16, i: 0.4, d: 0.44}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError


class PackageStats(BaseModel):
    cc: int = Field(ge=0)
    ac: int = Field(ge=0)
    a: float = Field(ge=0, le=1)
    i: float = Field(ge=0, le=1)
    d: float = Field(ge=0)


class PackageEntry(BaseModel):
    name: str
    user_defined: bool = True
    stats: PackageStats | None = None


class MetricsExport(BaseModel):
    packages: list[PackageEntry] = Field(default_factory=list)


@dataclass(frozen=True)
class MetricsPackage:
    """Package of a loaded metrics export."""

    name: str
    user_defined: bool = True

    def is_user_defined(self) -> bool:
        return self.user_defined


@dataclass
class MetricsAnalyzer:
    """Dependency analyzer backed by an export's stats."""

    stats: dict[str, dict[str, float]] = field(default_factory=dict)
    analyzer_type: str = "dependency"

    def get_stats(self, package: MetricsPackage) -> dict[str, float]:
        return dict(self.stats.get(package.name, {}))


class MetricsFileSource:
    """Reads metrics exports from the local file system."""

    def load(self, path: Path) -> tuple[list[MetricsPackage], MetricsAnalyzer]:
        """
        Load and validate a metrics export.
        Raises FileNotFoundError if file missing.
        Raises ValueError if the content is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Metrics file not found at: {path}")

        with open(path, encoding="utf-8") as f:
            content = f.read()

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid metrics file syntax: {e}") from e

        try:
            export = MetricsExport.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Metrics file validation failed:\n{e}") from e

        packages = [MetricsPackage(p.name, p.user_defined) for p in export.packages]
        analyzer = MetricsAnalyzer(
            stats={p.name: p.stats.model_dump() for p in export.packages if p.stats is not None}
        )
        return packages, analyzer
