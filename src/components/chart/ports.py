"""
Chart component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class PackagePort(Protocol):
    """A package of the analyzed source model."""

    @property
    def name(self) -> str:
        """Fully qualified package name."""
        ...

    def is_user_defined(self) -> bool:
        """True for packages that belong to the analyzed code base."""
        ...


class AnalyzerPort(Protocol):
    """Dependency analyzer with pre-computed package metrics."""

    def get_stats(self, package: PackagePort) -> Mapping[str, float]:
        """
        Return the metrics of a package.

        Keys: cc, ac, a, i, d. Empty mapping if the package has no stats.
        """
        ...


class RandomPort(Protocol):
    """Random source for legend placement (random.Random compatible)."""

    def randint(self, a: int, b: int) -> int: ...
