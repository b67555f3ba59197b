from pathlib import Path
from typing import Protocol


class TempDirPort(Protocol):
    def path(self) -> Path:
        """Return an existing, writable directory for intermediate files."""
        ...
