import os
import tempfile
from pathlib import Path


class SystemTempDir:
    def __init__(self, base_path: str | None = None):
        self.base_path = Path(base_path).resolve() if base_path else None

    def path(self) -> Path:
        """Configured base dir, or the system temp dir."""
        if self.base_path is None:
            return Path(tempfile.gettempdir())
        if not self.base_path.exists():
            os.makedirs(self.base_path, exist_ok=True)
        return self.base_path
