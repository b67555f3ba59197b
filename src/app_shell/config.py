from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError


class ImageConvertSettings(BaseModel):
    font_family: str | None = None
    font_size: float | None = None


class ChartSettings(BaseModel):
    output_path: str | None = None
    template_path: str | None = None
    temp_dir: str | None = None
    seed: int | None = None
    image_convert: ImageConvertSettings = ImageConvertSettings()

    model_config = ConfigDict(extra="forbid")


def _strip_fences(content: str) -> str:
    """Return the first ```yaml block, or the whole content if there is none."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def load_settings(path: Path) -> ChartSettings:
    """
    Load and validate the chart settings file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if syntax or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_fences(content)) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in settings file: {e}") from e

    try:
        return ChartSettings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Settings validation failed:\n{e}") from e
