# === FILE: remote_sme/config.py ===
"""
Configuration loading and validation for the remote source-map explorer.
Pydantic describes the schema; YAML and JSON files are both accepted.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from remote_sme import __version__

DEFAULT_WINDOW_SIZE = 4096
DEFAULT_VISUALIZER_COMMAND = ["npx", "--yes", "source-map-explorer"]


class ExplorerConfig(BaseModel):
    """Settings for one run of the pipeline."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(30.0, gt=0, description="Timeout for a single request (seconds).")
    user_agent: str = Field(
        f"remote-source-map-explorer/{__version__}",
        min_length=1,
        description="User-Agent header.",
    )
    window_size: int = Field(
        DEFAULT_WINDOW_SIZE, ge=1, description="Trailing bytes scanned for sourceMappingURL."
    )
    visualizer_command: List[str] = Field(
        default_factory=lambda: list(DEFAULT_VISUALIZER_COMMAND),
        description="Command that renders (script, map) into HTML on stdout.",
    )
    visualizer_timeout: float = Field(120.0, gt=0, description="Visualizer timeout (seconds).")
    output_dir: Optional[Path] = Field(None, description="Directory for the HTML artifact.")
    open_browser: bool = Field(True, description="Open the artifact in the default browser.")

    @field_validator("visualizer_command", mode="before")
    def _split_command(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.split()
        return v

    @model_validator(mode="after")
    def _check_command_and_dir(self) -> ExplorerConfig:
        if not self.visualizer_command or not self.visualizer_command[0]:
            raise ValueError("visualizer_command must not be empty")
        if self.output_dir is not None and not self.output_dir.is_dir():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(self.output_dir))
        return self


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ExplorerConfig:
    """
    Read a YAML or JSON file and return a validated ExplorerConfig.
    Without a path, the built-in defaults are used.
    """
    if path is None:
        return ExplorerConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return ExplorerConfig(**data)


__all__ = [
    "DEFAULT_WINDOW_SIZE",
    "ExplorerConfig",
    "load_config",
]
