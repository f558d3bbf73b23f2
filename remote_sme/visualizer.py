# File: remote_sme/visualizer.py
"""remote_sme.visualizer: turn (script bytes, source map bytes) into an HTML page.

The rendering itself is delegated to the ``source-map-explorer`` command line
tool; this module only feeds it the two buffers and collects its output.
"""

from __future__ import annotations

import subprocess
import tempfile
from pathlib import Path
from typing import Callable, Sequence

from remote_sme.config import ExplorerConfig
from remote_sme.logger import logger

__all__ = ("Visualize", "VisualizationError", "SourceMapExplorerCommand")

Visualize = Callable[[bytes, bytes], str]


class VisualizationError(RuntimeError):
    """The external renderer could not produce HTML."""


class SourceMapExplorerCommand:
    """Runs ``<command> <script> <map> --html`` and returns its stdout.

    Instances are callable, so they fit wherever a :data:`Visualize` is expected.
    """

    def __init__(self, command: Sequence[str], timeout: float = 120.0) -> None:
        if not command:
            raise ValueError("command must not be empty")
        self.command = list(command)
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ExplorerConfig) -> SourceMapExplorerCommand:
        return cls(config.visualizer_command, timeout=config.visualizer_timeout)

    def __call__(self, script: bytes, source_map: bytes) -> str:
        try:
            with tempfile.TemporaryDirectory(prefix="remote-sme-") as tmp:
                script_path = Path(tmp) / "bundle.js"
                map_path = Path(tmp) / "bundle.js.map"
                script_path.write_bytes(script)
                map_path.write_bytes(source_map)
                proc = self._execute([*self.command, str(script_path), str(map_path), "--html"])
        except OSError as exc:
            raise VisualizationError(f"Unable to prepare visualizer input: {exc}") from exc

        if proc.returncode != 0:
            message = f"Visualizer exited with code {proc.returncode}"
            detail = proc.stderr.strip() or proc.stdout.strip()
            if detail:
                message += f": {detail}"
            raise VisualizationError(message)
        if not proc.stdout.strip():
            raise VisualizationError("Visualizer produced no HTML")
        return proc.stdout

    def _execute(self, cmd: list[str]) -> subprocess.CompletedProcess:
        logger.debug("Running visualizer: %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise VisualizationError(f"Visualizer not found: {self.command[0]}") from exc
        except OSError as exc:
            raise VisualizationError(f"Unable to run visualizer {self.command[0]}: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise VisualizationError(
                f"Visualizer did not finish within {self.timeout} seconds"
            ) from exc
