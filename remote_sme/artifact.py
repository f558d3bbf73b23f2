# File: remote_sme/artifact.py
"""remote_sme.artifact: persist the visualization and hand it to a browser."""

from __future__ import annotations

import os
import tempfile
import webbrowser
from pathlib import Path
from typing import Optional, Union

__all__ = ("BrowserLaunchError", "write_temp_html", "open_in_browser")


class BrowserLaunchError(RuntimeError):
    """No browser could be started for the artifact."""


def write_temp_html(html: str, directory: Optional[Union[str, Path]] = None) -> Path:
    """Write *html* to a uniquely named ``.html`` file and return its path.

    The file is left on disk: the browser reads it after this process exits.
    """
    fd, name = tempfile.mkstemp(
        prefix="source-map-",
        suffix=".html",
        dir=str(directory) if directory is not None else None,
    )
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(html)
    return Path(name)


def open_in_browser(path: Union[str, Path]) -> None:
    """Open *path* in the default browser, raising BrowserLaunchError on failure."""
    uri = Path(path).resolve().as_uri()
    try:
        opened = webbrowser.open(uri)
    except webbrowser.Error as exc:
        raise BrowserLaunchError(f"Unable to open web browser. {path}") from exc
    if not opened:
        raise BrowserLaunchError(f"Unable to open web browser. {path}")
