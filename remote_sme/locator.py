# File: remote_sme/locator.py
"""remote_sme.locator: find the ``//# sourceMappingURL=`` directive near the end
of a script and turn it into an absolute URL.

Only a bounded suffix of the script (the *trailing window*) is inspected, so
large bundles are never scanned in full.
"""

from __future__ import annotations

import re
from typing import Optional

from remote_sme.config import DEFAULT_WINDOW_SIZE
from remote_sme.logger import logger
from remote_sme.models import (
    InvalidReference,
    LocateResult,
    SourceMapLocation,
    SourceMapNotFound,
)
from remote_sme.utils import resolve_reference

__all__ = ("SOURCE_MAPPING_TOKEN", "find_reference", "locate")

SOURCE_MAPPING_TOKEN = "//# sourceMappingURL="

_DIRECTIVE_RE = re.compile(
    rb"^" + re.escape(SOURCE_MAPPING_TOKEN.encode("ascii")) + rb"([^\r\n]*)",
    re.MULTILINE,
)


def _trailing_window(body: bytes, window_size: int) -> bytes:
    if window_size < 1:
        raise ValueError(f"window_size must be positive, got {window_size}")
    if len(body) <= window_size:
        return body
    tail = body[-window_size:]
    # the window starts mid-line: drop the partial line
    if body[-window_size - 1 : -window_size] not in (b"\n", b"\r"):
        cut = tail.find(b"\n")
        tail = b"" if cut == -1 else tail[cut + 1 :]
    return tail


def find_reference(body: bytes, window_size: int = DEFAULT_WINDOW_SIZE) -> Optional[str]:
    """Return the raw reference of the last directive in the trailing window, or None."""
    tail = _trailing_window(body, window_size)
    for match in reversed(list(_DIRECTIVE_RE.finditer(tail))):
        value = match.group(1).decode("utf-8", errors="replace").strip()
        if value:
            return value
    return None


def locate(
    script_body: bytes,
    script_url: str,
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> LocateResult:
    """Extract the source map reference from *script_body* and resolve it against *script_url*."""
    reference = find_reference(script_body, window_size)
    if reference is None:
        logger.debug("No sourceMappingURL in the last %d bytes of %s", window_size, script_url)
        return SourceMapNotFound(script_url, window_size)
    try:
        url = resolve_reference(reference, script_url)
    except ValueError as exc:
        return InvalidReference(reference, str(exc))
    return SourceMapLocation(reference, url)
