# File: remote_sme/utils.py
"""remote_sme.utils: URL helpers shared by the CLI, the locator and the pipeline."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import urljoin, urlsplit

from remote_sme.logger import logger

__all__: Sequence[str] = (
    "InvalidArgument",
    "is_absolute_url",
    "parse_absolute_url",
    "resolve_reference",
)

_FETCHABLE_SCHEMES = ("http", "https")


class InvalidArgument(ValueError):
    """Raised when a command-line URL is not an absolute http(s) URL."""


def is_absolute_url(url: str) -> bool:
    """True when *url* carries both a scheme and a host."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def parse_absolute_url(raw: str) -> str:
    """Validate a user-supplied URL and return it stripped of surrounding whitespace.

    The URL must name an explicit ``http`` or ``https`` scheme and a host;
    anything else raises :class:`InvalidArgument`.
    """
    url = raw.strip()
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise InvalidArgument(f"Invalid URL: {raw}") from exc
    if parts.scheme.lower() not in _FETCHABLE_SCHEMES or not parts.netloc:
        raise InvalidArgument(f"Invalid URL: {raw}")
    return url


def resolve_reference(reference: str, base_url: str) -> str:
    """Return *reference* unchanged if absolute, else resolve it against *base_url*.

    Handles relative paths, ``../`` segments and protocol-relative references.
    """
    if is_absolute_url(reference):
        return reference
    resolved = urljoin(base_url, reference)
    logger.debug("Resolved reference: %s + %s -> %s", base_url, reference, resolved)
    return resolved
