# remote_sme/models.py
"""
Data models for the remote source-map explorer pipeline.

Every stage returns one of these values instead of raising, so the
orchestrator can tell exactly which step failed.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path
from typing import Optional, Union

__all__ = (
    "NetworkError",
    "BadStatus",
    "FetchSuccess",
    "FetchFailure",
    "FetchResult",
    "SourceMapLocation",
    "SourceMapNotFound",
    "InvalidReference",
    "LocateResult",
    "Stage",
    "PipelineError",
    "PipelineOutcome",
    "ExitStatus",
)


@dataclass(slots=True, frozen=True)
class NetworkError:
    """Transport-level failure: DNS, refused connection, timeout, bad URL."""

    message: str

    def __str__(self) -> str:
        return f"Network error: {self.message}"


@dataclass(slots=True, frozen=True)
class BadStatus:
    """The server answered, but not with 200."""

    status: int

    def __str__(self) -> str:
        return f"Request failed.\nStatus code: {self.status}"


@dataclass(slots=True, frozen=True)
class FetchSuccess:
    url: str
    body: bytes


@dataclass(slots=True, frozen=True)
class FetchFailure:
    url: str
    reason: Union[NetworkError, BadStatus]

    def __str__(self) -> str:
        return f"GET {self.url}: {self.reason}"


FetchResult = Union[FetchSuccess, FetchFailure]


@dataclass(slots=True, frozen=True)
class SourceMapLocation:
    """Raw reference found in the script and its absolute form."""

    reference: str
    url: str


@dataclass(slots=True, frozen=True)
class SourceMapNotFound:
    script_url: str
    window_size: int

    def __str__(self) -> str:
        return (
            f"sourceMappingURL not found in the last {self.window_size} bytes "
            f"of {self.script_url}"
        )


@dataclass(slots=True, frozen=True)
class InvalidReference:
    """The directive was found but its value is not a usable URL."""

    reference: str
    message: str

    def __str__(self) -> str:
        return f"Invalid sourceMappingURL {self.reference!r}: {self.message}"


LocateResult = Union[SourceMapLocation, SourceMapNotFound, InvalidReference]


class Stage(str, Enum):
    """Pipeline step a failure is attributed to."""

    ARGUMENT = "argument"
    FETCH_SCRIPT = "fetch_script"
    LOCATE = "locate"
    FETCH_MAP = "fetch_map"
    VISUALIZE = "visualize"
    WRITE = "write"
    OPEN_BROWSER = "open_browser"


@dataclass(slots=True, frozen=True)
class PipelineError:
    stage: Stage
    message: str

    def __str__(self) -> str:
        return f"[{self.stage.value}] {self.message}"


@dataclass(slots=True)
class PipelineOutcome:
    """What a single run produced: an error, an artifact, or both."""

    error: Optional[PipelineError] = None
    artifact: Optional[Path] = None
    fetches: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


class ExitStatus(IntEnum):
    OK = 0
    FAILURE = 1
