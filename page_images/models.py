"""Data models shared by the fetch, extract, and download stages."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import ConfigurationError
from .utils import derive_filename


@dataclass(frozen=True)
class PageSource:
    """Where the page text comes from: a remote URL or a local file."""

    url: Optional[str] = None
    path: Optional[Path] = None

    def __post_init__(self) -> None:
        if (self.url is None) == (self.path is None):
            raise ConfigurationError("Either --url or --html must be specified")

    @classmethod
    def from_options(cls, url: Optional[str], path: Optional[str]) -> "PageSource":
        if url and path:
            raise ConfigurationError("--url and --html cannot be used together")
        if url:
            return cls(url=url)
        if path:
            return cls(path=Path(path))
        raise ConfigurationError("Either --url or --html must be specified")

    @property
    def is_remote(self) -> bool:
        return self.url is not None

    def describe(self) -> str:
        return self.url if self.url is not None else str(self.path)


@dataclass(frozen=True)
class DownloadTask:
    """A single image transfer handed to the external downloader."""

    url: str
    filename: str
    directory: Path
    proxy: Optional[str] = None

    @classmethod
    def for_url(
        cls, url: str, directory: Path, proxy: Optional[str] = None
    ) -> "DownloadTask":
        return cls(url=url, filename=derive_filename(url), directory=directory, proxy=proxy)

    @property
    def destination(self) -> Path:
        return self.directory / self.filename


class DownloadStatus(enum.Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    NOT_STARTED = "not_started"


@dataclass
class DownloadOutcome:
    """Result of running the downloader for one task."""

    task: DownloadTask
    status: DownloadStatus
    returncode: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is DownloadStatus.SUCCEEDED


@dataclass
class DownloadReport:
    """Per-item outcomes for a whole run, in extraction order."""

    outcomes: List[DownloadOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded
