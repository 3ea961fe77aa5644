"""Exceptions raised by the pipeline and the exit codes they map to."""

from __future__ import annotations

EXIT_CONFIGURATION = 1
EXIT_RUNTIME = 3


class PageImagesError(Exception):
    """Base class for errors that abort a run."""

    exit_code = EXIT_RUNTIME


class ConfigurationError(PageImagesError):
    """Missing source, malformed proxy address, or other bad options."""

    exit_code = EXIT_CONFIGURATION


class FetchError(PageImagesError):
    """The page could not be requested, read, or decoded."""


class OutputDirectoryError(PageImagesError):
    """The output directory could not be created."""
