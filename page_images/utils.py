"""Utility helpers for deriving local filenames from URLs."""

from __future__ import annotations

FALLBACK_FILENAME = "unknown"


def derive_filename(url: str, fallback: str = FALLBACK_FILENAME) -> str:
    """Return the text after the last ``/`` of a URL, or ``fallback``."""
    if "/" not in url:
        return fallback
    tail = url.rsplit("/", 1)[1]
    return tail or fallback
