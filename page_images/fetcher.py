"""Retrieve page text from a remote URL or a local HTML file."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from .config import REQUEST_USER_AGENT, FetchConfig, validate_proxy
from .errors import FetchError
from .models import PageSource

logger = logging.getLogger("page_images")


def build_session(config: FetchConfig) -> requests.Session:
    """Create an HTTP session honouring the proxy and redirect settings."""
    session = requests.Session()
    session.max_redirects = config.max_redirects
    session.headers["User-Agent"] = config.user_agent
    if config.proxy:
        proxy = validate_proxy(config.proxy)
        session.proxies.update({"http": proxy, "https": proxy})
    return session


def fetch_remote(url: str, config: FetchConfig) -> str:
    """Issue a single GET request and return the decoded body."""
    session = build_session(config)
    logger.info("Fetching HTML content from %s", url)
    try:
        resp = session.get(
            url,
            headers={"User-Agent": REQUEST_USER_AGENT},
            # Environment proxies would otherwise take precedence over session.proxies.
            proxies=dict(session.proxies),
            timeout=config.timeout,
        )
        text = resp.text
    except requests.RequestException as exc:
        raise FetchError(f"Failed to send request to {url}: {exc}") from exc
    finally:
        session.close()
    logger.debug(
        "Received %d characters from %s (status=%s)", len(text), resp.url, resp.status_code
    )
    return text


def read_local(path: Path) -> str:
    """Read an HTML file from disk as UTF-8 text."""
    logger.info("Reading HTML content from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FetchError(f"Failed to read HTML file {path}: {exc}") from exc


def fetch_page(source: PageSource, config: FetchConfig) -> str:
    """Return the page text for ``source``."""
    if source.is_remote:
        return fetch_remote(source.url, config)
    return read_local(source.path)
