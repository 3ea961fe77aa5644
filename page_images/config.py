"""Configuration objects and constants for fetching and downloading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from .errors import ConfigurationError

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/138.0.0.0 Safari/537.36"
)
# Sent on the page request regardless of FetchConfig.user_agent.
REQUEST_USER_AGENT = DEFAULT_USER_AGENT
DEFAULT_OUTPUT_DIR = "img"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_DOWNLOADER = "aria2c"

PROXY_SCHEMES = {"http", "https", "socks4", "socks4a", "socks5", "socks5h"}


def validate_proxy(proxy: str) -> str:
    """Return a usable proxy address, or raise if it cannot be used.

    An address without a scheme, such as ``127.0.0.1:8080``, is treated as
    an HTTP proxy.
    """
    address = proxy if "://" in proxy else f"http://{proxy}"
    try:
        parsed = urlparse(address)
        port = parsed.port
    except ValueError as exc:
        raise ConfigurationError(f"Invalid proxy URL: {proxy}") from exc
    host = parsed.hostname
    if (
        parsed.scheme.lower() not in PROXY_SCHEMES
        or not host
        or any(ch.isspace() for ch in host)
        or port == 0
    ):
        raise ConfigurationError(f"Invalid proxy URL: {proxy}")
    return address


@dataclass
class FetchConfig:
    """Settings for retrieving the page that lists the images."""

    user_agent: str = DEFAULT_USER_AGENT
    proxy: Optional[str] = None
    # Per connect and per read, as requests applies it.
    timeout: float = DEFAULT_TIMEOUT
    max_redirects: int = DEFAULT_MAX_REDIRECTS


@dataclass
class DownloadConfig:
    """Settings for handing image URLs to the external downloader."""

    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    proxy: Optional[str] = None
    proxy_downloads: bool = False
    downloader: str = DEFAULT_DOWNLOADER

    @property
    def download_proxy(self) -> Optional[str]:
        """Proxy passed to each download, only when explicitly enabled."""
        if self.proxy and self.proxy_downloads:
            return self.proxy
        return None
