"""Command-line entry point for the page image downloader."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .config import (
    DEFAULT_DOWNLOADER,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    DownloadConfig,
    FetchConfig,
    validate_proxy,
)
from .dispatcher import download_images
from .errors import PageImagesError
from .extractor import extract_image_urls
from .fetcher import fetch_page
from .models import DownloadReport, PageSource

logger = logging.getLogger("page_images.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="page-images",
        description="Download the images referenced by a web page or local HTML file.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-u",
        "--url",
        metavar="URL",
        help="URL of the page to fetch images from",
    )
    source.add_argument(
        "-H",
        "--html",
        metavar="FILE",
        help="Local HTML file to parse for images",
    )
    parser.add_argument(
        "-d",
        "--dir",
        default=DEFAULT_OUTPUT_DIR,
        type=Path,
        metavar="DIRECTORY",
        help="Output directory for downloaded images",
    )
    parser.add_argument(
        "-p",
        "--proxy",
        metavar="PROXY_URL",
        help="Proxy server to use (e.g., http://proxy.example.com:8080)",
    )
    parser.add_argument(
        "-a",
        "--user-agent",
        default=DEFAULT_USER_AGENT,
        help="User-Agent header for HTTP requests",
    )
    parser.add_argument(
        "--aria2c-proxy",
        "--aria2c_proxy",
        dest="aria2c_proxy",
        action="store_true",
        help="Also route each image download through --proxy",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=(
            "Page request timeout in seconds; applies to connecting and to each "
            "read separately, not to the whole transfer"
        ),
    )
    parser.add_argument(
        "--max-redirects",
        type=int,
        default=DEFAULT_MAX_REDIRECTS,
        help="Maximum number of redirects to follow for the page request",
    )
    parser.add_argument(
        "--downloader",
        default=DEFAULT_DOWNLOADER,
        help="Downloader executable invoked once per image",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    argv = list(sys.argv[1:] if argv is None else argv)
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> DownloadReport:
    """Fetch the page, extract image URLs, and download each one."""
    source = PageSource.from_options(args.url, args.html)
    proxy = validate_proxy(args.proxy) if args.proxy else None

    fetch_config = FetchConfig(
        user_agent=args.user_agent,
        proxy=proxy,
        timeout=args.timeout,
        max_redirects=args.max_redirects,
    )
    download_config = DownloadConfig(
        output_dir=Path(args.dir),
        proxy=proxy,
        proxy_downloads=args.aria2c_proxy,
        downloader=args.downloader,
    )

    html = fetch_page(source, fetch_config)
    image_urls = extract_image_urls(html)
    logger.info("Found %d image URLs in %s", len(image_urls), source.describe())
    return download_images(image_urls, download_config)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    overall_start = time.perf_counter()
    try:
        report = run(args)
    except PageImagesError as exc:
        print(exc, file=sys.stderr)
        sys.exit(exc.exit_code)
    total_elapsed = time.perf_counter() - overall_start

    logger.info(
        "Finished in %.2fs (%d/%d succeeded, %d failed)",
        total_elapsed,
        report.succeeded,
        report.total,
        report.failed,
    )
    if args.verbose:
        for outcome in report.outcomes:
            if not outcome.ok:
                logger.debug("Failed %s -> %s", outcome.task.url, outcome.error)


if __name__ == "__main__":
    main()
