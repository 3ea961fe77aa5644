"""Hand extracted image URLs to an external downloader one at a time."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Sequence

from .config import DEFAULT_DOWNLOADER, DownloadConfig
from .errors import OutputDirectoryError
from .models import DownloadOutcome, DownloadReport, DownloadStatus, DownloadTask

logger = logging.getLogger("page_images")


def ensure_output_dir(path: Path) -> Path:
    """Create ``path`` and any missing parents; existing directories are fine."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(
            f"Failed to create output directory {path}: {exc}"
        ) from exc
    return path


def build_command(task: DownloadTask, downloader: str = DEFAULT_DOWNLOADER) -> List[str]:
    """Translate a task into the downloader's argument vector."""
    command = [
        downloader,
        "-o",
        task.filename,
        "-d",
        str(task.directory),
        task.url,
    ]
    if task.proxy:
        command.extend(["--all-proxy", task.proxy])
    return command


def run_download(task: DownloadTask, downloader: str = DEFAULT_DOWNLOADER) -> DownloadOutcome:
    """Run the downloader for a single task and classify the result."""
    command = build_command(task, downloader)
    logger.debug("Running %s", " ".join(command))
    try:
        completed = subprocess.run(command, check=False)
    except OSError as exc:
        logger.error("Failed to execute %s for %s: %s", downloader, task.url, exc)
        return DownloadOutcome(task, DownloadStatus.NOT_STARTED, error=str(exc))

    if completed.returncode != 0:
        logger.error("Failed to download %s", task.url)
        return DownloadOutcome(
            task,
            DownloadStatus.FAILED,
            returncode=completed.returncode,
            error=f"{downloader} exited with status {completed.returncode}",
        )
    return DownloadOutcome(task, DownloadStatus.SUCCEEDED, returncode=0)


def download_images(urls: Sequence[str], config: DownloadConfig) -> DownloadReport:
    """Download every URL in order, continuing past individual failures."""
    output_dir = ensure_output_dir(config.output_dir)
    proxy = config.download_proxy
    report = DownloadReport()

    total = len(urls)
    for index, url in enumerate(urls, start=1):
        task = DownloadTask.for_url(url, output_dir, proxy)
        logger.info("Downloading %d/%d file name: %s", index, total, task.destination)
        report.outcomes.append(run_download(task, config.downloader))
    return report
