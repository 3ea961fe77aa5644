"""Fixtures: fake downloader processes and sample pages."""

import subprocess
from pathlib import Path
from typing import List

import pytest


class FakeDownloader:
    """Stand-in for ``subprocess.run`` that records each command."""

    def __init__(self, failing_urls=(), missing=False):
        self.failing_urls = set(failing_urls)
        self.missing = missing
        self.commands: List[List[str]] = []

    def __call__(self, command, check=False):
        self.commands.append(list(command))
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", command[0])
        returncode = 1 if command[5] in self.failing_urls else 0
        return subprocess.CompletedProcess(command, returncode)

    @property
    def urls(self) -> List[str]:
        return [command[5] for command in self.commands]


@pytest.fixture
def fake_downloader(monkeypatch):
    """Patch the dispatcher's process launcher with a recording fake."""

    def install(**kwargs) -> FakeDownloader:
        fake = FakeDownloader(**kwargs)
        monkeypatch.setattr("page_images.dispatcher.subprocess.run", fake)
        return fake

    return install


@pytest.fixture
def sample_html(tmp_path: Path) -> Path:
    page = tmp_path / "page.html"
    page.write_text(
        "<html><body>"
        '<img src="https://cdn.test/a/one.png">'
        '<img src="https://cdn.test/b/two.jpg">'
        '<img src="https://cdn.test/a/one.png">'
        '<a href="https://cdn.test/doc.pdf">doc</a>'
        "</body></html>",
        encoding="utf-8",
    )
    return page
