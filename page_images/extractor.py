"""Pattern-based discovery of image URLs in page text."""

from __future__ import annotations

import re
from typing import List, Set

# Only the listed extension spellings match; ``.Jpg`` and similar do not.
# The character run is greedy and admits whitespace, so a match can span
# adjacent text as long as it ends on one of the extensions. No word
# boundary is required after the extension, so ".pngx" matches up to ".png".
IMAGE_URL_PATTERN = re.compile(
    r"(https?://)([/|.\w\s-])*\.(?:jpg|gif|png|JPG|GIF|PNG|webp|WEBP)"
)


def extract_image_urls(text: str) -> List[str]:
    """Return unique image URLs in the order they first appear in ``text``."""
    seen: Set[str] = set()
    urls: List[str] = []
    for match in IMAGE_URL_PATTERN.finditer(text):
        url = match.group(0)
        if url in seen:
            continue
        seen.add(url)
        urls.append(url)
    return urls
