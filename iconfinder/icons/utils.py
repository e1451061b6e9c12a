"""Markup, size and URL helpers for icon discovery"""

import re
from typing import Optional
from urllib.parse import urljoin

from iconfinder.icons.constants import (
    DEFAULT_ICON_SIZE,
    SINGLE_SIZE_PATTERN,
    SIZE_PAIR_PATTERN,
    URL_STRIP_CHARACTERS,
)


def extract_attribute(tag: str, name: str) -> Optional[str]:
    """Return the quoted value of attribute `name` in a tag's text, or None.

    The attribute name is matched case-insensitively and the first occurrence wins.
    Only single- or double-quoted values are recognized and no entity decoding is done.
    """
    match = re.search(rf"""{re.escape(name)}=["']([^"']*)["']""", tag, re.IGNORECASE)
    return match.group(1) if match else None


def parse_sizes(sizes: Optional[str], default_size: int = DEFAULT_ICON_SIZE) -> tuple[int, int]:
    """Parse a size descriptor such as "180x180" or "64" into (width, height).

    Only the first size found is used, so "16x16 32x32" gives (16, 16). Missing or
    non-numeric descriptors give a square of `default_size`.
    """
    if not sizes:
        return default_size, default_size

    if match := SIZE_PAIR_PATTERN.search(sizes):
        return int(match.group(1)), int(match.group(2))

    if match := SINGLE_SIZE_PATTERN.search(sizes):
        size = int(match.group(1))
        return size, size

    return default_size, default_size


def resolve_url(reference: str, base_url: str) -> str:
    """Resolve a possibly relative reference against the page URL.

    Leading and trailing spaces and control characters are dropped first, as browsers
    do. A reference that cannot be parsed is returned unchanged; fetching it later is
    what surfaces the problem.
    """
    try:
        return urljoin(base_url, reference.strip(URL_STRIP_CHARACTERS))
    except ValueError:
        return reference
