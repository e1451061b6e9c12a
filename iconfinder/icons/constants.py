"""Constants for icon discovery and selection"""

import re
from typing import Pattern

# Markup scanners. Each one matches a whole tag whose quoted attribute carries the
# wanted value; attribute values are then pulled out of the matched tag text.
# `rel` only has to contain "apple-touch-icon", so "apple-touch-icon-precomposed"
# is picked up as well.
APPLE_TOUCH_ICON_PATTERN: Pattern = re.compile(
    r"""<link[^>]*rel=["'][^"']*apple-touch-icon[^"']*["'][^>]*>""", re.IGNORECASE
)
FAVICON_PATTERN: Pattern = re.compile(r"""<link[^>]*rel=["']icon["'][^>]*>""", re.IGNORECASE)
OG_IMAGE_PATTERN: Pattern = re.compile(
    r"""<meta[^>]*property=["']og:image["'][^>]*>""", re.IGNORECASE
)
MANIFEST_PATTERN: Pattern = re.compile(r"""<link[^>]*rel=["']manifest["'][^>]*>""", re.IGNORECASE)

# Size descriptors: "180x180" first, then a bare number meaning a square icon.
SIZE_PAIR_PATTERN: Pattern = re.compile(r"(\d+)x(\d+)", re.IGNORECASE)
SINGLE_SIZE_PATTERN: Pattern = re.compile(r"(\d+)")

# C0 controls and space, trimmed from both ends of a URL reference before resolving.
URL_STRIP_CHARACTERS: str = "".join(chr(code) for code in range(0x21))

# Source priority for icon selection (lower is better)
ICON_SOURCE_PRIORITY: dict[str, int] = {
    "apple-touch-icon": 1,
    "favicon": 2,
    "og-image": 3,
    "manifest": 4,
}

# Candidates are ranked by their distance from a square icon of this size.
TARGET_ICON_SIZE: int = 100

# Size assumed for icons that do not declare a usable one.
DEFAULT_ICON_SIZE: int = 32

# Open Graph images are social sharing banners, never sized in markup.
OG_IMAGE_SIZE: tuple[int, int] = (1200, 630)

# Prepended to targets given without a scheme.
DEFAULT_SCHEME: str = "https"

USAGE_MESSAGE: str = "Usage: /{url-to-fetch}"
