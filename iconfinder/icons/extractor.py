"""Icon candidate extraction from page markup and web app manifests"""

import logging
from typing import Pattern

from pydantic import ValidationError

from iconfinder.icons.constants import (
    APPLE_TOUCH_ICON_PATTERN,
    DEFAULT_ICON_SIZE,
    FAVICON_PATTERN,
    MANIFEST_PATTERN,
    OG_IMAGE_PATTERN,
    OG_IMAGE_SIZE,
)
from iconfinder.icons.fetcher import IconFetcher
from iconfinder.icons.models import IconCandidate, IconSource, ManifestIcon
from iconfinder.icons.utils import extract_attribute, parse_sizes, resolve_url

logger = logging.getLogger(__name__)

# Sources whose presence makes the manifest lookup unnecessary.
DIRECT_ICON_SOURCES: frozenset[IconSource] = frozenset(
    [IconSource.APPLE_TOUCH_ICON, IconSource.FAVICON]
)


class IconExtractor:
    """Extract icon candidates from link tags, Open Graph meta tags and manifests."""

    def __init__(
        self,
        fetcher: IconFetcher,
        default_size: int = DEFAULT_ICON_SIZE,
        og_image_size: tuple[int, int] = OG_IMAGE_SIZE,
    ) -> None:
        self.fetcher = fetcher
        self.default_size = default_size
        self.og_image_size = og_image_size

    async def extract_icons(self, html: str, base_url: str) -> list[IconCandidate]:
        """Return every icon candidate on the page in discovery order.

        Apple touch icons come first, then favicons, then Open Graph images. The
        manifest is only consulted when the page declares neither apple touch icons
        nor favicons.
        """
        icons: list[IconCandidate] = []

        icons.extend(
            self._extract_link_icons(
                html, base_url, APPLE_TOUCH_ICON_PATTERN, IconSource.APPLE_TOUCH_ICON
            )
        )
        icons.extend(self._extract_link_icons(html, base_url, FAVICON_PATTERN, IconSource.FAVICON))
        icons.extend(self._extract_og_images(html, base_url))

        if not any(icon.source in DIRECT_ICON_SOURCES for icon in icons):
            icons.extend(await self._extract_manifest_icons(html, base_url))

        logger.debug(f"Found {len(icons)} icon candidates on {base_url}")
        return icons

    def _extract_link_icons(
        self, html: str, base_url: str, pattern: Pattern, source: IconSource
    ) -> list[IconCandidate]:
        """Build candidates from link tags matched by `pattern`."""
        icons = []

        for match in pattern.finditer(html):
            tag = match.group(0)
            href = extract_attribute(tag, "href")
            if not href:
                continue

            width, height = parse_sizes(extract_attribute(tag, "sizes"), self.default_size)
            icons.append(
                IconCandidate(
                    url=resolve_url(href, base_url),
                    width=width,
                    height=height,
                    source=source,
                )
            )

        return icons

    def _extract_og_images(self, html: str, base_url: str) -> list[IconCandidate]:
        """Build candidates from `og:image` meta tags, which always get the banner size."""
        icons = []
        width, height = self.og_image_size

        for match in OG_IMAGE_PATTERN.finditer(html):
            content = extract_attribute(match.group(0), "content")
            if not content:
                continue

            icons.append(
                IconCandidate(
                    url=resolve_url(content, base_url),
                    width=width,
                    height=height,
                    source=IconSource.OG_IMAGE,
                )
            )

        return icons

    async def _extract_manifest_icons(self, html: str, base_url: str) -> list[IconCandidate]:
        """Fetch every linked manifest and build candidates from its icons.

        Icon sources are resolved against the page URL, not the manifest URL.
        """
        icons: list[IconCandidate] = []

        for match in MANIFEST_PATTERN.finditer(html):
            href = extract_attribute(match.group(0), "href")
            if not href:
                continue

            manifest_url = resolve_url(href, base_url)
            manifest = await self.fetcher.fetch_manifest(manifest_url)
            if manifest is None:
                logger.warning(f"Skipping unusable manifest {manifest_url}")
                continue

            for entry in manifest.icons or []:
                try:
                    manifest_icon = ManifestIcon.model_validate(entry)
                except ValidationError as e:
                    logger.debug(f"Skipping invalid icon entry in {manifest_url}: {e}")
                    continue

                width, height = parse_sizes(manifest_icon.sizes, self.default_size)
                icons.append(
                    IconCandidate(
                        url=resolve_url(manifest_icon.src, base_url),
                        width=width,
                        height=height,
                        source=IconSource.MANIFEST,
                    )
                )

        return icons
