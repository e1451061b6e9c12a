"""Resolution of a target URL to its best icon"""

import logging

import httpx

from iconfinder.exceptions import (
    EmptyTargetError,
    IconNotFoundError,
    InvalidTargetUrlError,
    PageFetchError,
)
from iconfinder.icons.constants import DEFAULT_SCHEME, USAGE_MESSAGE
from iconfinder.icons.extractor import IconExtractor
from iconfinder.icons.fetcher import IconFetcher
from iconfinder.icons.models import IconCandidate, IconResolution
from iconfinder.icons.selector import IconSelector

logger = logging.getLogger(__name__)


def normalize_target_url(target: str) -> str:
    """Turn the requested target into an absolute http(s) URL.

    Targets that do not start with "http" are assumed to be a bare `host/path`
    and get `https://` prepended.

    Raises:
        EmptyTargetError: if `target` is empty.
        InvalidTargetUrlError: if the result is not an http(s) URL with a host.
    """
    if not target:
        raise EmptyTargetError(USAGE_MESSAGE)

    normalized = target if target.startswith("http") else f"{DEFAULT_SCHEME}://{target}"

    try:
        url = httpx.URL(normalized)
    except httpx.InvalidURL as e:
        raise InvalidTargetUrlError(target) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidTargetUrlError(target)

    # Rebuilding from the raw path gives a bare host the root path "/".
    return str(url.copy_with(raw_path=url.raw_path))


class IconResolver:
    """Find and select the icon of a web page.

    Each call works on its own fetched page and candidate list, nothing is shared
    between resolutions apart from the HTTP client.
    """

    def __init__(
        self, fetcher: IconFetcher, extractor: IconExtractor, selector: IconSelector
    ) -> None:
        self.fetcher = fetcher
        self.extractor = extractor
        self.selector = selector

    async def find_icons(self, target: str) -> list[IconCandidate]:
        """Fetch the target page and return all of its icon candidates.

        Raises:
            EmptyTargetError, InvalidTargetUrlError: for unusable input.
            PageFetchError: if the page returns a non-success status.
            IconNotFoundError: if the page declares no icons at all.
        """
        page_url = normalize_target_url(target)

        response = await self.fetcher.fetch_page(page_url)
        if not response.is_success:
            raise PageFetchError(page_url, response.status_code)

        icons = await self.extractor.extract_icons(response.text, page_url)
        if not icons:
            raise IconNotFoundError()

        return icons

    async def resolve(self, target: str) -> IconResolution:
        """Return the best icon for `target` along with every candidate, best first."""
        icons = await self.find_icons(target)
        best_icon = self.selector.select_best_icon(icons)
        logger.info(
            "Selected icon",
            extra={
                "url": best_icon.url,
                "source": best_icon.source.value,
                "size": best_icon.size,
                "candidates": len(icons),
            },
        )
        return IconResolution(best_icon=best_icon, icons=self.selector.rank_icons(icons))
