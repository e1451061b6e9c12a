"""HTTP fetching for target pages, web app manifests and icon images"""

import logging
from typing import Optional

import httpx

from iconfinder.icons.models import WebManifest

logger = logging.getLogger(__name__)


class IconFetcher:
    """Fetch pages, manifests and icons through a shared async HTTP client."""

    def __init__(self, client: httpx.AsyncClient, page_accept: str) -> None:
        self.client = client
        self.page_accept = page_accept

    async def fetch_page(self, url: str) -> httpx.Response:
        """Fetch the target page. The caller inspects the status code."""
        return await self.client.get(url, headers={"Accept": self.page_accept})

    async def fetch_manifest(self, url: str) -> Optional[WebManifest]:
        """Download and parse a web app manifest, returning None on any failure."""
        try:
            response = await self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Failed to fetch manifest from {url}: {e}")
            return None

        if not response.is_success:
            logger.debug(f"Manifest {url} returned status {response.status_code}")
            return None

        try:
            return WebManifest.model_validate(response.json())
        except ValueError as e:
            # Covers both malformed JSON and JSON that is not a manifest object.
            logger.debug(f"Failed to parse manifest JSON from {url}: {e}")
            return None

    async def stream_icon(self, url: str) -> httpx.Response:
        """Open a streaming request for the icon image.

        The returned response has not been read yet; the caller must close it with
        `aclose()` once the body has been passed on.
        """
        request = self.client.build_request("GET", url)
        return await self.client.send(request, stream=True)

    async def close(self) -> None:
        """Close the HTTP client and release its connections."""
        await self.client.aclose()
