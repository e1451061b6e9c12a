"""Initialize the icon resolver"""

import logging

from httpx import AsyncBaseTransport

from iconfinder.config import settings
from iconfinder.icons.extractor import IconExtractor
from iconfinder.icons.fetcher import IconFetcher
from iconfinder.icons.resolver import IconResolver
from iconfinder.icons.selector import IconSelector
from iconfinder.utils.http_client import create_http_client

logger = logging.getLogger(__name__)

resolver: IconResolver | None = None


def build_resolver(transport: AsyncBaseTransport | None = None) -> IconResolver:
    """Create an icon resolver wired with the configured HTTP client and sizes."""
    client = create_http_client(
        max_connections=settings.http.max_connections,
        connect_timeout=settings.http.connect_timeout_sec,
        request_timeout=settings.http.request_timeout_sec,
        pool_timeout=settings.http.pool_timeout_sec,
        headers={"User-Agent": settings.http.user_agent},
        transport=transport,
    )
    fetcher = IconFetcher(client, page_accept=settings.http.accept)
    extractor = IconExtractor(
        fetcher,
        default_size=settings.icons.default_size,
        og_image_size=(settings.icons.og_image_width, settings.icons.og_image_height),
    )
    selector = IconSelector(target_size=settings.icons.target_size)
    return IconResolver(fetcher, extractor, selector)


async def init_resolver() -> None:
    """Initialize the icon resolver.

    This should only be called once at the startup of application.
    """
    global resolver
    resolver = build_resolver()
    logger.info("Icon resolver initialization completed")


async def shutdown_resolver() -> None:
    """Close the icon resolver's HTTP client."""
    global resolver
    if resolver is not None:
        await resolver.fetcher.close()
        resolver = None


def get_resolver() -> IconResolver:
    """Return the icon resolver"""
    if resolver is None:
        raise ValueError("Icon resolver has not been initialized.")
    return resolver
