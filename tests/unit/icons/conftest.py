# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Fixtures for icon discovery tests."""

from typing import Callable

import httpx
import pytest

from iconfinder.icons.extractor import IconExtractor
from iconfinder.icons.fetcher import IconFetcher
from iconfinder.icons.resolver import IconResolver
from iconfinder.icons.selector import IconSelector
from iconfinder.utils.http_client import create_http_client

PAGE_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

FetcherFactory = Callable[[dict[str, httpx.Response]], IconFetcher]


@pytest.fixture(name="requested_urls")
def fixture_requested_urls() -> list[str]:
    """Collect the URLs requested through the mocked upstream."""
    return []


@pytest.fixture(name="fetcher_factory")
def fixture_fetcher_factory(requested_urls: list[str]) -> FetcherFactory:
    """Return a function that creates an IconFetcher backed by `httpx.MockTransport`.

    Routes are keyed by `host + path`, e.g. "example.com/manifest.json". Requests to
    any other URL get a 404.
    """

    def _create_fetcher(routes: dict[str, httpx.Response]) -> IconFetcher:
        def handler(request: httpx.Request) -> httpx.Response:
            requested_urls.append(str(request.url))
            response = routes.get(f"{request.url.host}{request.url.path}")
            if response is None:
                return httpx.Response(404)
            return httpx.Response(
                response.status_code, headers=response.headers, content=response.content
            )

        client = create_http_client(transport=httpx.MockTransport(handler))
        return IconFetcher(client, page_accept=PAGE_ACCEPT)

    return _create_fetcher


@pytest.fixture(name="resolver_factory")
def fixture_resolver_factory(
    fetcher_factory: FetcherFactory,
) -> Callable[[dict[str, httpx.Response]], IconResolver]:
    """Return a function that creates an IconResolver over mocked upstream routes."""

    def _create_resolver(routes: dict[str, httpx.Response]) -> IconResolver:
        fetcher = fetcher_factory(routes)
        return IconResolver(fetcher, IconExtractor(fetcher), IconSelector())

    return _create_resolver
