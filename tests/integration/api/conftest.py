# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations for the API integration tests."""

from typing import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from iconfinder.icons import build_resolver, get_resolver
from iconfinder.main import app

UpstreamRoutes = dict[str, httpx.Response | Exception]


@pytest.fixture(name="upstream_routes")
def fixture_upstream_routes() -> UpstreamRoutes:
    """Upstream responses keyed by `host + path`. Tests fill this in before requesting.

    An exception value is raised by the transport instead of returning a response.
    """
    return {}


@pytest.fixture(name="client")
def fixture_test_client(upstream_routes: UpstreamRoutes) -> Iterator[TestClient]:
    """Return a FastAPI TestClient whose icon resolver talks to the mocked upstream.

    Note that this will NOT trigger event handlers (i.e. `startup` and `shutdown`) for
    the app, see: https://fastapi.tiangolo.com/advanced/testing-events/
    """

    def handler(request: httpx.Request) -> httpx.Response:
        route = upstream_routes.get(f"{request.url.host}{request.url.path}")
        if isinstance(route, Exception):
            raise route
        if route is None:
            return httpx.Response(404)
        return httpx.Response(route.status_code, headers=route.headers, content=route.content)

    resolver = build_resolver(transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_resolver] = lambda: resolver
    yield TestClient(app)
    app.dependency_overrides.clear()
