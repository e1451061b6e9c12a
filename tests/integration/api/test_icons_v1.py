# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Integration tests for the icons API endpoint."""

import httpx
import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture


def test_icons_lists_candidates_best_first(client: TestClient, upstream_routes) -> None:
    """Test that the best icon and every candidate are returned in rank order."""
    upstream_routes["example.com/"] = httpx.Response(
        200,
        text="""
        <meta property="og:image" content="https://cdn.example.com/banner.png">
        <link rel="icon" sizes="16x16" href="/favicon-16.png">
        <link rel="icon" sizes="96x96" href="/favicon-96.png">
        """,
    )

    response = client.get("/api/v1/icons", params={"url": "example.com"})

    assert response.status_code == 200
    assert response.json() == {
        "best_icon": {
            "url": "https://example.com/favicon-96.png",
            "size": "96x96",
            "type": "favicon",
        },
        "all_icons": [
            {"url": "https://example.com/favicon-96.png", "size": "96x96", "type": "favicon"},
            {"url": "https://example.com/favicon-16.png", "size": "16x16", "type": "favicon"},
            {"url": "https://cdn.example.com/banner.png", "size": "1200x630", "type": "og-image"},
        ],
    }


def test_icons_does_not_download_the_icon(client: TestClient, upstream_routes) -> None:
    """Test that only the page is fetched when listing candidates."""
    upstream_routes["example.com/"] = httpx.Response(200, text='<link rel="icon" href="/a.png">')
    upstream_routes["example.com/a.png"] = httpx.ConnectError("must not be requested")

    response = client.get("/api/v1/icons", params={"url": "https://example.com/"})

    assert response.status_code == 200
    assert response.json()["best_icon"]["url"] == "https://example.com/a.png"


@pytest.mark.parametrize(
    ("params", "page_status", "expected_status", "expected_detail"),
    [
        ({}, 200, 400, "Usage: /{url-to-fetch}"),
        ({"url": "httpfoo"}, 200, 400, "Invalid URL: httpfoo"),
        ({"url": "example.com/"}, 500, 502, "Failed to fetch https://example.com/: 500"),
        ({"url": "example.com/"}, 200, 404, "No icons found"),
    ],
    ids=["empty", "invalid", "page-error", "not-found"],
)
def test_icons_errors(
    client: TestClient,
    upstream_routes,
    params: dict[str, str],
    page_status: int,
    expected_status: int,
    expected_detail: str,
) -> None:
    """Test that resolution failures map to HTTP errors with a JSON detail."""
    upstream_routes["example.com/"] = httpx.Response(page_status, text="<html></html>")

    response = client.get("/api/v1/icons", params=params)

    assert response.status_code == expected_status
    assert response.json() == {"detail": expected_detail}


def test_icons_metrics(mocker: MockerFixture, client: TestClient, upstream_routes) -> None:
    """Test that the outcome of a resolution is counted."""
    upstream_routes["example.com/"] = httpx.Response(200, text="<html></html>")
    increment = mocker.patch("aiodogstatsd.Client.increment")

    client.get("/api/v1/icons", params={"url": "example.com/"})

    metric_names = [call.args[0] for call in increment.call_args_list]
    assert "icons.resolve.not_found" in metric_names
    assert "get.api.v1.icons.status_codes.404" in metric_names
    assert "response.status_codes.404" in metric_names
