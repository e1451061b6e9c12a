"""Sentry Configuration"""

from typing import Any
from urllib.parse import urlsplit

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration
from sentry_sdk.types import Event, Hint

from iconfinder.config import settings
from iconfinder.middleware.metrics import KNOWN_PATHS
from iconfinder.utils.version import fetch_app_version_from_file

REDACTED_TEXT = "[REDACTED]"

# Frame variables holding the URL of a requested page, manifest or icon.
URL_FRAME_VARS: frozenset[str] = frozenset(
    ["url", "target", "target_url", "page_url", "base_url", "manifest_url"]
)


def configure_sentry() -> None:  # pragma: no cover
    """Initialize Sentry unless it is disabled. Releases are named by the deployed commit."""
    if settings.sentry.mode == "disabled":
        return

    sentry_sdk.init(
        dsn=settings.sentry.dsn,
        integrations=[StarletteIntegration(), FastApiIntegration()],
        release=fetch_app_version_from_file().commit,
        debug=settings.sentry.mode == "debug",
        before_send=strip_sensitive_data,
        environment=settings.sentry.env,
        traces_sample_rate=settings.sentry.traces_sample_rate,
    )


def _redact_request(request: dict[str, Any]) -> None:
    if request.get("query_string"):
        request["query_string"] = REDACTED_TEXT

    # The icon endpoint takes its target as the request path.
    if url := request.get("url"):
        parts = urlsplit(url)
        if parts.path not in KNOWN_PATHS and parts.path != "/":
            request["url"] = f"{parts.scheme}://{parts.netloc}/{REDACTED_TEXT}"


def strip_sensitive_data(event: Event, hint: Hint) -> Event | None:
    """Remove the URLs of requested pages from a Sentry event.

    Targets travel in the path of the icon endpoint, in the query string of the JSON
    endpoint and in the local variables of the frames that fetch them.
    """
    #  See: https://docs.sentry.io/platforms/python/configuration/filtering/
    _redact_request(event.get("request", {}))

    for exception in event.get("exception", {}).get("values", []):
        for frame in (exception.get("stacktrace") or {}).get("frames", []):
            frame_vars = frame.get("vars", {})
            for name in URL_FRAME_VARS.intersection(frame_vars):
                frame_vars[name] = REDACTED_TEXT

    return event
