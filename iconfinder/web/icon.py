"""The icon endpoint: resolves a page given in the path and returns its icon"""

import logging

from aiodogstatsd import Client
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, StreamingResponse
from starlette.background import BackgroundTask
from starlette.requests import Request
from starlette.responses import Response

from iconfinder.exceptions import IconResolutionError
from iconfinder.icons import get_resolver
from iconfinder.icons.resolver import IconResolver
from iconfinder.metrics import record_failure, record_resolution
from iconfinder.middleware import ScopeKey
from iconfinder.web.errors import get_error_metric_name, get_error_status_code

logger = logging.getLogger(__name__)
router = APIRouter()

# Connection-level headers that only apply to the upstream hop.
HOP_BY_HOP_HEADERS: frozenset[str] = frozenset(
    [
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "transfer-encoding",
        "upgrade",
    ]
)


@router.get("/", include_in_schema=False)
@router.get("/{target_url:path}", tags=["icon"], summary="Icon of a web page")
async def icon(
    request: Request,
    target_url: str = "",
    resolver: IconResolver = Depends(get_resolver),
) -> Response:
    """Find the best icon of the page at `target_url` and pass its response through.

    The upstream status, headers and raw body are forwarded unchanged, apart from
    hop-by-hop headers.

    The target may omit its scheme, e.g. `/example.com`, in which case https is used.
    """
    metrics_client: Client = request.scope[ScopeKey.METRICS_CLIENT]
    request.scope[ScopeKey.ICON_TARGET] = target_url

    try:
        resolution = await resolver.resolve(target_url)
        upstream = await resolver.fetcher.stream_icon(resolution.best_icon.url)
    except IconResolutionError as e:
        record_failure(metrics_client, get_error_metric_name(e), endpoint="icon")
        return PlainTextResponse(str(e), status_code=get_error_status_code(e))
    except Exception as e:
        logger.exception(f"Unexpected error resolving icon for {target_url}")
        record_failure(metrics_client, "error", endpoint="icon")
        return PlainTextResponse(f"Error: {e}", status_code=500)

    record_resolution(metrics_client, resolution, endpoint="icon")

    return StreamingResponse(
        upstream.aiter_raw(),
        status_code=upstream.status_code,
        headers={
            name: value
            for name, value in upstream.headers.items()
            if name.lower() not in HOP_BY_HOP_HEADERS
        },
        background=BackgroundTask(upstream.aclose),
    )
