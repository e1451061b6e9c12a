"""Icon finder V1 API"""

import logging
from typing import Annotated

from aiodogstatsd import Client
from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.requests import Request

from iconfinder.exceptions import IconResolutionError
from iconfinder.icons import get_resolver
from iconfinder.icons.resolver import IconResolver
from iconfinder.metrics import record_failure, record_resolution
from iconfinder.middleware import ScopeKey
from iconfinder.web.errors import get_error_metric_name, get_error_status_code
from iconfinder.web.models_v1 import IconResponse, IconsResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/icons",
    tags=["icons"],
    summary="Icon candidates of a web page",
    response_model=IconsResponse,
)
async def icons(
    request: Request,
    url: Annotated[str, Query(description="Page to inspect, with or without a scheme")] = "",
    resolver: IconResolver = Depends(get_resolver),
) -> IconsResponse:
    """Return the selected icon of a page and every candidate found, best first.

    Nothing is downloaded apart from the page itself and, when needed, its manifest.
    """
    metrics_client: Client = request.scope[ScopeKey.METRICS_CLIENT]
    request.scope[ScopeKey.ICON_TARGET] = url

    try:
        resolution = await resolver.resolve(url)
    except IconResolutionError as e:
        record_failure(metrics_client, get_error_metric_name(e), endpoint="api")
        raise HTTPException(status_code=get_error_status_code(e), detail=str(e))

    record_resolution(metrics_client, resolution, endpoint="api")
    return IconsResponse(
        best_icon=IconResponse.from_candidate(resolution.best_icon),
        all_icons=[IconResponse.from_candidate(icon) for icon in resolution.icons],
    )
