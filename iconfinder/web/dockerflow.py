"""Dockerflow endpoints for deployment tooling."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse, Response

from iconfinder.icons import get_resolver
from iconfinder.icons.resolver import IconResolver
from iconfinder.utils.version import Version, fetch_app_version_from_file

router = APIRouter(tags=["dockerflow"])
logger = logging.getLogger(__name__)


@router.get("/__version__", summary="Dockerflow: __version__")
async def version() -> Version:
    """Return the build information written to `version.json` at deploy time."""
    try:
        return fetch_app_version_from_file()
    except FileNotFoundError:
        raise HTTPException(status_code=500, detail="Version file does not exist")


@router.get("/__heartbeat__", summary="Dockerflow: __heartbeat__")
async def heartbeat(resolver: IconResolver = Depends(get_resolver)) -> JSONResponse:
    """Report whether icon lookups can be served.

    Lookups need the resolver's pooled HTTP client, which is closed at shutdown.
    """
    client_ok = not resolver.fetcher.client.is_closed
    return JSONResponse(
        {
            "status": "ok" if client_ok else "error",
            "checks": {"http_client": "ok" if client_ok else "error"},
        },
        status_code=200 if client_ok else 500,
    )


@router.get("/__lbheartbeat__", summary="Dockerflow: __lbheartbeat__")
async def lbheartbeat() -> Response:
    """Answer the load balancer as long as the process is up."""
    return Response(content="")


@router.get("/__error__", summary="Dockerflow: __error__")
async def error() -> Response:
    """Fail on purpose, to check that errors are logged and reported."""
    logger.error("The __error__ endpoint was called")
    raise HTTPException(status_code=500, detail="")
