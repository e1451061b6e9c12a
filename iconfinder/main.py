"""App startup point"""

import logging

from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from iconfinder import icons
from iconfinder.config_logging import configure_logging
from iconfinder.config_sentry import configure_sentry
from iconfinder.metrics import configure_metrics, get_metrics_client
from iconfinder.middleware import logging as mw_logging, metrics
from iconfinder.web import api_v1, dockerflow, icon

tags_metadata = [
    {
        "name": "icon",
        "description": "Fetch the best icon of a web page, e.g. `/example.com`.",
    },
    {
        "name": "icons",
        "description": "Inspect the icon candidates of a web page.",
    },
]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure reporting and open the resolver's HTTP client for the app's lifetime."""
    configure_logging()
    configure_sentry()
    await configure_metrics()
    await icons.init_resolver()
    yield
    await icons.shutdown_resolver()
    await get_metrics_client().close()


app = FastAPI(openapi_tags=tags_metadata, lifespan=lifespan)

# Middleware added last runs first. `LoggingMiddleware` wraps `CorrelationIdMiddleware`
# so the request id is on the response it logs.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
)
app.add_middleware(metrics.MetricsMiddleware)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(mw_logging.LoggingMiddleware)

app.include_router(dockerflow.router)
app.include_router(api_v1.router, prefix="/api/v1")
# The icon router matches every path, so it has to come last.
app.include_router(icon.router)


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, proxy_headers=True)
