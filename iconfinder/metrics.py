"""StatsD metrics for icon resolution."""

import logging
from collections import Counter
from functools import cache
from typing import Mapping

import aiodogstatsd

from iconfinder.config import settings
from iconfinder.icons.models import IconResolution

logger = logging.getLogger(__name__)

# Type definition for tags in aiodogstatsd metrics
MetricTags = Mapping[str, float | int | str]


@cache
def get_metrics_client() -> aiodogstatsd.Client:
    """Return the process-wide StatsD client, tagged with the deployment it runs in."""
    return aiodogstatsd.Client(
        host=settings.metrics.host,
        port=settings.metrics.port,
        namespace="iconfinder",
        constant_tags={
            "application": "iconfinder",
            "deployment.canary": int(settings.deployment.canary),
        },
    )


async def configure_metrics() -> None:
    """Connect the StatsD client. Used in application startup."""
    client = get_metrics_client()
    if settings.metrics.dev_logger:
        client._protocol = DatagramLogger()
    await client.connect()


def record_resolution(
    client: aiodogstatsd.Client, resolution: IconResolution, endpoint: str
) -> None:
    """Count a found icon and the candidates it was picked from, per source."""
    tags: MetricTags = {"endpoint": endpoint, "source": resolution.best_icon.source.value}
    client.increment("icons.resolve.found", tags=tags)

    for source, count in Counter(icon.source.value for icon in resolution.icons).items():
        client.increment(f"icons.candidates.{source}", value=count, tags={"endpoint": endpoint})


def record_failure(client: aiodogstatsd.Client, outcome: str, endpoint: str) -> None:
    """Count a resolution that ended without an icon, e.g. `not_found` or `page_error`."""
    client.increment(f"icons.resolve.{outcome}", tags={"endpoint": endpoint})


class DatagramLogger(aiodogstatsd.client.DatagramProtocol):
    """Protocol that logs metric lines instead of sending them, for development."""

    def send(self, data: bytes) -> None:
        for line in data.decode("utf8").splitlines():
            metric, _, _ = line.partition(":")
            logger.debug(f"Metric {metric}", extra={"data": line})

    def error_received(self, exc: Exception) -> None:
        logger.error(f"Failed to send metrics: {exc}")
