"""The shared `httpx.AsyncClient` used to reach upstream sites"""

from httpx import AsyncBaseTransport, AsyncClient, Limits, Timeout


def create_http_client(
    max_connections: int = 100,
    connect_timeout: float = 5.0,
    request_timeout: float = 10.0,
    pool_timeout: float = 1.0,
    headers: dict[str, str] | None = None,
    transport: AsyncBaseTransport | None = None,
) -> AsyncClient:
    """Create the pooled client for pages, manifests and icons.

    Targets are arbitrary sites, so there is no base URL and redirects are followed,
    e.g. from `http://` to `https://` or from the bare domain to `www.`.

    Args:
      - `max_connections` {int}: Size of the connection pool shared by all lookups.
      - `connect_timeout` {float}: Seconds to wait for an upstream connection.
      - `request_timeout` {float}: Seconds to wait for reads and writes.
      - `pool_timeout` {float}: Seconds to wait for a free pooled connection.
      - `headers` {dict[str, str] | None}: Sent with every request, e.g. the User-Agent.
      - `transport` {AsyncBaseTransport | None}: Replaces the network, e.g.
        `httpx.MockTransport` in tests.
    """
    return AsyncClient(
        limits=Limits(max_connections=max_connections),
        timeout=Timeout(request_timeout, connect=connect_timeout, pool=pool_timeout),
        headers=headers,
        transport=transport,
        follow_redirects=True,
    )
