"""HTTP writer posting line protocol to the InfluxDB write endpoint."""

import logging

import httpx

from sensu_influxdb_handler.core.errors import TransportError
from sensu_influxdb_handler.core.models import HandlerConfig

logger = logging.getLogger(__name__)

# Precision names accepted by the InfluxDB 1.x /write endpoint
_QUERY_PRECISION = {"ns": "ns", "us": "u", "ms": "ms", "s": "s"}

_CONTENT_TYPE = "text/plain; charset=utf-8"


def write_url(config: HandlerConfig) -> str:
    """Return the write endpoint URL for the configured server."""
    return config.addr.rstrip("/") + "/write"


def write_params(config: HandlerConfig) -> dict[str, str]:
    """Return the query parameters of a write request."""
    return {"db": config.db_name, "precision": _QUERY_PRECISION[config.precision]}


class LineProtocolWriter:
    """RecordWriter sending one payload per call with a single HTTP POST.

    Example:
        ```python
        writer = LineProtocolWriter(HandlerConfig(addr="http://influx:8086"))
        writer.write("cpu,sensu_entity_name=web01 value=0.5 1702300000\\n")
        ```
    """

    def __init__(
        self,
        config: HandlerConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the writer.

        Args:
            config: Handler settings (address, database, credentials, TLS,
                    timeout, precision).
            transport: Optional httpx transport, used by tests to intercept
                       requests.
        """
        self._config = config
        self._transport = transport

    def _client(self) -> httpx.Client:
        auth = None
        if self._config.username:
            auth = httpx.BasicAuth(self._config.username, self._config.password or "")
        return httpx.Client(
            auth=auth,
            timeout=self._config.timeout,
            verify=not self._config.insecure_skip_verify,
            transport=self._transport,
        )

    def write(self, payload: str) -> None:
        """POST the payload to ``<addr>/write``.

        Raises:
            TransportError: On a non-2xx response or a network failure.
        """
        url = write_url(self._config)
        logger.debug("Writing %d bytes to %s", len(payload), url)
        try:
            with self._client() as client:
                response = client.post(
                    url,
                    params=write_params(self._config),
                    content=payload.encode("utf-8"),
                    headers={"Content-Type": _CONTENT_TYPE},
                )
        except httpx.HTTPError as e:
            raise TransportError(f"write to {url} failed: {e}") from e

        if not response.is_success:
            raise TransportError(
                f"write to {url} failed with HTTP {response.status_code}: "
                f"{response.text.strip()}",
                status_code=response.status_code,
                body=response.text,
            )
