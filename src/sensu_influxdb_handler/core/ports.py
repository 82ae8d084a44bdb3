"""Port interfaces for the handler's collaborators.

These protocols define the contracts that input and output adapters must
implement. The core depends only on these interfaces, not on stdin or HTTP.
"""

from typing import Protocol, runtime_checkable

from sensu_influxdb_handler.core.models import Event


@runtime_checkable
class EventSource(Protocol):
    """Port for obtaining the event to handle.

    Examples: StreamEventSource (stdin), fixtures in tests.
    """

    def read(self) -> Event:
        """Read and decode one event.

        Raises:
            MalformedInputError: If the input is not a valid event.
        """
        ...


@runtime_checkable
class RecordWriter(Protocol):
    """Port for sending an encoded line-protocol payload.

    Examples: LineProtocolWriter (HTTP), InMemoryWriter.
    """

    def write(self, payload: str) -> None:
        """Send newline-delimited line-protocol records.

        Raises:
            TransportError: If the backend rejects or never receives the payload.
        """
        ...
