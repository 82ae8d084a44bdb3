"""In-memory writer adapter."""


class InMemoryWriter:
    """In-memory implementation of RecordWriter.

    Keeps every payload in a list. Suitable for testing and for
    inspecting what would be sent without a server.
    """

    def __init__(self) -> None:
        self._payloads: list[str] = []

    def write(self, payload: str) -> None:
        """Store a payload."""
        self._payloads.append(payload)

    @property
    def payloads(self) -> list[str]:
        """Payloads written so far, oldest first."""
        return list(self._payloads)

    def lines(self) -> list[str]:
        """All records written so far, one line each."""
        return [line for payload in self._payloads for line in payload.splitlines()]
