"""Error types raised by the handler."""


class HandlerError(Exception):
    """Base class for every failure that aborts an invocation."""


class MalformedInputError(HandlerError):
    """The event document could not be decoded."""


class EncodingError(HandlerError):
    """A record cannot be represented in line protocol."""


class ConfigurationError(HandlerError):
    """A configuration value is invalid."""


class TransportError(HandlerError):
    """The write request failed.

    Attributes:
        status_code: HTTP status of the response, None for network failures.
        body: Response body, empty for network failures.
    """

    def __init__(
        self, message: str, status_code: int | None = None, body: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
