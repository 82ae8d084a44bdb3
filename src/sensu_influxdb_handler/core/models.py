"""Core domain models for Sensu events and line-protocol records."""

from dataclasses import dataclass, field

from sensu_influxdb_handler.core.errors import ConfigurationError

PRECISIONS = ("ns", "us", "ms", "s")


@dataclass(frozen=True)
class Tag:
    """A name/value pair attached to a metric point."""

    name: str
    value: str


@dataclass(frozen=True)
class Point:
    """A single measurement carried by an event.

    Attributes:
        name: Dotted or underscored metric name (e.g., ram.total.memory).
        value: The measured value.
        timestamp: Unix timestamp in seconds, milliseconds, microseconds
                   or nanoseconds. 0 means unset.
        tags: Ordered tags, names unique within the point.
    """

    name: str
    value: float
    timestamp: int = 0
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True)
class Check:
    """Result of a check executed against an entity.

    Attributes:
        name: Check name (e.g., check-cpu).
        status: Exit status of the check (0 OK, 1 warning, 2 critical, ...).
        occurrences: Consecutive occurrences of the current status.
        output: Human readable check output.
        executed: Unix timestamp in seconds of the execution, 0 if unknown.
    """

    name: str
    status: int = 0
    occurrences: int = 1
    output: str = ""
    executed: int = 0


@dataclass(frozen=True)
class Event:
    """One monitoring observation: an entity with an optional check and metrics."""

    entity_name: str
    check: Check | None = None
    metrics: tuple[Point, ...] = ()


@dataclass(frozen=True)
class IntegerField:
    """Integer field value, written with an ``i`` suffix."""

    value: int


@dataclass(frozen=True)
class FloatField:
    """Floating point field value, written in plain decimal."""

    value: float


@dataclass(frozen=True)
class StringField:
    """String field value, written double quoted."""

    value: str


FieldValue = IntegerField | FloatField | StringField


@dataclass(frozen=True)
class Record:
    """One line-protocol record.

    Attributes:
        name: Measurement name.
        tags: Tag key to tag value.
        fields: Field key to typed field value, at least one entry.
        timestamp: Timestamp already expressed in the write precision,
                   or None to let the server assign one.
    """

    name: str
    tags: dict[str, str] = field(default_factory=dict)
    fields: dict[str, FieldValue] = field(default_factory=dict)
    timestamp: int | None = None


@dataclass(frozen=True)
class HandlerConfig:
    """Handler settings, built once at startup and passed explicitly.

    Attributes:
        addr: Base URL of the InfluxDB server.
        db_name: Target database.
        username: Basic auth user, None to send no credentials.
        password: Basic auth password.
        precision: Write precision, one of ns, us, ms, s.
        legacy: Keep full point names, ``value`` field and ``host`` tag.
        strip_host: Remove a leading ``<entity>.`` from point names.
        check_status_metric: Emit a status record for the check.
        insecure_skip_verify: Disable TLS certificate verification.
        timeout: HTTP timeout in seconds.
    """

    addr: str = "http://localhost:8086"
    db_name: str = "sensu"
    username: str | None = None
    password: str | None = None
    precision: str = "s"
    legacy: bool = False
    strip_host: bool = False
    check_status_metric: bool = False
    insecure_skip_verify: bool = False
    timeout: float = 10.0

    def __post_init__(self) -> None:
        if self.precision not in PRECISIONS:
            raise ConfigurationError(
                f"precision must be one of {', '.join(PRECISIONS)}, "
                f"got {self.precision!r}"
            )
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        if not self.addr:
            raise ConfigurationError("addr must not be empty")
