"""JSON decoding of Sensu events.

Maps the Sensu Go event document (entity, check and metrics objects) onto
the core Event model. Only the attributes the translator needs are read.
"""

import json
import sys
from typing import IO, Any

from sensu_influxdb_handler.core.errors import MalformedInputError
from sensu_influxdb_handler.core.models import Check, Event, Point, Tag


def _object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedInputError(f"{what} must be a JSON object")
    return value


def _metadata_name(obj: dict[str, Any], what: str) -> str:
    metadata = _object(obj.get("metadata") or {}, f"{what}.metadata")
    name = metadata.get("name", "")
    if not isinstance(name, str):
        raise MalformedInputError(f"{what}.metadata.name must be a string")
    return name


def _integer(obj: dict[str, Any], key: str, what: str, default: int = 0) -> int:
    value = obj.get(key, default)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInputError(f"{what}.{key} must be an integer")
    return value


def _decode_check(raw: Any) -> Check:
    check = _object(raw, "check")
    output = check.get("output", "")
    if not isinstance(output, str):
        raise MalformedInputError("check.output must be a string")
    return Check(
        name=_metadata_name(check, "check"),
        status=_integer(check, "status", "check"),
        occurrences=_integer(check, "occurrences", "check"),
        output=output,
        executed=_integer(check, "executed", "check"),
    )


def _decode_tag(raw: Any) -> Tag:
    tag = _object(raw, "metrics.points[].tags[]")
    name = tag.get("name")
    value = tag.get("value", "")
    if not isinstance(name, str) or not name:
        raise MalformedInputError("metric tag name must be a non-empty string")
    if not isinstance(value, str):
        raise MalformedInputError(f"metric tag {name!r} value must be a string")
    return Tag(name=name, value=value)


def _decode_point(raw: Any) -> Point:
    point = _object(raw, "metrics.points[]")
    name = point.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedInputError("metric point name must be a non-empty string")
    value = point.get("value", 0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedInputError(f"metric point {name!r} value must be a number")
    tags = point.get("tags") or []
    if not isinstance(tags, list):
        raise MalformedInputError(f"metric point {name!r} tags must be a list")
    return Point(
        name=name,
        value=float(value),
        timestamp=_integer(point, "timestamp", "metrics.points[]"),
        tags=tuple(_decode_tag(tag) for tag in tags),
    )


def _decode_points(raw: Any) -> tuple[Point, ...]:
    if raw is None:
        return ()
    metrics = _object(raw, "metrics")
    points = metrics.get("points") or []
    if not isinstance(points, list):
        raise MalformedInputError("metrics.points must be a list")
    return tuple(_decode_point(point) for point in points)


def decode_event(data: str | bytes) -> Event:
    """Decode a Sensu event JSON document.

    Args:
        data: The JSON document.

    Returns:
        The decoded Event.

    Raises:
        MalformedInputError: If the document is not valid JSON, is not an
                             object, lacks an entity or has invalid values.
    """
    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"invalid event JSON: {e}") from e

    document = _object(document, "event")
    if document.get("entity") is None:
        raise MalformedInputError("event has no entity")
    entity = _object(document["entity"], "entity")

    check = document.get("check")
    return Event(
        entity_name=_metadata_name(entity, "entity"),
        check=_decode_check(check) if check is not None else None,
        metrics=_decode_points(document.get("metrics")),
    )


def read_event(stream: IO[str] | IO[bytes]) -> Event:
    """Read a whole stream and decode it as one event.

    Raises:
        MalformedInputError: If the stream is empty, cannot be decoded as
                             text or holds an invalid event document.
    """
    try:
        data = stream.read()
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"event input is not valid UTF-8: {e}") from e
    if not data:
        raise MalformedInputError("no event data on input")
    return decode_event(data)


class StreamEventSource:
    """EventSource reading one JSON event from a text or binary stream.

    Defaults to the binary standard input, so undecodable bytes surface
    as MalformedInputError.
    """

    def __init__(self, stream: IO[str] | IO[bytes] | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin.buffer

    def read(self) -> Event:
        """Read the stream and decode it as one event."""
        return read_event(self._stream)
