"""Line protocol encoder for records."""

import math
from collections.abc import Iterable
from decimal import Decimal

from sensu_influxdb_handler.core.errors import EncodingError
from sensu_influxdb_handler.core.models import (
    FieldValue,
    FloatField,
    IntegerField,
    Record,
    StringField,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Backslash first so the escapes added afterwards are not doubled.
# Line protocol has no newline escape: a newline is written as the two
# characters ``\n`` and is stored that way, it does not read back as a newline.
_MEASUREMENT_ESCAPES = (("\\", "\\\\"), ("\n", "\\n"), (",", "\\,"), (" ", "\\ "))
_KEY_ESCAPES = (*_MEASUREMENT_ESCAPES, ("=", "\\="))
_STRING_ESCAPES = (("\\", "\\\\"), ('"', '\\"'), ("\n", "\\n"))


def _replace_all(value: str, escapes: tuple[tuple[str, str], ...]) -> str:
    for old, new in escapes:
        value = value.replace(old, new)
    return value


def escape_measurement(name: str) -> str:
    """Escape a measurement name (backslash, newline, comma, space)."""
    return _replace_all(name, _MEASUREMENT_ESCAPES)


def escape_key(key: str) -> str:
    """Escape a tag key, tag value or field key (as measurements, plus equals)."""
    return _replace_all(key, _KEY_ESCAPES)


def quote_string(value: str) -> str:
    """Wrap a string field value in double quotes, escaping quotes inside.

    Newlines are flattened to a literal ``\\n`` so the record stays on one
    line. This is one-way: InfluxDB keeps the backslash and the ``n``.
    """
    return f'"{_replace_all(value, _STRING_ESCAPES)}"'


def format_float(value: float) -> str:
    """Format a float in plain decimal, without exponent or trailing ``.0``.

    Raises:
        EncodingError: For NaN and infinite values.
    """
    if math.isnan(value) or math.isinf(value):
        raise EncodingError(f"cannot encode non-finite float {value!r}")
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_field_value(value: FieldValue) -> str:
    """Format a typed field value.

    Raises:
        EncodingError: If the value is not an IntegerField, FloatField
                       or StringField, or an integer is outside int64.
    """
    if isinstance(value, IntegerField):
        number = int(value.value)
        if not _INT64_MIN <= number <= _INT64_MAX:
            raise EncodingError(f"integer {number} does not fit in int64")
        return f"{number}i"
    if isinstance(value, FloatField):
        return format_float(value.value)
    if isinstance(value, StringField):
        return quote_string(value.value)
    raise EncodingError(f"unsupported field value type {type(value).__name__}")


def encode_record(record: Record) -> str:
    """Encode one record as a single line, without trailing newline.

    Tags and fields are written sorted by key. Tags with an empty value
    are omitted since line protocol does not allow them.

    Raises:
        EncodingError: If the record has no fields or a field cannot be encoded.
    """
    if not record.fields:
        raise EncodingError(f"record {record.name!r} has no fields")

    parts = [escape_measurement(record.name)]
    for key, value in sorted(record.tags.items()):
        if value == "":
            continue
        parts.append(f",{escape_key(key)}={escape_key(value)}")

    fields = ",".join(
        f"{escape_key(key)}={format_field_value(value)}"
        for key, value in sorted(record.fields.items())
    )
    line = "".join(parts) + " " + fields

    if record.timestamp is not None:
        line += f" {record.timestamp}"
    return line


def encode_records(records: Iterable[Record]) -> str:
    """Encode records to newline-delimited line protocol.

    Args:
        records: An iterable of Record objects.

    Returns:
        One line per record, each ending with a newline.
        Empty string if no records.
    """
    lines = [encode_record(record) for record in records]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
