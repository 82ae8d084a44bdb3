"""Sensu handler sending events and metrics to InfluxDB as line protocol."""

from sensu_influxdb_handler.core.annotations import needs_annotation
from sensu_influxdb_handler.core.encoding import encode_record, encode_records
from sensu_influxdb_handler.core.errors import (
    ConfigurationError,
    EncodingError,
    HandlerError,
    MalformedInputError,
    TransportError,
)
from sensu_influxdb_handler.core.models import (
    Check,
    Event,
    FloatField,
    HandlerConfig,
    IntegerField,
    Point,
    Record,
    StringField,
    Tag,
)
from sensu_influxdb_handler.core.translate import translate

__all__ = [
    "Check",
    "ConfigurationError",
    "EncodingError",
    "Event",
    "FloatField",
    "HandlerConfig",
    "HandlerError",
    "IntegerField",
    "MalformedInputError",
    "Point",
    "Record",
    "StringField",
    "Tag",
    "TransportError",
    "encode_record",
    "encode_records",
    "needs_annotation",
    "translate",
]
