"""Translate one Sensu event into line-protocol records."""

from sensu_influxdb_handler.core.annotations import annotation_record, needs_annotation
from sensu_influxdb_handler.core.models import (
    Event,
    FloatField,
    HandlerConfig,
    IntegerField,
    Point,
    Record,
)
from sensu_influxdb_handler.core.naming import resolve_metric_identity, set_tags
from sensu_influxdb_handler.core.timestamps import to_precision


def status_record(event: Event, config: HandlerConfig) -> Record:
    """Build the check status record: ``<check>,<entity tag> status=<n>i``.

    Raises:
        ValueError: If the event has no check.
    """
    check = event.check
    if check is None:
        raise ValueError("status record requires an event with a check")
    return Record(
        name=check.name,
        tags=set_tags(event.entity_name, (), config),
        fields={"status": IntegerField(check.status)},
        timestamp=to_precision(check.executed, config.precision),
    )


def metric_record(event: Event, point: Point, config: HandlerConfig) -> Record:
    """Build the record of a single metric point."""
    identity = resolve_metric_identity(event.entity_name, point, config)
    return Record(
        name=identity.name,
        tags=identity.tags,
        fields={identity.field_key: FloatField(point.value)},
        timestamp=to_precision(point.timestamp, config.precision),
    )


def translate(event: Event, config: HandlerConfig) -> list[Record]:
    """Turn an event into records, in emission order.

    Order is: status record (when enabled and the event has a check),
    annotation record (on the first occurrence of a check status), then
    one record per metric point in input order. Points resolving to the
    same measurement are not merged.

    Args:
        event: The decoded event.
        config: Handler settings.

    Returns:
        At most len(event.metrics) + 2 records.
    """
    records: list[Record] = []

    if config.check_status_metric and event.check is not None:
        records.append(status_record(event, config))

    if needs_annotation(event):
        records.append(annotation_record(event, config))

    for point in event.metrics:
        records.append(metric_record(event, point, config))

    return records
