"""Annotation decision and annotation record for check state changes."""

from sensu_influxdb_handler.core.models import (
    Event,
    HandlerConfig,
    IntegerField,
    Record,
    StringField,
)
from sensu_influxdb_handler.core.timestamps import to_precision

ANNOTATION_MEASUREMENT = "sensu_event"
ANNOTATION_TITLE = "Sensu Event"


def needs_annotation(event: Event) -> bool:
    """Return True when the event's check status was just observed.

    The first occurrence of a status (occurrences == 1) marks a state
    change, whatever the status value. Events without a check never
    need an annotation.
    """
    if event.check is None:
        return False
    return event.check.occurrences == 1


def annotation_record(event: Event, config: HandlerConfig) -> Record:
    """Build the ``sensu_event`` annotation record of an event.

    Title and description are stored already quoted, so they appear
    double quoted once encoded.

    Raises:
        ValueError: If the event has no check.
    """
    check = event.check
    if check is None:
        raise ValueError("annotation requires an event with a check")
    description = f"ALERT - {event.entity_name}/{check.name} : {check.output}"
    return Record(
        name=ANNOTATION_MEASUREMENT,
        tags={"check": check.name, "entity": event.entity_name},
        fields={
            "title": StringField(f'"{ANNOTATION_TITLE}"'),
            "description": StringField(f'"{description}"'),
            "status": IntegerField(check.status),
            "occurrences": IntegerField(check.occurrences),
        },
        timestamp=to_precision(check.executed, config.precision),
    )
