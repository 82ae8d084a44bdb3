"""Handler service: translate one event and send it in a single write."""

import logging

from sensu_influxdb_handler.core.encoding.line_protocol import encode_records
from sensu_influxdb_handler.core.models import Event, HandlerConfig
from sensu_influxdb_handler.core.ports import EventSource, RecordWriter
from sensu_influxdb_handler.core.translate import translate

logger = logging.getLogger(__name__)


def send_event(event: Event, config: HandlerConfig, writer: RecordWriter) -> int:
    """Translate an event, encode its records and write them once.

    Encoding happens before anything is sent, so a record that cannot be
    encoded aborts the invocation with nothing written. Events producing
    no records are not sent.

    Returns:
        The number of records written.

    Raises:
        EncodingError: If a record cannot be encoded.
        TransportError: If the write fails.
    """
    records = translate(event, config)
    payload = encode_records(records)
    if not records:
        logger.info("Event for entity %r produced no records", event.entity_name)
        return 0

    logger.debug("Payload:\n%s", payload)
    writer.write(payload)
    logger.info(
        "Sent %d record(s) for entity %r to %s",
        len(records),
        event.entity_name,
        config.db_name,
    )
    return len(records)


def run(source: EventSource, config: HandlerConfig, writer: RecordWriter) -> int:
    """Read one event from the source and send it."""
    event = source.read()
    return send_event(event, config, writer)
