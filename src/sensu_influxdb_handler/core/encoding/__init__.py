"""Wire encoders for records."""

from sensu_influxdb_handler.core.encoding.line_protocol import (
    encode_record,
    encode_records,
)

__all__ = [
    "encode_record",
    "encode_records",
]
