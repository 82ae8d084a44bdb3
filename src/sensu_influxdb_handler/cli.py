"""Command line entry point reading a Sensu event on stdin."""

import logging

import click

from sensu_influxdb_handler.adapters.decoding import StreamEventSource
from sensu_influxdb_handler.adapters.transport import LineProtocolWriter
from sensu_influxdb_handler.core.errors import HandlerError
from sensu_influxdb_handler.core.models import PRECISIONS, HandlerConfig
from sensu_influxdb_handler.handler import run

logger = logging.getLogger(__name__)


@click.command(name="sensu-influxdb-handler")
@click.option(
    "-a",
    "--addr",
    envvar="INFLUXDB_ADDR",
    default="http://localhost:8086",
    show_default=True,
    help="URL of the InfluxDB server.",
)
@click.option(
    "-d",
    "--db-name",
    envvar="INFLUXDB_DB",
    default="sensu",
    show_default=True,
    help="Database to write to.",
)
@click.option("-u", "--username", envvar="INFLUXDB_USER", help="Basic auth user.")
@click.option("-p", "--password", envvar="INFLUXDB_PASS", help="Basic auth password.")
@click.option(
    "--precision",
    envvar="INFLUXDB_PRECISION",
    type=click.Choice(PRECISIONS),
    default="s",
    show_default=True,
    help="Timestamp precision of the written records.",
)
@click.option(
    "--timeout",
    envvar="INFLUXDB_TIMEOUT",
    type=click.FloatRange(min=0, min_open=True),
    default=10.0,
    show_default=True,
    help="HTTP timeout in seconds.",
)
@click.option(
    "-i",
    "--insecure-skip-verify",
    is_flag=True,
    help="Skip TLS certificate verification.",
)
@click.option(
    "-c",
    "--check-status-metric",
    is_flag=True,
    help="Send the check status as a metric.",
)
@click.option(
    "-l",
    "--legacy-format",
    "legacy",
    is_flag=True,
    help="Keep full metric names and tag the entity as host.",
)
@click.option(
    "-s",
    "--strip-host",
    is_flag=True,
    help="Strip the entity name prefix from metric names.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log at debug level.")
def main(
    addr: str,
    db_name: str,
    username: str | None,
    password: str | None,
    precision: str,
    timeout: float,
    insecure_skip_verify: bool,
    check_status_metric: bool,
    legacy: bool,
    strip_host: bool,
    verbose: bool,
) -> None:
    """Send the Sensu event read on stdin to InfluxDB."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = HandlerConfig(
            addr=addr,
            db_name=db_name,
            username=username,
            password=password,
            precision=precision,
            legacy=legacy,
            strip_host=strip_host,
            check_status_metric=check_status_metric,
            insecure_skip_verify=insecure_skip_verify,
            timeout=timeout,
        )
        run(StreamEventSource(), config, LineProtocolWriter(config))
    except HandlerError as e:
        logger.error("%s: %s", type(e).__name__, e)
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
