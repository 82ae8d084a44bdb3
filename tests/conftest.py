"""Shared test fixtures for all test modules."""

from collections.abc import Callable

import pytest

from sensu_influxdb_handler.adapters.memory import InMemoryWriter
from sensu_influxdb_handler.core.models import Check, Event, HandlerConfig, Point, Tag

FIXTURE_TIMESTAMP = 1702300000


@pytest.fixture
def config() -> HandlerConfig:
    """Default handler settings."""
    return HandlerConfig()


@pytest.fixture
def fixture_point() -> Point:
    """The ``answer`` point: value 42 tagged foo=bar."""
    return Point(
        name="answer",
        value=42.0,
        timestamp=FIXTURE_TIMESTAMP,
        tags=(Tag(name="foo", value="bar"),),
    )


@pytest.fixture
def make_event(fixture_point: Point) -> Callable[..., Event]:
    """Factory fixture for events.

    Defaults to a passing check seen for the first time and no metrics.

    Usage:
        def test_something(make_event):
            event = make_event("entity1", "check1", metrics=True)
    """

    def _event(
        entity_name: str = "entity1",
        check_name: str | None = "check1",
        status: int = 0,
        occurrences: int = 1,
        output: str = "",
        metrics: bool | tuple[Point, ...] = False,
    ) -> Event:
        check = None
        if check_name is not None:
            check = Check(
                name=check_name,
                status=status,
                occurrences=occurrences,
                output=output,
                executed=FIXTURE_TIMESTAMP,
            )
        if metrics is True:
            points: tuple[Point, ...] = (fixture_point,)
        elif metrics is False:
            points = ()
        else:
            points = metrics
        return Event(entity_name=entity_name, check=check, metrics=points)

    return _event


@pytest.fixture
def writer() -> InMemoryWriter:
    """Fresh in-memory writer."""
    return InMemoryWriter()
