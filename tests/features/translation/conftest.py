"""BDD step definitions for event translation features."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from sensu_influxdb_handler.adapters.memory import InMemoryWriter
from sensu_influxdb_handler.core.models import Check, Event, HandlerConfig, Point, Tag
from sensu_influxdb_handler.handler import send_event


@dataclass
class TranslationScenarioContext:
    """Mutable state shared by the steps of one scenario."""

    settings: dict[str, Any] = field(default_factory=dict)
    entity_name: str = ""
    check: dict[str, Any] | None = None
    points: list[Point] = field(default_factory=list)
    writer: InMemoryWriter = field(default_factory=InMemoryWriter)
    sent: int = 0

    @property
    def payload(self) -> str:
        return "".join(self.writer.payloads)


@pytest.fixture
def ctx() -> TranslationScenarioContext:
    """Fresh scenario context for each test."""
    return TranslationScenarioContext()


# === Settings ===
@given("default handler settings")
def step_default_settings(ctx: TranslationScenarioContext) -> None:
    ctx.settings = {}


@given("the check status metric is enabled")
def step_check_status_metric(ctx: TranslationScenarioContext) -> None:
    ctx.settings["check_status_metric"] = True


@given("host stripping is enabled")
def step_strip_host(ctx: TranslationScenarioContext) -> None:
    ctx.settings["strip_host"] = True


@given("legacy format is enabled")
def step_legacy(ctx: TranslationScenarioContext) -> None:
    ctx.settings["legacy"] = True


# === Event ===
@given(parsers.re(r'an event for entity "(?P<entity>[^"]*)" without check'))
def step_event_without_check(ctx: TranslationScenarioContext, entity: str) -> None:
    ctx.entity_name = entity
    ctx.check = None


@given(
    parsers.re(
        r'an event for entity "(?P<entity>[^"]*)" with check "(?P<check>[^"]+)" '
        r"status (?P<status>\d+) occurrence (?P<occurrences>\d+)"
    ),
    converters={"status": int, "occurrences": int},
)
def step_event_with_check(
    ctx: TranslationScenarioContext,
    entity: str,
    check: str,
    status: int,
    occurrences: int,
) -> None:
    ctx.entity_name = entity
    ctx.check = {"name": check, "status": status, "occurrences": occurrences}


@given(parsers.re(r'the check output is "(?P<output>[^"]*)"'))
def step_check_output(ctx: TranslationScenarioContext, output: str) -> None:
    assert ctx.check is not None
    ctx.check["output"] = output


@given(
    parsers.re(
        r'a point "(?P<name>[^"]*)" with value (?P<value>[\d.]+) '
        r"tagged (?P<tag>\w+)=(?P<tag_value>\w+)"
    ),
    converters={"value": float},
)
def step_point(
    ctx: TranslationScenarioContext,
    name: str,
    value: float,
    tag: str,
    tag_value: str,
) -> None:
    ctx.points.append(Point(name=name, value=value, tags=(Tag(tag, tag_value),)))


# === Actions ===
@when("the event is sent")
def step_send(ctx: TranslationScenarioContext) -> None:
    event = Event(
        entity_name=ctx.entity_name,
        check=Check(**ctx.check) if ctx.check is not None else None,
        metrics=tuple(ctx.points),
    )
    ctx.sent = send_event(event, HandlerConfig(**ctx.settings), ctx.writer)


# === Assertions ===
@then(parsers.re(r'the payload contains "(?P<text>.*)"'))
def step_payload_contains(ctx: TranslationScenarioContext, text: str) -> None:
    assert text in ctx.payload


@then(parsers.re(r'the payload does not contain "(?P<text>.*)"'))
def step_payload_lacks(ctx: TranslationScenarioContext, text: str) -> None:
    assert text not in ctx.payload


@then(
    parsers.re(r'the payload contains the annotation for "(?P<alert>[^"]*)"')
)
def step_payload_annotation(ctx: TranslationScenarioContext, alert: str) -> None:
    assert ctx.check is not None
    expected = (
        f"sensu_event,check={ctx.check['name']},entity={ctx.entity_name} "
        f'description="\\"ALERT - {alert}\\"",'
        f"occurrences={ctx.check['occurrences']}i,status={ctx.check['status']}i,"
        f'title="\\"Sensu Event\\""'
    )
    assert expected in ctx.payload


@then(
    parsers.re(r"(?P<count>\d+) records? (?:is|are) sent"),
    converters={"count": int},
)
def step_record_count(ctx: TranslationScenarioContext, count: int) -> None:
    assert ctx.sent == count
    assert len(ctx.writer.lines()) == count
