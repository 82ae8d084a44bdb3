"""Measurement name, field key and tag set resolution for metric points."""

from collections.abc import Iterable
from dataclasses import dataclass

from sensu_influxdb_handler.core.models import HandlerConfig, Point, Tag

ENTITY_TAG = "sensu_entity_name"
LEGACY_ENTITY_TAG = "host"
DEFAULT_FIELD_KEY = "value"


@dataclass(frozen=True)
class MetricIdentity:
    """Resolved measurement name, field key and tags of a point."""

    name: str
    field_key: str
    tags: dict[str, str]


def entity_tag_key(config: HandlerConfig) -> str:
    """Return the reserved tag key carrying the entity name."""
    return LEGACY_ENTITY_TAG if config.legacy else ENTITY_TAG


def set_tags(
    entity_name: str, tags: Iterable[Tag], config: HandlerConfig
) -> dict[str, str]:
    """Build the tag set of a record.

    Point tags keep their order. The entity tag is added last and
    overwrites a point tag with the same key. An empty entity name
    adds no entity tag.
    """
    result = {tag.name: tag.value for tag in tags}
    if entity_name:
        result[entity_tag_key(config)] = entity_name
    return result


def strip_host(point_name: str, entity_name: str) -> str:
    """Remove a leading ``<entity_name>.`` from a point name, if present."""
    prefix = f"{entity_name}."
    if point_name.startswith(prefix):
        return point_name[len(prefix) :]
    return point_name


def split_point_name(point_name: str, config: HandlerConfig) -> tuple[str, str]:
    """Split a point name into measurement name and field key.

    The measurement is everything before the first dot and the field key
    everything after it. Names without a dot, and every name in legacy
    mode, keep the whole name as measurement with a ``value`` field.
    A trailing dot leaves no field key, so ``value`` is used as well.
    """
    if config.legacy:
        return point_name, DEFAULT_FIELD_KEY
    index = point_name.find(".")
    if index == -1:
        return point_name, DEFAULT_FIELD_KEY
    return point_name[:index], point_name[index + 1 :] or DEFAULT_FIELD_KEY


def set_name(point_name: str, config: HandlerConfig) -> str:
    """Return the measurement name emitted for a point name."""
    name, _ = split_point_name(point_name, config)
    return name


def resolve_metric_identity(
    entity_name: str, point: Point, config: HandlerConfig
) -> MetricIdentity:
    """Resolve the name, field key and tags of a metric point.

    Host stripping runs before the name is split, so the measurement
    comes from what follows the entity prefix.
    """
    point_name = point.name
    if config.strip_host:
        point_name = strip_host(point_name, entity_name)
    name, field_key = split_point_name(point_name, config)
    return MetricIdentity(
        name=name,
        field_key=field_key,
        tags=set_tags(entity_name, point.tags, config),
    )
