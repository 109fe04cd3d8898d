"""Aggregation — invoke configured loaders, normalize, merge and sort by date."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

import activityfeed.sources  # noqa: F401  (registers the source kinds)
from activityfeed.models import ActivityItem
from activityfeed.sources.items import coerce_items
from activityfeed.sources.registry import (
    ActivityFeedConfig,
    Loader,
    get_config,
    get_source,
    iter_sources,
    registered_kinds,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadOutcome:
    """Result of invoking one source loader."""

    kind: str
    items: list[ActivityItem] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def invoke_source(kind: str, loader: Loader) -> LoadOutcome:
    """Call a loader once and normalize what it returns.

    Any exception raised while loading, coercing or normalizing is turned
    into a failed outcome with no items. Hidden posts are dropped.
    """
    spec = get_source(kind)
    if spec is None:
        raise ValueError(
            f"Unknown source kind '{kind}'; "
            f"must be one of: {', '.join(registered_kinds())}"
        )

    try:
        rows = coerce_items(spec.model, loader())
        items = [item for item in map(spec.normalizer, rows) if item is not None]
    except Exception as exc:
        logger.warning("Loader for %s failed; skipping source", kind, exc_info=True)
        return LoadOutcome(kind=kind, error=f"{type(exc).__name__}: {exc}")

    logger.debug("Loaded %d %s item(s)", len(items), kind)
    return LoadOutcome(kind=kind, items=items)


def collect_outcomes(config: ActivityFeedConfig | None = None) -> list[LoadOutcome]:
    """Invoke every configured loader and return one outcome per source."""
    if config is None:
        config = get_config()

    outcomes: list[LoadOutcome] = []
    for spec in iter_sources():
        loader = spec.loader(config)
        if loader is None:
            continue
        outcomes.append(invoke_source(spec.kind, loader))
    return outcomes


def date_sort_key(value: str) -> float:
    """Return a POSIX timestamp for an ISO-8601 string.

    Naive values are read as UTC. Unparseable values sort as the oldest
    possible date.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return float("-inf")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def load_all_activity(config: ActivityFeedConfig | None = None) -> list[ActivityItem]:
    """Return every normalized item from all configured sources, newest first.

    Failed sources contribute nothing. Recomputed on every call.
    """
    activities: list[ActivityItem] = []
    for outcome in collect_outcomes(config):
        if outcome.ok:
            activities.extend(outcome.items)

    activities.sort(key=lambda item: date_sort_key(item.date), reverse=True)
    logger.debug("Aggregated %d activity item(s)", len(activities))
    return activities
