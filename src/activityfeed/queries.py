"""Read-only query functions over the aggregated activity feed.

Every query re-aggregates from the configured loaders. ``limit=None`` means
unbounded; ``limit=0`` returns an empty list.
"""

from __future__ import annotations

from collections.abc import Callable

from activityfeed.aggregate import load_all_activity
from activityfeed.models import ITEM_TYPES, ActivityItem
from activityfeed.sources.registry import ActivityFeedConfig

DEFAULT_RECENT_LIMIT = 10


def _select(
    predicate: Callable[[ActivityItem], bool],
    limit: int | None,
    config: ActivityFeedConfig | None,
) -> list[ActivityItem]:
    filtered = [item for item in load_all_activity(config) if predicate(item)]
    return filtered[:limit] if limit is not None else filtered


# ---------------------------------------------------------------------------
# get_recent_activity
# ---------------------------------------------------------------------------
def get_recent_activity(
    limit: int = DEFAULT_RECENT_LIMIT, *, config: ActivityFeedConfig | None = None
) -> list[ActivityItem]:
    """Return the most recent items across all sources."""
    return load_all_activity(config)[:limit]


# ---------------------------------------------------------------------------
# get_activity_by_type
# ---------------------------------------------------------------------------
def get_activity_by_type(
    type: str, limit: int | None = None, *, config: ActivityFeedConfig | None = None
) -> list[ActivityItem]:
    """Return items of one type ("post", "profile" or "product")."""
    if type not in ITEM_TYPES:
        raise ValueError(
            f"Unknown activity type '{type}'; "
            f"must be one of: {', '.join(sorted(ITEM_TYPES))}"
        )
    return _select(lambda item: item.type == type, limit, config)


# ---------------------------------------------------------------------------
# get_activity_by_category
# ---------------------------------------------------------------------------
def get_activity_by_category(
    category: str, limit: int | None = None, *, config: ActivityFeedConfig | None = None
) -> list[ActivityItem]:
    """Return items whose category or product category equals ``category``."""
    return _select(
        lambda item: item.category == category or item.product_category == category,
        limit,
        config,
    )


# ---------------------------------------------------------------------------
# get_activity_by_tag
# ---------------------------------------------------------------------------
def get_activity_by_tag(
    tag: str, limit: int | None = None, *, config: ActivityFeedConfig | None = None
) -> list[ActivityItem]:
    """Return items tagged with exactly ``tag`` (case-sensitive)."""
    return _select(lambda item: tag in item.tags, limit, config)


# ---------------------------------------------------------------------------
# search_activity
# ---------------------------------------------------------------------------
def _matches(item: ActivityItem, term: str) -> bool:
    if term in item.title.lower():
        return True
    if term in item.excerpt.lower():
        return True
    if item.author and term in item.author.lower():
        return True
    return any(term in tag.lower() for tag in item.tags)


def search_activity(
    query: str, limit: int | None = None, *, config: ActivityFeedConfig | None = None
) -> list[ActivityItem]:
    """Case-insensitive substring search over title, excerpt, author and tags.

    A blank query returns an empty list without loading anything.
    """
    if not query or not query.strip():
        return []

    term = query.lower()
    return _select(lambda item: _matches(item, term), limit, config)
