"""Unified activity feed over blog posts, profiles and products."""

from activityfeed.aggregate import LoadOutcome, load_all_activity
from activityfeed.config import Settings, load_settings
from activityfeed.logs import setup_logging, setup_logging_from_env
from activityfeed.models import ITEM_TYPES, ActivityItem, ItemType
from activityfeed.queries import (
    get_activity_by_category,
    get_activity_by_tag,
    get_activity_by_type,
    get_recent_activity,
    search_activity,
)
from activityfeed.sources.items import Author, BlogPostItem, ProductItem, ProfileItem
from activityfeed.sources.registry import (
    ActivityFeedConfig,
    configure,
    get_config,
    reset_config,
)

__all__ = [
    "ITEM_TYPES",
    "ActivityFeedConfig",
    "ActivityItem",
    "Author",
    "BlogPostItem",
    "ItemType",
    "LoadOutcome",
    "ProductItem",
    "ProfileItem",
    "Settings",
    "configure",
    "get_activity_by_category",
    "get_activity_by_tag",
    "get_activity_by_type",
    "get_config",
    "get_recent_activity",
    "load_all_activity",
    "load_settings",
    "reset_config",
    "search_activity",
    "setup_logging",
    "setup_logging_from_env",
]
