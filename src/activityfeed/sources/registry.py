"""Loader configuration store and source kind registry.

The process-wide ``ActivityFeedConfig`` holds up to three loader callables.
It is not safe for concurrent mutation: callers that share it across threads
must serialize ``configure``/``reset_config`` against queries themselves.
Callers who want isolation can build their own ``ActivityFeedConfig`` and
pass it to the aggregator and queries directly.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pydantic import BaseModel

    from activityfeed.models import ActivityItem

Loader = Callable[[], Iterable[Any]]


@dataclass
class ActivityFeedConfig:
    """Loader callables for each content source. Unset sources are skipped."""

    load_blog_posts: Loader | None = None
    load_profiles: Loader | None = None
    load_products: Loader | None = None


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Any = _Unset()

_config = ActivityFeedConfig()


def configure(
    *,
    load_blog_posts: Loader | None = _UNSET,
    load_profiles: Loader | None = _UNSET,
    load_products: Loader | None = _UNSET,
) -> None:
    """Merge loaders into the global config.

    Omitted keywords leave their slot untouched; passing None clears it.
    """
    updates = {
        "load_blog_posts": load_blog_posts,
        "load_profiles": load_profiles,
        "load_products": load_products,
    }
    for slot, loader in updates.items():
        if loader is not _UNSET:
            setattr(_config, slot, loader)


def get_config() -> ActivityFeedConfig:
    """Return a shallow copy of the global config."""
    return copy.copy(_config)


def reset_config() -> None:
    """Clear every loader slot."""
    global _config
    _config = ActivityFeedConfig()


# ---------------------------------------------------------------------------
# Source kinds
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SourceSpec:
    """How one content source is loaded and normalized."""

    kind: str
    slot: str
    model: type[BaseModel]
    normalizer: Callable[[Any], ActivityItem | None]

    def loader(self, config: ActivityFeedConfig) -> Loader | None:
        return getattr(config, self.slot)


_REGISTRY: dict[str, SourceSpec] = {}


def register_source(spec: SourceSpec) -> None:
    """Register a source spec under its item type."""
    _REGISTRY[spec.kind] = spec


def get_source(kind: str) -> SourceSpec | None:
    """Look up a source spec by item type. Returns None if not found."""
    return _REGISTRY.get(kind)


def registered_kinds() -> list[str]:
    """Return a sorted list of all registered item types."""
    return sorted(_REGISTRY)


def iter_sources() -> list[SourceSpec]:
    """Return registered source specs in registration order."""
    return list(_REGISTRY.values())
