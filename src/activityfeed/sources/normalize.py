"""Normalization — map raw post, profile and product items to ActivityItems."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TypeVar

from activityfeed.models import ActivityItem
from activityfeed.sources.items import Author, BlogPostItem, ProductItem, ProfileItem

T = TypeVar("T")

UNKNOWN_AUTHOR = "Unknown"
ANONYMOUS_PROFILE_NAME = "Community Member"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _first(*values: str | None) -> str | None:
    """Return the first non-empty string, or None."""
    for value in values:
        if value:
            return value
    return None


def _first_list(*values: list[T] | None) -> tuple[T, ...]:
    """Return the first list that is set (even if empty) as a tuple."""
    for value in values:
        if value is not None:
            return tuple(value)
    return ()


def _post_author(author: str | Author | None) -> str | None:
    if isinstance(author, Author):
        return author.name
    return author or UNKNOWN_AUTHOR


def is_hidden(post: BlogPostItem) -> bool:
    """True when a post is explicitly unpublished or marked as a draft."""
    return post.published is False or post.draft is True


def normalize_post(post: BlogPostItem) -> ActivityItem | None:
    """Transform a BlogPostItem into an ActivityItem.

    Returns None for hidden posts (``published`` False or ``draft`` True).
    Falls back to the current time when the post carries no date at all.
    """
    if is_hidden(post):
        return None

    return ActivityItem(
        type="post",
        title=_first(post.title, post.slug) or "",
        slug=post.slug,
        excerpt=_first(post.excerpt, post.description) or "",
        date=_first(post.date, post.published_at) or _now_iso(),
        image=_first(post.featured_image, post.cover_image, post.hero_image),
        author=_post_author(post.author),
        category=_first(post.categories[0] if post.categories else None, post.category),
        tags=_first_list(post.tags),
    )


def normalize_profile(profile: ProfileItem) -> ActivityItem:
    """Transform a ProfileItem into an ActivityItem.

    The display name doubles as title and author.
    """
    name = _first(profile.name, profile.display_name) or ANONYMOUS_PROFILE_NAME

    return ActivityItem(
        type="profile",
        title=name,
        slug=profile.slug,
        excerpt=profile.bio or "",
        date=_first(profile.published_at, profile.updated_at, profile.joined_date)
        or _now_iso(),
        image=_first(profile.avatar, profile.image_url),
        author=name,
        category="profile",
        tags=_first_list(profile.tags, profile.interests),
        profile_role=profile.role,
    )


def normalize_product(product: ProductItem) -> ActivityItem:
    """Transform a ProductItem into an ActivityItem.

    The product's own category is kept in ``product_category``; ``category``
    is always the literal "product".
    """
    return ActivityItem(
        type="product",
        title=product.name,
        slug=product.slug,
        excerpt=_first(product.excerpt, product.description) or "",
        date=_first(product.published_at, product.updated_at) or _now_iso(),
        image=product.image,
        category="product",
        tags=_first_list(product.tags),
        product_category=product.category,
        license=product.license,
    )
