"""Raw item shapes accepted from source loaders.

Source systems disagree on field names, so each shape carries every alternate
name it may arrive under. Fields are snake_case in Python and accept their
camelCase spelling on input (``featuredImage``, ``publishedAt``, ...).
Unknown keys are ignored.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_SOURCE_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class Author(BaseModel):
    model_config = _SOURCE_MODEL_CONFIG

    name: str | None = None


class BlogPostItem(BaseModel):
    """Blog post as returned by a posts loader."""

    model_config = _SOURCE_MODEL_CONFIG

    title: str | None = None
    slug: str
    excerpt: str | None = None
    description: str | None = None
    date: str | None = None
    published_at: str | None = None
    featured_image: str | None = None
    cover_image: str | None = None
    hero_image: str | None = None
    author: str | Author | None = None
    category: str | None = None
    categories: list[str] | None = None
    tags: list[str] | None = None
    # Left untyped: only an explicit False / True hides a post.
    published: Any = None
    draft: Any = None


class ProfileItem(BaseModel):
    """Community profile as returned by a profiles loader."""

    model_config = _SOURCE_MODEL_CONFIG

    name: str | None = None
    display_name: str | None = None
    slug: str
    bio: str | None = None
    published_at: str | None = None
    updated_at: str | None = None
    joined_date: str | None = None
    avatar: str | None = None
    image_url: str | None = None
    role: str | None = None
    tags: list[str] | None = None
    interests: list[str] | None = None


class ProductItem(BaseModel):
    """Product as returned by a products loader."""

    model_config = _SOURCE_MODEL_CONFIG

    name: str
    slug: str
    excerpt: str | None = None
    description: str | None = None
    published_at: str | None = None
    updated_at: str | None = None
    image: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    license: str | None = None


SourceItem = TypeVar("SourceItem", bound=BaseModel)


def coerce_items(
    model: type[SourceItem], rows: Iterable[Mapping[str, Any] | BaseModel]
) -> list[SourceItem]:
    """Turn a loader's return value into model instances.

    Rows may be mappings or instances of ``model``. Raises
    pydantic.ValidationError when a row is missing a required field, and
    TypeError when ``rows`` is not iterable.
    """
    items: list[SourceItem] = []
    for row in rows:
        if isinstance(row, model):
            items.append(row)
        else:
            items.append(model.model_validate(row))
    return items
