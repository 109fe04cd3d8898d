"""Pydantic v2 model for the unified activity item."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ItemType = Literal["post", "profile", "product"]

ITEM_TYPES: frozenset[str] = frozenset({"post", "profile", "product"})


class ActivityItem(BaseModel):
    """Normalized item from any content source.

    Only the type-specific fields matching ``type`` are populated:
    ``profile_role`` for profiles, ``product_category`` and ``license``
    for products.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    type: ItemType
    title: str
    slug: str
    excerpt: str = ""
    date: str
    image: str | None = None
    author: str | None = None
    category: str | None = None
    tags: tuple[str, ...] = ()
    product_category: str | None = None
    profile_role: str | None = None
    license: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping, omitting unset optional fields."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        data["tags"] = list(self.tags)
        return data
