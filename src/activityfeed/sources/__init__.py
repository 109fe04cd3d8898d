"""Content sources — raw item shapes, normalization and loader configuration."""

from activityfeed.sources.items import BlogPostItem, ProductItem, ProfileItem
from activityfeed.sources.normalize import (
    normalize_post,
    normalize_product,
    normalize_profile,
)
from activityfeed.sources.registry import SourceSpec, register_source

register_source(SourceSpec("post", "load_blog_posts", BlogPostItem, normalize_post))
register_source(SourceSpec("profile", "load_profiles", ProfileItem, normalize_profile))
register_source(SourceSpec("product", "load_products", ProductItem, normalize_product))
