"""Tests for activityfeed.queries — recent, type, category, tag and search queries."""

from __future__ import annotations

import pytest

from activityfeed import (
    ActivityFeedConfig,
    configure,
    get_activity_by_category,
    get_activity_by_tag,
    get_activity_by_type,
    get_recent_activity,
    reset_config,
    search_activity,
)


def _make_post(**overrides) -> dict:
    defaults = {
        "title": "Test Blog Post",
        "slug": "test-blog-post",
        "excerpt": "A test blog post excerpt",
        "date": "2025-06-15T00:00:00Z",
        "author": "Alice",
        "category": "tech",
        "tags": ["svelte", "typescript"],
    }
    defaults.update(overrides)
    return defaults


def _make_profile(**overrides) -> dict:
    defaults = {
        "name": "Bob Smith",
        "slug": "bob-smith",
        "bio": "A community member bio",
        "publishedAt": "2025-06-10T00:00:00Z",
        "role": "moderator",
        "tags": ["community", "events"],
    }
    defaults.update(overrides)
    return defaults


def _make_product(**overrides) -> dict:
    defaults = {
        "name": "Cool Widget",
        "slug": "cool-widget",
        "description": "A useful widget",
        "publishedAt": "2025-06-12T00:00:00Z",
        "category": "tools",
        "tags": ["utility", "widget"],
        "license": "MIT",
    }
    defaults.update(overrides)
    return defaults


def _configure_all() -> None:
    configure(
        load_blog_posts=lambda: [_make_post()],
        load_profiles=lambda: [_make_profile()],
        load_products=lambda: [_make_product()],
    )


def _slugs(items) -> list[str]:
    return [item.slug for item in items]


@pytest.fixture(autouse=True)
def _reset():
    reset_config()
    yield
    reset_config()


# --- get_recent_activity ---


class TestRecentActivity:
    def test_empty_without_loaders(self):
        assert get_recent_activity() == []

    def test_combines_all_sources(self):
        _configure_all()
        result = get_recent_activity(100)
        assert {item.type for item in result} == {"post", "profile", "product"}

    def test_mixed_types_newest_first(self):
        configure(
            load_blog_posts=lambda: [_make_post(slug="post-1", date="2025-01-01T00:00:00Z")],
            load_profiles=lambda: [_make_profile(slug="profile-1", publishedAt="2025-04-01T00:00:00Z")],
            load_products=lambda: [_make_product(slug="product-1", publishedAt="2025-03-01T00:00:00Z")],
        )
        assert _slugs(get_recent_activity(100)) == ["profile-1", "product-1", "post-1"]

    def test_respects_limit(self):
        configure(load_blog_posts=lambda: [
            _make_post(slug=s, date=f"2025-0{i + 1}-01T00:00:00Z") for i, s in enumerate("abcde")
        ])
        assert _slugs(get_recent_activity(3)) == ["e", "d", "c"]

    def test_default_limit_is_ten(self):
        posts = [
            _make_post(slug=f"post-{i}", date=f"2025-{i + 1:02d}-01T00:00:00Z") for i in range(12)
        ] + [_make_post(slug=f"old-{i}", date="2020-01-01T00:00:00Z") for i in range(3)]
        configure(load_blog_posts=lambda: posts)
        assert len(get_recent_activity()) == 10

    def test_limit_zero_is_empty(self):
        _configure_all()
        assert get_recent_activity(0) == []

    def test_fewer_items_than_limit(self):
        configure(load_blog_posts=lambda: [_make_post()])
        assert len(get_recent_activity(100)) == 1

    def test_excludes_hidden_posts(self):
        configure(load_blog_posts=lambda: [
            _make_post(slug="published", draft=False),
            _make_post(slug="draft", draft=True),
            _make_post(slug="unpublished", published=False),
        ])
        assert _slugs(get_recent_activity(100)) == ["published"]

    def test_failing_loader_yields_other_sources(self):
        def broken():
            raise ConnectionError("down")

        configure(load_blog_posts=broken, load_profiles=lambda: [_make_profile()])
        result = get_recent_activity(100)
        assert [item.type for item in result] == ["profile"]

    def test_idempotent(self):
        _configure_all()
        assert get_recent_activity(100) == get_recent_activity(100)

    def test_explicit_config(self):
        config = ActivityFeedConfig(load_products=lambda: [_make_product()])
        _configure_all()
        assert [item.type for item in get_recent_activity(config=config)] == ["product"]


# --- get_activity_by_type ---


class TestActivityByType:
    def test_filters_by_type(self):
        _configure_all()
        for kind in ("post", "profile", "product"):
            result = get_activity_by_type(kind)
            assert [item.type for item in result] == [kind]

    def test_preserves_order(self):
        configure(
            load_blog_posts=lambda: [
                _make_post(slug="old", date="2025-01-01T00:00:00Z"),
                _make_post(slug="new", date="2025-12-01T00:00:00Z"),
            ],
            load_profiles=lambda: [_make_profile(publishedAt="2025-06-01T00:00:00Z")],
        )
        assert _slugs(get_activity_by_type("post")) == ["new", "old"]

    def test_subset_of_recent(self):
        _configure_all()
        everything = get_recent_activity(1000)
        assert get_activity_by_type("product") == [i for i in everything if i.type == "product"]

    def test_limit(self):
        configure(load_blog_posts=lambda: [_make_post(slug=f"p{i}") for i in range(5)])
        assert len(get_activity_by_type("post", 2)) == 2
        assert get_activity_by_type("post", 0) == []
        assert len(get_activity_by_type("post")) == 5

    def test_no_matches(self):
        configure(load_blog_posts=lambda: [_make_post()])
        assert get_activity_by_type("product") == []

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match="Unknown activity type"):
            get_activity_by_type("event")


# --- get_activity_by_category ---


class TestActivityByCategory:
    def test_post_category(self):
        _configure_all()
        assert _slugs(get_activity_by_category("tech")) == ["test-blog-post"]

    def test_general_category_literals(self):
        _configure_all()
        assert [i.type for i in get_activity_by_category("profile")] == ["profile"]
        assert [i.type for i in get_activity_by_category("product")] == ["product"]

    def test_matches_product_category(self):
        _configure_all()
        assert _slugs(get_activity_by_category("tools")) == ["cool-widget"]

    def test_case_sensitive(self):
        configure(load_blog_posts=lambda: [_make_post(category="Tech")])
        assert get_activity_by_category("tech") == []
        assert len(get_activity_by_category("Tech")) == 1

    def test_limit(self):
        configure(load_blog_posts=lambda: [_make_post(slug=f"p{i}") for i in range(4)])
        assert len(get_activity_by_category("tech", 3)) == 3
        assert get_activity_by_category("tech", 0) == []


# --- get_activity_by_tag ---


class TestActivityByTag:
    def test_matches_across_sources(self):
        configure(
            load_blog_posts=lambda: [_make_post(tags=["shared"])],
            load_profiles=lambda: [_make_profile(tags=["shared", "x"])],
            load_products=lambda: [_make_product(tags=["other"])],
        )
        assert {i.type for i in get_activity_by_tag("shared")} == {"post", "profile"}

    def test_exact_match_only(self):
        configure(load_blog_posts=lambda: [_make_post(tags=["typescript"])])
        assert get_activity_by_tag("type") == []
        assert get_activity_by_tag("TypeScript") == []

    def test_profile_interests_count_as_tags(self):
        configure(load_profiles=lambda: [_make_profile(tags=None, interests=["hiking"])])
        assert len(get_activity_by_tag("hiking")) == 1

    def test_untagged_items_never_match(self):
        configure(load_blog_posts=lambda: [_make_post(tags=None)])
        assert get_activity_by_tag("svelte") == []

    def test_limit(self):
        configure(load_blog_posts=lambda: [_make_post(slug=f"p{i}") for i in range(3)])
        assert len(get_activity_by_tag("svelte", 1)) == 1
        assert len(get_activity_by_tag("svelte")) == 3


# --- search_activity ---


class TestSearchActivity:
    def test_blank_query_returns_empty(self):
        _configure_all()
        assert search_activity("") == []
        assert search_activity("   ") == []

    def test_blank_query_does_not_load(self):
        calls = []

        def loader():
            calls.append(1)
            return [_make_post()]

        configure(load_blog_posts=loader)
        search_activity("  ")
        assert calls == []

    def test_matches_title_case_insensitively(self):
        _configure_all()
        assert _slugs(search_activity("cool WIDGET")) == ["cool-widget"]

    def test_matches_excerpt(self):
        _configure_all()
        assert _slugs(search_activity("useful")) == ["cool-widget"]

    def test_matches_author(self):
        configure(load_blog_posts=lambda: [_make_post(author={"name": "Jane Doe"})])
        assert len(search_activity("jane")) == 1

    def test_matches_tag_substring(self):
        _configure_all()
        assert _slugs(search_activity("script")) == ["test-blog-post"]

    def test_multi_field_match_appears_once(self):
        configure(load_blog_posts=lambda: [
            _make_post(title="Svelte tips", excerpt="All about svelte", tags=["svelte"])
        ])
        assert len(search_activity("svelte")) == 1

    def test_no_match(self):
        _configure_all()
        assert search_activity("nonexistent-term") == []

    def test_limit(self):
        configure(load_blog_posts=lambda: [_make_post(slug=f"p{i}") for i in range(5)])
        assert len(search_activity("test", 2)) == 2
        assert search_activity("test", 0) == []
        assert len(search_activity("test")) == 5

    def test_results_newest_first(self):
        configure(load_blog_posts=lambda: [
            _make_post(slug="older", date="2025-01-01T00:00:00Z"),
            _make_post(slug="newer", date="2025-05-01T00:00:00Z"),
        ])
        assert _slugs(search_activity("blog")) == ["newer", "older"]
