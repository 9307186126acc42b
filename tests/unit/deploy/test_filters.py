"""Tests for shop_deployer.deploy.filters - category table and exclusions."""

from __future__ import annotations

from shop_deployer.core.constants import DEFAULT_LAYOUT
from shop_deployer.deploy.filters import (
    CopyPolicy,
    bulk_exclusion_filters,
    combine_filters,
    preserved_categories,
)


class TestCombineFilters:
    def test_flattens_in_order(self) -> None:
        assert combine_filters([["a", "b"], ["c"]]) == ["a", "b", "c"]

    def test_empty_and_none_groups_contribute_nothing(self) -> None:
        assert combine_filters([[], ["a"], None, ()]) == ["a"]

    def test_duplicates_are_kept(self) -> None:
        assert combine_filters([["**/.htaccess"], ["**/.htaccess"]]) == ["**/.htaccess", "**/.htaccess"]

    def test_no_groups(self) -> None:
        assert combine_filters([]) == []


class TestBulkExclusionFilters:
    def test_default_exclusions(self) -> None:
        assert bulk_exclusion_filters(DEFAULT_LAYOUT) == [
            "**/.htaccess",
            "**/robots.txt",
            "Setup/**/*",
            "favicon.ico",
            "offline.html",
            ".git/**/*",
            ".gitignore",
        ]

    def test_blacklist_comes_first(self) -> None:
        result = bulk_exclusion_filters(DEFAULT_LAYOUT, ["**/*.md"])
        assert result[0] == "**/*.md"
        assert len(result) == 8

    def test_every_preserved_category_is_excluded(self) -> None:
        exclusions = bulk_exclusion_filters(DEFAULT_LAYOUT)
        for category in preserved_categories(DEFAULT_LAYOUT):
            assert category.pattern in exclusions


class TestPreservedCategories:
    def test_copy_order(self) -> None:
        names = [category.name for category in preserved_categories(DEFAULT_LAYOUT)]
        assert names == ["htaccess", "favicon", "offline", "robots"]

    def test_all_copy_if_missing(self) -> None:
        assert all(
            category.policy is CopyPolicy.COPY_IF_MISSING
            for category in preserved_categories(DEFAULT_LAYOUT)
        )
