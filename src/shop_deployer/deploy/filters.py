"""File categories and the combined exclusion list of the bulk copy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from shop_deployer.core.constants import DeployLayout


class CopyPolicy(Enum):
    """How files of a category reach the installation."""

    OVERWRITE = "overwrite"  # Always replaced with the package version
    COPY_IF_MISSING = "copy_if_missing"  # Written only when absent


@dataclass(frozen=True, slots=True)
class FileCategory:
    """A group of package files sharing one filter pattern and copy policy."""

    name: str
    pattern: str
    policy: CopyPolicy


def combine_filters(groups: Iterable[Sequence[str] | None]) -> list[str]:
    """Flatten pattern groups into one list.

    Order is preserved and duplicates are kept. Empty or ``None`` groups
    contribute nothing.
    """
    combined: list[str] = []
    for group in groups:
        if group:
            combined.extend(group)
    return combined


def preserved_categories(layout: DeployLayout) -> list[FileCategory]:
    """Categories copied file by file after the bulk copy, in copy order.

    Operators customize these files, so they are never overwritten.
    """
    return [
        FileCategory("htaccess", layout.htaccess_filter, CopyPolicy.COPY_IF_MISSING),
        FileCategory("favicon", layout.favicon_file, CopyPolicy.COPY_IF_MISSING),
        FileCategory("offline", layout.offline_file, CopyPolicy.COPY_IF_MISSING),
        FileCategory("robots", layout.robots_filter, CopyPolicy.COPY_IF_MISSING),
    ]


def bulk_exclusion_filters(layout: DeployLayout, blacklist: Sequence[str] | None = None) -> list[str]:
    """Patterns the bulk copy must skip because a dedicated step owns them."""
    return combine_filters(
        [
            blacklist,
            [layout.htaccess_filter],
            [layout.robots_filter],
            [layout.setup_filter],
            [layout.favicon_file],
            [layout.offline_file],
            layout.vcs_filters,
        ]
    )


__all__ = [
    "CopyPolicy",
    "FileCategory",
    "bulk_exclusion_filters",
    "combine_filters",
    "preserved_categories",
]
