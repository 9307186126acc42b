"""Detect whether a shop configuration file is still an untouched template."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from shop_deployer.core.constants import PLACEHOLDER_TOKENS


def is_unconfigured_or_missing(path: Path, tokens: Iterable[str] = PLACEHOLDER_TOKENS) -> bool:
    """Return True if the config file is missing or still holds a placeholder.

    The content is scanned as raw bytes for each token; the file format is
    never parsed, so any encoding that keeps ASCII intact works.
    """
    path = Path(path)
    if not path.exists():
        return True

    content = path.read_bytes()
    return any(token.encode("ascii") in content for token in tokens)


__all__ = ["is_unconfigured_or_missing"]
