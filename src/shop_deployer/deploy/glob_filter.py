"""Glob matching of package files.

Patterns are case-sensitive and always use ``/`` as separator. They are
matched against paths relative to a base directory:

- ``**/`` matches zero or more whole directories, so ``**/.htaccess``
  matches ``.htaccess`` as well as ``out/pictures/.htaccess``
- ``**`` anywhere else matches any run of characters, separators included
- ``*`` matches within a single path segment (dot files included)
- ``?`` matches a single character of a segment
- ``[abc]`` / ``[!abc]`` match one character of a segment (``^`` is literal)
- ``{a,b}`` matches either alternative

Directories that cannot be scanned raise the underlying ``OSError``.
Symlinked files are treated as regular files. Symlinked directories are
never descended into.
"""

from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Sequence

from shop_deployer.deploy.exceptions import InvalidPatternError

_CLASS_SPECIALS = frozenset("\\^[&~|")


def _translate_class(body: str) -> str:
    # A class matches one character of a segment, never the separator.
    negate = body.startswith("!")
    if negate:
        body = body[1:]
    body = "".join("\\" + c if c in _CLASS_SPECIALS else c for c in body)
    if negate:
        return "[^" + body + "/]"
    return "(?!/)[" + body + "]"


def _raise_walk_error(error: OSError) -> None:
    raise error


def _translate(pattern: str) -> str:
    parts: list[str] = []
    i = 0
    n = len(pattern)
    in_braces = 0

    while i < n:
        char = pattern[i]

        if char == "\\" and i + 1 < n:
            parts.append(re.escape(pattern[i + 1]))
            i += 2
            continue

        if char == "*":
            if pattern.startswith("**", i):
                i += 2
                # "**/" spans whole directories, including none at all
                if i < n and pattern[i] == "/":
                    parts.append("(?:.*/)?")
                    i += 1
                else:
                    parts.append(".*")
            else:
                parts.append("[^/]*")
                i += 1
            continue

        if char == "?":
            parts.append("[^/]")
        elif char == "[":
            end = pattern.find("]", i + 2 if pattern.startswith("[!", i) else i + 1)
            body = pattern[i + 1:end] if end != -1 else ""
            if body.lstrip("!"):
                parts.append(_translate_class(body))
                i = end + 1
                continue
            parts.append(re.escape(char))
        elif char == "{":
            in_braces += 1
            parts.append("(?:")
        elif char == "}" and in_braces:
            in_braces -= 1
            parts.append(")")
        elif char == "," and in_braces:
            parts.append("|")
        else:
            parts.append(re.escape(char))
        i += 1

    if in_braces:
        raise InvalidPatternError(pattern, "Unbalanced '{'")

    return "".join(parts)


@lru_cache(maxsize=256)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a glob pattern into a regex matching whole relative paths."""
    return re.compile(r"\A" + _translate(pattern.lstrip("/")) + r"\Z", re.DOTALL)


def matches_any(relative_path: str, patterns: Iterable[str]) -> bool:
    """Return True if *relative_path* matches at least one of *patterns*."""
    return any(compile_glob(pattern).match(relative_path) for pattern in patterns)


def match_paths(pattern: str, relative_paths: Iterable[str]) -> list[str]:
    """Filter a listing of relative paths by a glob pattern, keeping order."""
    regex = compile_glob(pattern)
    return [path for path in relative_paths if regex.match(path)]


def list_files(base: Path) -> list[str]:
    """Return sorted relative POSIX paths of all files under *base*."""
    base = Path(base)
    if not base.is_dir():
        return []

    files: list[str] = []
    for dirpath, _dirnames, filenames in os.walk(base, onerror=_raise_walk_error, followlinks=False):
        for name in filenames:
            rel = Path(dirpath, name).relative_to(base)
            files.append(rel.as_posix())
    return sorted(files)


def glob_files(base: Path, pattern: str) -> list[Path]:
    """Return absolute paths of files under *base* matching *pattern*.

    A missing base directory yields an empty list.
    """
    base = Path(base).absolute()
    return [base / rel for rel in match_paths(pattern, list_files(base))]


def split_patterns(patterns: Sequence[str] | None) -> list[str]:
    """Normalize a user supplied pattern list (drops blanks and surrounding spaces)."""
    if not patterns:
        return []
    return [pattern.strip() for pattern in patterns if pattern and pattern.strip()]


__all__ = [
    "compile_glob",
    "glob_files",
    "list_files",
    "match_paths",
    "matches_any",
    "split_patterns",
]
