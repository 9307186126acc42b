"""Exception hierarchy for package deployment."""

from __future__ import annotations

from pathlib import Path


class DeployError(Exception):
    """Base exception for deployment errors."""
    pass


class SourceMissingError(DeployError):
    """A file expected under the package does not exist.

    Raised when a path that was matched by a glob, or named explicitly,
    has disappeared before it could be copied.
    """

    def __init__(self, source: Path, destination: Path | None = None):
        self.source = Path(source)
        self.destination = Path(destination) if destination is not None else None
        if destination is not None:
            message = f"Cannot copy {self.source} to {self.destination}: source does not exist"
        else:
            message = f"Source does not exist: {self.source}"
        super().__init__(message)


# Name used by the single-file copier.
CopySourceMissingError = SourceMissingError


class InvalidPathError(DeployError):
    """A matched path is not located under the directory it was matched in."""

    def __init__(self, path: Path, base: Path):
        self.path = Path(path)
        self.base = Path(base)
        super().__init__(f"Path {self.path} is not inside {self.base}")


class InvalidPatternError(DeployError, ValueError):
    """A glob pattern cannot be compiled."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"{reason} in glob pattern: {pattern!r}")


class DeployConfigError(DeployError):
    """Raised when the project config or package manifest is invalid."""


class DeploymentStepError(DeployError):
    """A step of the copy sequence failed; the remaining steps were not run.

    The underlying exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        step: str,
        cause: BaseException,
        source: Path | None = None,
        destination: Path | None = None,
    ):
        self.step = step
        self.cause = cause
        self.source = source
        self.destination = destination

        details = []
        if source is not None:
            details.append(f"source: {source}")
        if destination is not None:
            details.append(f"destination: {destination}")
        suffix = f" ({', '.join(details)})" if details else ""
        super().__init__(f"Step '{step}' failed: {cause}{suffix}")


__all__ = [
    "CopySourceMissingError",
    "DeployConfigError",
    "DeployError",
    "DeploymentStepError",
    "InvalidPathError",
    "InvalidPatternError",
    "SourceMissingError",
]
