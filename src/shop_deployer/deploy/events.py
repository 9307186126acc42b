"""Progress notifications emitted while a package is deployed.

Listeners only observe; nothing they do changes the copy sequence.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Files written and files kept by one step of the copy sequence."""

    step: str
    copied: list[Path] = field(default_factory=list)
    preserved: list[Path] = field(default_factory=list)
    skipped: bool = False
    reason: str = ""


class DeploymentEvents:
    """Default listener: writes every notification to the module logger."""

    def installing(self, description: str) -> None:
        logger.info("Installing %s.", description)

    def updating(self, description: str) -> None:
        logger.info("Updating %s.", description)

    def copying(self) -> None:
        logger.info("Copying files ...")

    def done(self) -> None:
        logger.info("Done.")

    def skipped(self) -> None:
        logger.info("Skipped.")

    def step_started(self, step: str) -> None:
        logger.debug("Step %s started", step)

    def step_finished(self, step: str, result: StepResult) -> None:
        logger.debug(
            "Step %s finished: %d copied, %d preserved",
            step,
            len(result.copied),
            len(result.preserved),
        )

    def step_skipped(self, step: str, reason: str) -> None:
        logger.info("Step %s skipped: %s", step, reason)


__all__ = ["DeploymentEvents", "StepResult"]
