"""CLI helpers exposed for other modules."""

from .ui import ConsoleDeploymentEvents, StepTracker

__all__ = ["ConsoleDeploymentEvents", "StepTracker"]
