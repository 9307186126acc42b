"""Console rendering of deployment progress."""

from __future__ import annotations

from rich.console import Console
from rich.tree import Tree

from shop_deployer.deploy.events import DeploymentEvents, StepResult

STEP_LABELS = {
    "source": "Shop source files",
    "setup": "Setup directory",
    "config": "config.inc.php",
    "htaccess": ".htaccess files",
    "favicon": "favicon.ico",
    "offline": "offline.html",
    "robots": "robots.txt files",
}


class StepTracker:
    """Track the copy sequence steps and render them as a Rich tree."""

    def __init__(self, title: str):
        self.title = title
        self.steps = []  # list of dicts: {key, label, status, detail}

    def add(self, key: str, label: str):
        if key not in [s["key"] for s in self.steps]:
            self.steps.append({"key": key, "label": label, "status": "pending", "detail": ""})

    def start(self, key: str, detail: str = ""):
        self._update(key, status="running", detail=detail)

    def complete(self, key: str, detail: str = ""):
        self._update(key, status="done", detail=detail)

    def error(self, key: str, detail: str = ""):
        self._update(key, status="error", detail=detail)

    def skip(self, key: str, detail: str = ""):
        self._update(key, status="skipped", detail=detail)

    def status_of(self, key: str) -> str | None:
        for s in self.steps:
            if s["key"] == key:
                return s["status"]
        return None

    def _update(self, key: str, status: str, detail: str):
        for s in self.steps:
            if s["key"] == key:
                s["status"] = status
                if detail:
                    s["detail"] = detail
                return
        self.steps.append({"key": key, "label": STEP_LABELS.get(key, key), "status": status, "detail": detail})

    def render(self) -> Tree:
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        symbols = {
            "done": "[green]●[/green]",
            "pending": "[green dim]○[/green dim]",
            "running": "[cyan]○[/cyan]",
            "error": "[red]●[/red]",
            "skipped": "[yellow]○[/yellow]",
        }
        for step in self.steps:
            symbol = symbols.get(step["status"], " ")
            detail_text = step["detail"].strip() if step["detail"] else ""
            if detail_text:
                line = f"{symbol} [white]{step['label']}[/white] [bright_black]({detail_text})[/bright_black]"
            else:
                line = f"{symbol} [white]{step['label']}[/white]"
            tree.add(line)
        return tree


class ConsoleDeploymentEvents(DeploymentEvents):
    """Prints phase messages and collects step outcomes in a StepTracker."""

    def __init__(self, console: Console, verbose: bool = False):
        self.console = console
        self.verbose = verbose
        self.tracker = StepTracker("Copy sequence")
        for key, label in STEP_LABELS.items():
            self.tracker.add(key, label)

    def installing(self, description: str) -> None:
        super().installing(description)
        self.console.print(f"  - Installing [bold]{description}[/bold].")

    def updating(self, description: str) -> None:
        super().updating(description)
        self.console.print(f"  - Updating [bold]{description}[/bold].")

    def copying(self) -> None:
        super().copying()
        self.console.print("  Copying files ...")

    def done(self) -> None:
        super().done()
        self.console.print(self.tracker.render())
        self.console.print("  [green]Done.[/green]")

    def skipped(self) -> None:
        super().skipped()
        self.console.print("  [yellow]Skipped.[/yellow]")

    def step_started(self, step: str) -> None:
        super().step_started(step)
        self.tracker.start(step)

    def step_finished(self, step: str, result: StepResult) -> None:
        super().step_finished(step, result)
        detail = f"{len(result.copied)} copied"
        if result.preserved:
            detail += f", {len(result.preserved)} kept"
        self.tracker.complete(step, detail)
        if self.verbose:
            for path in result.copied:
                self.console.print(f"    [dim]copied: {path}[/dim]")
            for path in result.preserved:
                self.console.print(f"    [green]kept: {path}[/green]")

    def step_skipped(self, step: str, reason: str) -> None:
        super().step_skipped(step, reason)
        self.tracker.skip(step, reason)

    def step_failed(self, step: str) -> None:
        self.tracker.error(step)
        self.console.print(self.tracker.render())


__all__ = ["ConsoleDeploymentEvents", "STEP_LABELS", "StepTracker"]
