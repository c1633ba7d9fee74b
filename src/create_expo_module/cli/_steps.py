"""Named progress steps shown while the module is being created."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from rich.console import Console

from create_expo_module.cli._logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def run_step(console: Console, title: str, succeeded: str, action: Callable[[], T]) -> T:
    """
    Run *action* behind a spinner labelled *title*.

    Prints *succeeded* when it returns; on failure marks the step as failed and
    re-raises, so the first failing step aborts the run.
    """
    logger.debug("Step started: %s", title)
    try:
        with console.status(f"[bold]{title}[/]", spinner="dots"):
            result = action()
    except Exception:
        console.print(f"[bold red]■[/]  {title}")
        raise
    console.print(f"[bold green]◇[/]  {succeeded}")
    return result
