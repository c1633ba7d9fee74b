"""Rich-backed logging for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT = "create_expo_module"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(debug: bool = False) -> None:
    """Route the package's log records to stderr through Rich.

    Only debug tracing and warnings are logged; user-facing progress goes
    through the console directly.
    """
    root = logging.getLogger(_ROOT)
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=debug,
        markup=False,
        rich_tracebacks=debug,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    root.propagate = False
