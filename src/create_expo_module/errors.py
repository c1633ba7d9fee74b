"""Exceptions raised while scaffolding a module."""

from __future__ import annotations

from collections.abc import Sequence


class CreateModuleError(RuntimeError):
    """Base class for failures that abort the whole run."""


class ConfigError(CreateModuleError):
    pass


class DownloadError(CreateModuleError):
    pass


class RenderError(CreateModuleError):
    pass


class SubprocessError(CreateModuleError):
    """An external command exited with a non-zero status."""

    def __init__(self, cmd: Sequence[str], returncode: int, output: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.output = output
        message = f"Command failed with exit code {returncode}: {' '.join(self.cmd)}"
        if output:
            message = f"{message}\n\n{output}"
        super().__init__(message)


class PromptCancelled(Exception):
    """The user cancelled an interactive prompt or declined to continue.

    Not a failure: the command exits with status 0 when it sees this.
    """
