"""Package manager detection and invocation."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from create_expo_module.cli._logging import get_logger
from create_expo_module.cli._types import PackageManager
from create_expo_module.errors import SubprocessError

logger = get_logger(__name__)

# Preference order when more than one manager is installed.
_CANDIDATES: tuple[PackageManager, ...] = (
    PackageManager.YARN,
    PackageManager.PNPM,
    PackageManager.BUN,
    PackageManager.NPM,
)


def from_user_agent(user_agent: str | None) -> PackageManager | None:
    """Detect the manager from `npm_config_user_agent`, e.g. ``yarn/1.22.19 npm/? node/v18``."""
    if not user_agent:
        return None
    name = user_agent.split("/", 1)[0].strip().lower()
    try:
        return PackageManager(name)
    except ValueError:
        return None


def installed_package_managers(which: Callable[[str], str | None] = shutil.which) -> list[PackageManager]:
    return [pm for pm in _CANDIDATES if which(pm.value)]


def resolve_package_manager(
    user_agent: str | None,
    choose: Callable[[list[PackageManager]], PackageManager],
    preferred: PackageManager | None = None,
    which: Callable[[str], str | None] = shutil.which,
) -> PackageManager:
    """
    Pick the package manager for the new module.

    Order: explicit choice, the manager running this command, the only
    installed manager, then *choose* among the installed ones. Falls back to
    npm when none is found on PATH.
    """
    if preferred is not None:
        return preferred

    detected = from_user_agent(user_agent)
    if detected is not None:
        logger.debug("Detected %s from user agent", detected.value)
        return detected

    available = installed_package_managers(which)
    if not available:
        logger.warning("No package manager found on PATH, assuming npm")
        return PackageManager.NPM
    if len(available) == 1:
        return available[0]
    return choose(available)


def run_command(cmd: Sequence[str], cwd: Path, *, discard_output: bool = False) -> None:
    """Run *cmd* in *cwd* and raise :class:`SubprocessError` on a non-zero exit."""
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    try:
        if discard_output:
            result = subprocess.run(
                list(cmd), cwd=str(cwd), stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
            )
            output = ""
        else:
            result = subprocess.run(
                list(cmd),
                cwd=str(cwd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
            output = (result.stdout or "").strip()
    except FileNotFoundError as e:
        raise SubprocessError(cmd, 127, str(e)) from e

    if result.returncode != 0:
        raise SubprocessError(cmd, result.returncode, output)


def install_dependencies(package_manager: PackageManager, cwd: Path) -> None:
    run_command([package_manager.value, "install"], cwd)


def run_build(package_manager: PackageManager, cwd: Path) -> None:
    run_command([package_manager.value, "run", "build"], cwd, discard_output=True)
