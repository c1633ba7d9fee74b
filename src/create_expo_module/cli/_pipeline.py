"""Sequences the steps that turn a template into a new module."""

from __future__ import annotations

import shutil
from pathlib import Path

from rich.console import Console

from create_expo_module.cli._defaults import initial_slug
from create_expo_module.cli._download import download_package
from create_expo_module.cli._example import create_example_app
from create_expo_module.cli._logging import get_logger
from create_expo_module.cli._package_manager import (
    install_dependencies,
    resolve_package_manager,
    run_build,
)
from create_expo_module.cli._prompts import (
    confirm_target_dir,
    prompt_package_manager,
    prompt_slug,
    prompt_substitution_data,
)
from create_expo_module.cli._renderer import create_module_from_template
from create_expo_module.cli._steps import run_step
from create_expo_module.cli._types import CommandOptions
from create_expo_module.config import Settings
from create_expo_module.errors import PromptCancelled

logger = get_logger(__name__)

OPTIONAL_FILES = ("README.md", "CHANGELOG.md")


def collect_slug(target: str | None) -> str:
    """Take the slug from the target's directory name, prompting when it is not usable."""
    initial = initial_slug(target)
    if target and initial == Path(target).name:
        return initial
    return prompt_slug(initial)


def prepare_target_dir(target_dir: Path) -> None:
    """Create the target directory; a non-empty one needs confirmation."""
    target_dir.mkdir(parents=True, exist_ok=True)
    if not any(target_dir.iterdir()):
        return
    if not confirm_target_dir(target_dir):
        raise PromptCancelled


def _remove_optional_files(target_dir: Path, options: CommandOptions) -> None:
    keep = {"README.md": options.with_readme, "CHANGELOG.md": options.with_changelog}
    for name in OPTIONAL_FILES:
        if not keep[name]:
            (target_dir / name).unlink(missing_ok=True)


def create_module(
    target: str | None, options: CommandOptions, settings: Settings, console: Console
) -> Path:
    """
    Create a module in `settings.cwd / (target or slug)` and return its path.

    Steps run in order and the first failure aborts the run. Nothing is rolled
    back: files written before the failure stay in place.
    """
    slug = collect_slug(target)
    target_dir = (settings.cwd / (target or slug)).resolve()

    prepare_target_dir(target_dir)
    options.target = target_dir

    data = prompt_substitution_data(slug, options)

    # One line break between the prompts and the progress output
    console.print()

    package_manager = resolve_package_manager(
        settings.user_agent, prompt_package_manager, options.package_manager
    )
    logger.debug("Using %s", package_manager.value)

    if options.source:
        package_path = settings.cwd / options.source
    else:
        package_path = run_step(
            console,
            "Downloading module template from npm",
            "Downloaded module template from npm",
            lambda: download_package(settings, target_dir),
        )

    run_step(
        console,
        "Creating the module from template files",
        "Created the module from template files",
        lambda: create_module_from_template(
            package_path, target_dir, data, settings.ignored_paths
        ),
    )
    run_step(
        console,
        "Installing module dependencies",
        "Installed module dependencies",
        lambda: install_dependencies(package_manager, target_dir),
    )
    run_step(
        console,
        "Compiling TypeScript files",
        "Compiled TypeScript files",
        lambda: run_build(package_manager, target_dir),
    )

    if not options.source and package_path.exists():
        shutil.rmtree(package_path)
    _remove_optional_files(target_dir, options)

    if options.example:
        run_step(
            console,
            "Creating an example app",
            "Created an example app",
            lambda: create_example_app(data, target_dir, package_manager),
        )

    return target_dir
