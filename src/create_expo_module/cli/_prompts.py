"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from rich.console import Console
from rich.markup import escape
from simple_term_menu import TerminalMenu

from create_expo_module.cli import _defaults
from create_expo_module.cli._types import (
    MODULE_LICENSE,
    MODULE_VERSION,
    CommandOptions,
    PackageManager,
    ProjectInfo,
    SubstitutionData,
    format_author,
)
from create_expo_module.errors import ConfigError, PromptCancelled

_console = Console()

T = TypeVar("T")

Validator = Callable[[str], str | None]


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _read(suffix: str) -> str:
    _console.print("[dim]│[/]  ", end="")
    try:
        return input(suffix).strip()
    except (KeyboardInterrupt, EOFError):
        raise PromptCancelled from None


def _print_answer(question: str, answer: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(answer)}")
    _print_bar()


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise PromptCancelled

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {lbl}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{lbl}[/]")
    _print_bar()

    return selected


def _confirm(question: str, default: bool = True) -> bool:
    """Display a clack-style yes/no prompt."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = " [Y/n] " if default else " [y/N] "
    answer = _read(suffix).lower()

    result = default if answer == "" else answer in ("y", "yes")

    # Overwrite the ◆ question + │ bar + │ [Y/n] input line
    _clear_lines(3)
    _print_answer(question, "Yes" if result else "No")

    return result


def _text(question: str, initial: str | None = None, validate: Validator | None = None) -> str:
    """Display a clack-style text prompt, re-asking until *validate* accepts the answer."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = f" ({initial}) " if initial else " "
    printed = 2
    while True:
        value = _read(suffix) or (initial or "")
        printed += 1
        error = validate(value) if validate else None
        if error is None:
            break
        _console.print(f"[dim]│[/]  [yellow]▲ {escape(error)}[/]")
        printed += 1

    _clear_lines(printed)
    _print_answer(question, value)

    return value


def _supplied(value: str | None, flag: str, validate: Validator) -> str | None:
    """Validate a value given on the command line, raising `ConfigError` when it is rejected."""
    if value is None:
        return None
    error = validate(value)
    if error is not None:
        raise ConfigError(f"Invalid value for {flag}: {error}")
    return value


def prompt_slug(initial: str) -> str:
    """Prompt for the npm package name of the module."""
    return _text("What is the name of the npm package?", initial, _defaults.validate_slug)


def confirm_target_dir(target_dir: Path) -> bool:
    """Ask whether to continue with a non-empty target directory. Cancelling declines."""
    question = (
        f"The target directory [magenta]{escape(str(target_dir))}[/] is not empty, "
        "do you want to continue anyway?"
    )
    try:
        return _confirm(question, default=True)
    except PromptCancelled:
        return False


def prompt_package_manager(available: list[PackageManager]) -> PackageManager:
    """Prompt user to choose one of the installed package managers."""
    labels = [pm.label for pm in available]
    return _select("Which package manager do you want to use?", available, labels)


def prompt_substitution_data(slug: str, options: CommandOptions) -> SubstitutionData:
    """
    Collect the values substituted into the template.

    Prompts are skipped for values already given in *options*.
    """
    name = _supplied(options.name, "--name", _defaults.validate_not_empty) or _text(
        "What is the native module name?",
        _defaults.slug_to_name(slug),
        _defaults.validate_not_empty,
    )
    description = _supplied(
        options.description, "--description", _defaults.validate_not_empty
    ) or _text(
        "How would you describe the module?",
        _defaults.DEFAULT_DESCRIPTION,
        _defaults.validate_not_empty,
    )
    package = _supplied(options.package, "--package", _defaults.validate_package) or _text(
        "What is the Android package name?",
        _defaults.name_to_package(name),
        _defaults.validate_package,
    )
    author_name = _supplied(
        options.author_name, "--author-name", _defaults.validate_not_empty
    ) or _text(
        "What is the name of the package author?",
        _defaults.git_config("user.name"),
        _defaults.validate_not_empty,
    )
    author_email = _supplied(
        options.author_email, "--author-email", _defaults.validate_email
    ) or _text(
        "What is the email address of the author?",
        _defaults.git_config("user.email"),
        _defaults.validate_email,
    )

    github_user: str | None = None
    if options.author_url is None or options.repo is None:
        github_user = _defaults.find_github_user(author_email)

    author_url = _supplied(
        options.author_url, "--author-url", _defaults.validate_url
    ) or _text(
        "What is the URL to the author's GitHub profile?",
        f"https://github.com/{github_user}" if github_user else None,
        _defaults.validate_url,
    )
    repo = _supplied(options.repo, "--repo", _defaults.validate_url) or _text(
        "What is the URL for the repository?",
        f"https://github.com/{github_user}/{slug}" if github_user else None,
        _defaults.validate_url,
    )

    return SubstitutionData(
        project=ProjectInfo(
            slug=slug,
            name=name,
            version=MODULE_VERSION,
            description=description,
            package=package,
        ),
        author=format_author(author_name, author_email, author_url),
        license=MODULE_LICENSE,
        repo=repo,
    )
