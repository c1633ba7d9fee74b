"""Typer CLI application for create-expo-module."""

from __future__ import annotations

from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import create_expo_module
from create_expo_module.cli._logging import configure_logging, get_logger
from create_expo_module.cli._pipeline import create_module
from create_expo_module.cli._types import CommandOptions, PackageManager
from create_expo_module.config import Settings
from create_expo_module.errors import CreateModuleError, PromptCancelled, SubprocessError

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"create-expo-module {create_expo_module.__version__}")
        raise Exit()


@app.command()
def main(
    path: Annotated[
        str | None,
        Argument(help="Directory where to create the module. Defaults to the package slug."),
    ] = None,
    source: Annotated[
        str | None,
        Option(
            "--source",
            "-s",
            help="Local path to the template. By default it downloads `expo-module-template` from npm.",  # noqa: E501
            show_default=False,
        ),
    ] = None,
    with_readme: Annotated[
        bool, Option("--with-readme", help="Whether to include README.md file.")
    ] = False,
    with_changelog: Annotated[
        bool, Option("--with-changelog", help="Whether to include CHANGELOG.md file.")
    ] = False,
    example: Annotated[
        bool, Option("--example/--no-example", help="Whether to create the example app.")
    ] = True,
    name: Annotated[str | None, Option("--name", help="Native module name.")] = None,
    description: Annotated[
        str | None, Option("--description", help="Module description.")
    ] = None,
    package: Annotated[str | None, Option("--package", help="Android package name.")] = None,
    author_name: Annotated[str | None, Option("--author-name", help="Author name.")] = None,
    author_email: Annotated[str | None, Option("--author-email", help="Author e-mail.")] = None,
    author_url: Annotated[
        str | None, Option("--author-url", help="URL to the author's profile.")
    ] = None,
    repo: Annotated[str | None, Option("--repo", help="Repository URL.")] = None,
    package_manager: Annotated[
        PackageManager | None,
        Option("--package-manager", help="Package manager used to install and build."),
    ] = None,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Print debug logs.")] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new Expo module from the module template."""
    try:
        settings = Settings.from_env()
    except CreateModuleError as e:
        _console.print(f"[bold red]Error:[/] {escape(str(e))}")
        raise Exit(code=1) from None

    configure_logging(debug=verbose or settings.debug)

    options = CommandOptions(
        source=source,
        with_readme=with_readme,
        with_changelog=with_changelog,
        example=example,
        name=name,
        description=description,
        package=package,
        author_name=author_name,
        author_email=author_email,
        author_url=author_url,
        repo=repo,
        package_manager=package_manager,
    )

    _console.print()
    _console.print(f"[bold cyan]●[/]  create-expo-module v{create_expo_module.__version__}")
    _console.print("[dim]│[/]")

    try:
        target_dir = create_module(path, options, settings, _console)
    except PromptCancelled:
        raise Exit(code=0) from None
    except SubprocessError as e:
        logger.debug("Subprocess output:\n%s", e.output)
        _console.print(f"[bold red]Error:[/] {escape(str(e))}")
        raise Exit(code=e.returncode) from None
    except CreateModuleError as e:
        _console.print(f"[bold red]Error:[/] {escape(str(e))}")
        raise Exit(code=1) from None

    _console.print()
    _console.print("[bold cyan]●[/]  ✅ Successfully created Expo module")
    _console.print(f"[dim]│[/]  cd {escape(str(target_dir))}")
    _console.print()
