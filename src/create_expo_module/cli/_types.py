"""Data passed between the CLI steps."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any

MODULE_VERSION = "0.1.0"
MODULE_LICENSE = "MIT"


class PackageManager(str, Enum):
    """Supported JavaScript package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"

    @property
    def label(self) -> str:
        labels: dict[PackageManager, str] = {
            PackageManager.NPM: "npm",
            PackageManager.YARN: "Yarn",
            PackageManager.PNPM: "pnpm",
            PackageManager.BUN: "Bun",
        }
        return labels[self]


@dataclass(kw_only=True)
class CommandOptions:
    """
    Options supplied on the command line.

    `target` is None until the orchestrator resolves it, and is not changed
    afterwards. The answer fields skip the matching prompt when set.
    """

    target: Path | None = None
    source: str | None = None
    with_readme: bool = False
    with_changelog: bool = False
    example: bool = True
    name: str | None = None
    description: str | None = None
    package: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    author_url: str | None = None
    repo: str | None = None
    package_manager: PackageManager | None = None


@dataclass(frozen=True, kw_only=True)
class ProjectInfo:
    slug: str
    name: str
    version: str
    description: str
    package: str


@dataclass(frozen=True, kw_only=True)
class SubstitutionData:
    """Values substituted into template paths and contents."""

    project: ProjectInfo
    author: str
    license: str
    repo: str

    def as_context(self) -> dict[str, Any]:
        return asdict(self)


def format_author(name: str, email: str, url: str) -> str:
    return f"{name} <{email}> ({url})"
