"""Runtime settings resolved once from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from create_expo_module.errors import ConfigError

TEMPLATE_PACKAGE = "expo-module-template"
DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"

# `package.json` is rendered from `$package.json` instead of copied.
IGNORED_PATHS: frozenset[str] = frozenset({".DS_Store", "build", "node_modules", "package.json"})

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

DEBUG_NAMESPACE = "create-expo-module"


def boolish(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    """Read a boolean-like environment variable.

    Unset or empty values fall back to *default*; anything that is not a
    recognized truthy/falsy spelling is rejected.
    """
    raw = env.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean-like value, got {raw!r}.")


def debug_enabled(value: str) -> bool:
    """Whether a `DEBUG` namespace list such as `expo:*,create-expo-module` selects this tool.

    Entries are separated by commas or spaces; `*` selects everything and a
    leading `-` excludes a namespace.
    """
    enabled = False
    for entry in value.replace(",", " ").split():
        if entry.startswith("-"):
            if DEBUG_NAMESPACE in entry[1:] or entry[1:] == "*":
                return False
        elif entry == "*" or DEBUG_NAMESPACE in entry:
            enabled = True
    return enabled


@dataclass(frozen=True, kw_only=True)
class Settings:
    """
    Settings shared by every step of a run.

    Attributes:
        cwd: Base directory for relative target and source paths.
        use_beta: Download the `next` dist-tag of the template instead of `latest`.
        template_package: Name of the template package on the registry.
        registry_url: Base URL of the npm registry.
        ignored_paths: File and directory names skipped while reading the template.
        debug: Enable debug logging.
        user_agent: `npm_config_user_agent` of the package manager running this command.
    """

    cwd: Path
    use_beta: bool = False
    template_package: str = TEMPLATE_PACKAGE
    registry_url: str = DEFAULT_REGISTRY_URL
    ignored_paths: frozenset[str] = field(default=IGNORED_PATHS)
    debug: bool = False
    user_agent: str | None = None

    def __post_init__(self) -> None:
        if not self.template_package:
            raise ConfigError("template_package must not be empty.")
        if not self.registry_url.startswith(("http://", "https://")):
            raise ConfigError(f"registry_url must be an http(s) URL, got {self.registry_url!r}.")

    @property
    def dist_tag(self) -> str:
        return "next" if self.use_beta else "latest"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *env* (defaults to ``os.environ``)."""
        env = os.environ if env is None else env
        # `yarn run` may change the working directory; INIT_CWD keeps the original one.
        cwd = Path(env.get("INIT_CWD") or os.getcwd())
        return cls(
            cwd=cwd,
            use_beta=boolish(env, "EXPO_BETA"),
            registry_url=(env.get("EXPO_NPM_REGISTRY") or DEFAULT_REGISTRY_URL).rstrip("/"),
            debug=debug_enabled(env.get("DEBUG", "")),
            user_agent=env.get("npm_config_user_agent") or None,
        )
