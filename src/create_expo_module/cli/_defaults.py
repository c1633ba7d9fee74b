"""Default answers and validators for the substitution prompts."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

import requests

from create_expo_module.cli._logging import get_logger

logger = get_logger(__name__)

DEFAULT_SLUG = "my-module"
DEFAULT_DESCRIPTION = "My new module"

_SLUG_RE = re.compile(r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$")
_PACKAGE_RE = re.compile(r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)+$")
_MAX_SLUG_LENGTH = 214

GITHUB_API_URL = "https://api.github.com"


def validate_slug(value: str) -> str | None:
    """Return an error message if *value* is not a valid npm package name."""
    if not value:
        return "The package name cannot be empty"
    if len(value) > _MAX_SLUG_LENGTH:
        return f"The package name cannot be longer than {_MAX_SLUG_LENGTH} characters"
    if not _SLUG_RE.match(value):
        return "Invalid package name, use lowercase letters, digits and -._~ only"
    return None


def validate_package(value: str) -> str | None:
    if not _PACKAGE_RE.match(value):
        return "Invalid package identifier, expected something like com.example.mymodule"
    return None


def validate_email(value: str) -> str | None:
    if "@" not in value or value.startswith("@") or value.endswith("@"):
        return "Invalid e-mail address"
    return None


def validate_url(value: str) -> str | None:
    if not value.startswith(("http://", "https://")):
        return "The URL must start with http:// or https://"
    return None


def validate_not_empty(value: str) -> str | None:
    return None if value.strip() else "This value cannot be empty"


def initial_slug(target: str | None) -> str:
    """Use the target's directory name when it is a valid slug."""
    if target:
        name = Path(target).name
        if validate_slug(name) is None:
            return name
    return DEFAULT_SLUG


def slug_to_name(slug: str) -> str:
    """`@acme/my-module` -> `MyModule`."""
    bare = slug.rsplit("/", 1)[-1]
    parts = re.split(r"[^A-Za-z0-9]+", bare)
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def name_to_package(name: str) -> str:
    return "expo.modules." + re.sub(r"\W", "", name).lower()


def git_config(key: str) -> str | None:
    """Read a value from the user's git config, None when git or the key is missing."""
    try:
        result = subprocess.run(
            ["git", "config", "--get", key], capture_output=True, text=True
        )
    except FileNotFoundError:
        return None
    value = result.stdout.strip()
    return value if result.returncode == 0 and value else None


def find_github_user(email: str) -> str | None:
    """Look up a GitHub login by e-mail.

    Only used to suggest defaults, so network or API errors yield None.
    """
    try:
        response = requests.get(
            f"{GITHUB_API_URL}/search/users",
            params={"q": f"{email} in:email"},
            headers={"Accept": "application/vnd.github+json"},
            timeout=5,
        )
        response.raise_for_status()
        items = response.json().get("items") or []
    except (requests.RequestException, ValueError) as e:
        logger.debug("GitHub user lookup failed: %s", e)
        return None
    return items[0].get("login") if items else None
