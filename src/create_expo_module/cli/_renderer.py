"""Renders a template tree into the target directory."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError

from create_expo_module.cli._logging import get_logger
from create_expo_module.cli._types import SubstitutionData
from create_expo_module.errors import RenderError

logger = get_logger(__name__)


def _dots_to_separators(value: Any) -> str:
    """Turn `com.example` into `com/example` so package ids become nested dirs."""
    return str(value).replace(".", os.sep)


# Paths use `{%= ... %}` tags; block and comment syntax is moved out of the way.
_path_env = Environment(
    variable_start_string="{%=",
    variable_end_string="%}",
    block_start_string="<%",
    block_end_string="%>",
    comment_start_string="<#",
    comment_end_string="#>",
    autoescape=False,
    undefined=StrictUndefined,
    finalize=_dots_to_separators,
)

# Contents use ejs-style tags: `<%= x %>` (or `<%- x %>`), `<% ... %>` and `<%# ... %>`.
_content_env = Environment(
    variable_start_string="<%=",
    variable_end_string="%>",
    block_start_string="<%",
    block_end_string="%>",
    comment_start_string="<%#",
    comment_end_string="%>",
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)

_RAW_OUTPUT_TAG = "<%-"


def get_files(root: Path, ignored: Iterable[str], subdir: str | None = None) -> list[str]:
    """
    Recursively list files under *root*, relative to it, in sorted order.

    Entries whose relative path or own name is in *ignored* are skipped, and
    ignored directories are not descended into. Symlinks are listed as files.
    """
    ignored = frozenset(ignored)
    base = root / subdir if subdir else root
    files: list[str] = []

    for entry in sorted(os.listdir(base)):
        relative = os.path.join(subdir, entry) if subdir else entry
        if relative in ignored or entry in ignored:
            continue

        full = base / entry
        if full.is_dir() and not full.is_symlink():
            files.extend(get_files(root, ignored, relative))
        else:
            files.append(relative)
    return files


def render_path(relative_path: str, data: SubstitutionData) -> str:
    """Strip the leading `$` marker and substitute `{%= ... %}` placeholders."""
    stripped = relative_path.removeprefix("$")
    return _path_env.from_string(stripped).render(**data.as_context())


def render_content(text: str, data: SubstitutionData) -> str:
    # Output is never HTML-escaped, so `<%-` and `<%=` render the same.
    text = text.replace(_RAW_OUTPUT_TAG, "<%=")
    return _content_env.from_string(text).render(**data.as_context())


def create_module_from_template(
    template_path: Path,
    target_path: Path,
    data: SubstitutionData,
    ignored: Iterable[str],
) -> list[str]:
    """Render every template file into *target_path*. Returns the written relative paths."""
    if not template_path.is_dir():
        raise RenderError(f"Template directory not found: {template_path}")

    written: list[str] = []

    for file in get_files(template_path, ignored):
        try:
            rendered_path = render_path(file, data)
            source = (template_path / file).read_text(encoding="utf-8")
            rendered = render_content(source, data)
        except TemplateError as e:
            raise RenderError(f"Failed rendering template file: {file}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise RenderError(f"Failed reading template file: {file}: {e}") from e

        destination = target_path / rendered_path
        logger.debug("Rendering %s -> %s", file, destination)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(rendered, encoding="utf-8")
        except OSError as e:
            raise RenderError(f"Failed writing {destination}: {e}") from e
        written.append(rendered_path)

    return written
