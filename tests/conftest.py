"""Shared fixtures for the create-expo-module test suite."""

from pathlib import Path

import pytest

from create_expo_module.cli._types import CommandOptions, ProjectInfo, SubstitutionData


@pytest.fixture
def data() -> SubstitutionData:
    return SubstitutionData(
        project=ProjectInfo(
            slug="acme-widget",
            name="AcmeWidget",
            version="0.1.0",
            description="A widget module",
            package="com.acme.widget",
        ),
        author="Jane Doe <jane@acme.dev> (https://github.com/jane)",
        license="MIT",
        repo="https://github.com/jane/acme-widget",
    )


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A small module template with every kind of entry the renderer handles."""
    root = tmp_path / "template"
    files = {
        "$package.json": (
            '{\n  "name": "<%- project.slug %>",\n  "version": "<%= project.version %>"\n}\n'
        ),
        "package.json": '{"name": "expo-module-template"}\n',
        "{%= project.package %}/index.ts": (
            "// <%= project.package %>\nexport const name = '<%= project.name %>';\n"
        ),
        "src/{%= project.name %}Module.ts": "export default '<%= project.name %>';\n",
        "README.md": "# <%= project.name %>\n\n<%= project.description %>\n",
        "CHANGELOG.md": "# Changelog\n",
        "node_modules/dep/index.js": "module.exports = 1;\n",
        "build/index.js": "compiled\n",
        "src/.DS_Store": "junk",
    }
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def full_options() -> CommandOptions:
    """Options answering every substitution prompt."""
    return CommandOptions(
        name="AcmeWidget",
        description="A widget module",
        package="com.acme.widget",
        author_name="Jane Doe",
        author_email="jane@acme.dev",
        author_url="https://github.com/jane",
        repo="https://github.com/jane/acme-widget",
    )
