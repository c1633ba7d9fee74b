"""Generates the example app that consumes the new module."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from create_expo_module.cli._logging import get_logger
from create_expo_module.cli._package_manager import install_dependencies, run_command
from create_expo_module.cli._types import PackageManager, SubstitutionData
from create_expo_module.errors import CreateModuleError

logger = get_logger(__name__)

EXAMPLE_DIR = "example"
EXAMPLE_TEMPLATE = "expo-template-blank-typescript"


def example_app_name(slug: str) -> str:
    return f"{slug.rsplit('/', 1)[-1]}-example"


def _update_package_json(app_dir: Path, app_name: str) -> None:
    """Point the example's autolinking at the module in the parent directory."""
    manifest_path = app_dir / "package.json"
    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise CreateModuleError(f"Could not read {manifest_path}: {e}") from e

    manifest["name"] = app_name
    expo = manifest.setdefault("expo", {})
    expo.setdefault("autolinking", {})["nativeModulesDir"] = ".."

    manifest_path.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")


def create_example_app(
    data: SubstitutionData, target_dir: Path, package_manager: PackageManager
) -> Path:
    """Create `example/` inside *target_dir* and install its dependencies."""
    app_name = example_app_name(data.project.slug)
    scratch_dir = target_dir / app_name
    example_dir = target_dir / EXAMPLE_DIR

    run_command(
        [
            "npx",
            "create-expo-app",
            app_name,
            "--template",
            EXAMPLE_TEMPLATE,
            "--yes",
            "--no-install",
        ],
        target_dir,
    )

    # Files already rendered into example/ by the module template are overwritten.
    logger.debug("Moving %s to %s", scratch_dir, example_dir)
    shutil.copytree(scratch_dir, example_dir, dirs_exist_ok=True)
    shutil.rmtree(scratch_dir)

    _update_package_json(example_dir, app_name)
    install_dependencies(package_manager, example_dir)
    return example_dir
