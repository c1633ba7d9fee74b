"""Fetches the module template from the npm registry."""

from __future__ import annotations

import tarfile
import tempfile
from pathlib import Path
from urllib.parse import quote

import requests

from create_expo_module.cli._logging import get_logger
from create_expo_module.config import Settings
from create_expo_module.errors import DownloadError

logger = get_logger(__name__)

# Files in npm tarballs are wrapped in a `package` directory.
TARBALL_ROOT = "package"

_CHUNK_SIZE = 64 * 1024


def get_tarball_url(settings: Settings, package_name: str, version: str = "latest") -> str:
    """Ask the registry for the tarball URL of *package_name* at *version*."""
    logger.debug("Using module template %s@%s", package_name, version)
    url = f"{settings.registry_url}/{quote(package_name, safe='@')}/{quote(version)}"

    try:
        response = requests.get(url, headers={"Accept": "application/json"})
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        raise DownloadError(f"Could not resolve {package_name}@{version}: {e}") from e
    except ValueError as e:
        raise DownloadError(f"Registry returned invalid JSON for {package_name}@{version}") from e

    tarball = (payload.get("dist") or {}).get("tarball")
    if not tarball:
        raise DownloadError(f"Registry entry for {package_name}@{version} has no tarball URL")
    return tarball


def download_tarball(url: str, directory: Path) -> None:
    """Download the gzipped tarball at *url* and extract it into *directory*."""
    logger.debug("Downloading %s", url)
    with tempfile.TemporaryFile() as buffer:
        try:
            with requests.get(url, stream=True) as response:
                response.raise_for_status()
                for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                    buffer.write(chunk)
        except requests.RequestException as e:
            raise DownloadError(f"Failed downloading {url}: {e}") from e

        buffer.seek(0)
        try:
            with tarfile.open(fileobj=buffer, mode="r:gz") as archive:
                archive.extractall(directory, filter="data")
        except (tarfile.TarError, OSError) as e:
            raise DownloadError(f"Failed extracting {url}: {e}") from e


def download_package(settings: Settings, target_dir: Path) -> Path:
    """Download the template package into *target_dir*. Returns the extracted root."""
    url = get_tarball_url(settings, settings.template_package, settings.dist_tag)
    download_tarball(url, target_dir)
    return target_dir / TARBALL_ROOT
