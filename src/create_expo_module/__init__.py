"""create-expo-module: scaffolding tool for native module projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("create-expo-module")
except PackageNotFoundError:
    __version__ = "0.0.0"
