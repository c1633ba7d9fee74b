from create_expo_module.cli.app import app

__all__ = ["app"]
