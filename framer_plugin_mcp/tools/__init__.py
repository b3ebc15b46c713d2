"""Tools package."""

from .build_plugin import build_plugin
from .create_plugin import create_plugin

__all__ = ["build_plugin", "create_plugin"]
