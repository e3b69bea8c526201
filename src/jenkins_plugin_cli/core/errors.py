"""Base exception for jenkins-plugin-cli."""

from __future__ import annotations


class PluginManagerError(Exception):
    """Base class for all errors raised by jenkins-plugin-cli."""

    pass
