"""Validation of parsed plugin requests.

The parser never rejects a line, so requests the installer will refuse
are reported here as warnings. Nothing is raised and nothing is removed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from jenkins_plugin_cli.core.logging import get_logger
from jenkins_plugin_cli.core.models import PluginRequest

LOGGER = get_logger(__name__)


@dataclass
class PluginValidationWarning:
    """A validation warning for a plugin request."""

    message: str
    position: int
    plugin: Optional[str] = None


def validate_plugins(plugins: Iterable[PluginRequest]) -> List[PluginValidationWarning]:
    """Check plugin requests for empty and repeated names.

    Args:
        plugins: Requests in collection order.

    Returns:
        List of validation warnings. Positions are 1-based.
    """
    warnings: List[PluginValidationWarning] = []
    first_seen: Dict[str, int] = {}

    for position, plugin in enumerate(plugins, start=1):
        if not plugin.name:
            warning = PluginValidationWarning(
                message="Plugin request has an empty name",
                position=position,
            )
            warnings.append(warning)
            _log_warning(warning)
            continue

        if plugin.name in first_seen:
            warning = PluginValidationWarning(
                message=(
                    f"Plugin '{plugin.name}' requested more than once "
                    f"(first at position {first_seen[plugin.name]})"
                ),
                position=position,
                plugin=plugin.name,
            )
            warnings.append(warning)
            _log_warning(warning)
        else:
            first_seen[plugin.name] = position

    return warnings


def _log_warning(warning: PluginValidationWarning) -> None:
    LOGGER.warning(f"Plugin #{warning.position}: {warning.message}")
