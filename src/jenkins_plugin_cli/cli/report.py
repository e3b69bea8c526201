"""Rendering of the effective configuration."""

from __future__ import annotations

import json
from typing import List

import yaml

from jenkins_plugin_cli.config.models import EffectiveConfiguration

OUTPUT_FORMATS = ("summary", "json", "yaml")


def render_config(config: EffectiveConfiguration, output_format: str = "summary") -> str:
    """Render the configuration in one of OUTPUT_FORMATS.

    Raises:
        ValueError: For an unknown format.
    """
    if output_format == "json":
        return json.dumps(config.to_dict(), indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(config.to_dict(), sort_keys=False, default_flow_style=False).rstrip("\n")
    if output_format == "summary":
        return _render_summary(config)
    raise ValueError(f"Unknown output format: {output_format}")


def _render_summary(config: EffectiveConfiguration) -> str:
    lines: List[str] = ["Settings:"]
    for key, setting in config.settings().items():
        lines.append(f"  {key}: {setting.value} ({setting.describe()})")

    lines.append("")
    if config.plugins:
        lines.append(f"Plugins ({len(config.plugins)}):")
        for plugin in config.plugins:
            lines.append(f"  {plugin.to_spec()}")
    else:
        lines.append("Plugins: none")
    return "\n".join(lines)
