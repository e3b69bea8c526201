"""Configuration data models for jenkins-plugin-cli.

``CliOptions`` carries the raw command line values, ``EffectiveConfiguration``
the resolved result handed to the plugin installer.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from jenkins_plugin_cli.core.models import PluginRequest, ResolvedSetting

# Setting keys, in resolution order
PLUGIN_FILE = "plugin_file"
PLUGIN_DIR = "plugin_dir"
JENKINS_WAR = "jenkins_war"
JENKINS_UC = "jenkins_uc"
JENKINS_UC_EXPERIMENTAL = "jenkins_uc_experimental"
JENKINS_INCREMENTALS_REPO_MIRROR = "jenkins_incrementals_repo_mirror"
SHOW_WARNINGS = "show_warnings"
SHOW_ALL_WARNINGS = "show_all_warnings"

SETTING_KEYS: Tuple[str, ...] = (
    PLUGIN_FILE,
    PLUGIN_DIR,
    JENKINS_WAR,
    JENKINS_UC,
    JENKINS_UC_EXPERIMENTAL,
    JENKINS_INCREMENTALS_REPO_MIRROR,
    SHOW_WARNINGS,
    SHOW_ALL_WARNINGS,
)


@dataclass(frozen=True)
class CliOptions:
    """Values parsed from the command line.

    Every field is None when the matching option was not given. Values are
    opaque here; they are parsed during resolution.
    """

    plugin_file: Optional[str] = None
    plugin_dir: Optional[str] = None
    plugins: Tuple[str, ...] = ()
    jenkins_war: Optional[str] = None
    show_warnings: Optional[bool] = None
    show_all_warnings: Optional[bool] = None
    jenkins_uc: Optional[str] = None
    jenkins_uc_experimental: Optional[str] = None
    jenkins_incrementals_repo_mirror: Optional[str] = None


@dataclass(frozen=True)
class EffectiveConfiguration:
    """Resolved configuration for one invocation.

    Built once by the assembler and never modified afterwards.
    """

    plugins: Tuple[PluginRequest, ...]
    plugin_file: ResolvedSetting[Path]
    plugin_dir: ResolvedSetting[Path]
    jenkins_war: ResolvedSetting[Path]
    jenkins_uc: ResolvedSetting[str]
    jenkins_uc_experimental: ResolvedSetting[str]
    jenkins_incrementals_repo_mirror: ResolvedSetting[str]
    show_warnings: ResolvedSetting[bool]
    show_all_warnings: ResolvedSetting[bool]

    @property
    def update_center(self) -> str:
        return self.jenkins_uc.value

    @property
    def experimental_update_center(self) -> str:
        return self.jenkins_uc_experimental.value

    @property
    def incrementals_mirror(self) -> str:
        return self.jenkins_incrementals_repo_mirror.value

    def settings(self) -> Dict[str, ResolvedSetting[Any]]:
        """All resolved settings keyed by setting key, in resolution order."""
        return {key: getattr(self, key) for key in SETTING_KEYS}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for JSON/YAML output."""
        settings: Dict[str, Any] = {}
        for key, setting in self.settings().items():
            value = setting.value
            settings[key] = {
                "value": str(value) if isinstance(value, Path) else value,
                "provenance": setting.provenance.value,
            }
        return {
            "settings": settings,
            "plugins": [plugin.to_dict() for plugin in self.plugins],
        }
