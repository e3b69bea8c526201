"""Configuration resolution and assembly.

Builds the EffectiveConfiguration for one invocation from:
- CLI options (CliOptions)
- Environment variables (JENKINS_UC, JENKINS_UC_EXPERIMENTAL,
  JENKINS_INCREMENTALS_REPO_MIRROR)
- Compiled-in defaults (config.settings)
- The --plugins list and the plugins.txt manifest
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from jenkins_plugin_cli.config import settings as defaults
from jenkins_plugin_cli.config.models import (
    JENKINS_INCREMENTALS_REPO_MIRROR,
    JENKINS_UC,
    JENKINS_UC_EXPERIMENTAL,
    JENKINS_WAR,
    PLUGIN_DIR,
    PLUGIN_FILE,
    SETTING_KEYS,
    SHOW_ALL_WARNINGS,
    SHOW_WARNINGS,
    CliOptions,
    EffectiveConfiguration,
)
from jenkins_plugin_cli.config.plugin_spec import collect_plugins
from jenkins_plugin_cli.config.resolver import (
    EnvLookup,
    resolve_flag,
    resolve_path,
    resolve_url,
)
from jenkins_plugin_cli.core.errors import PluginManagerError
from jenkins_plugin_cli.core.logging import get_logger
from jenkins_plugin_cli.core.models import PluginRequest, ResolvedSetting

LOGGER = get_logger(__name__)


class ConfigError(PluginManagerError):
    """Configuration could not be assembled."""

    pass


def resolve_settings(
    options: CliOptions,
    env: Optional[EnvLookup] = None,
    platform: Optional[str] = None,
) -> Dict[str, ResolvedSetting[Any]]:
    """Resolve every setting with CLI > environment > default precedence.

    Args:
        options: Parsed command line values.
        env: Environment lookup (default: ``os.environ``).
        platform: Platform used to pick path defaults (default: current).

    Returns:
        Resolved settings keyed by setting key.

    Raises:
        MalformedSourceError: On the first value that cannot be parsed.
    """
    plugin_dir_default = (
        defaults.default_plugin_dir(platform) if platform else defaults.default_plugin_dir()
    )
    war_default = defaults.default_war(platform) if platform else defaults.default_war()

    resolved: Dict[str, ResolvedSetting[Any]] = {}
    resolved[PLUGIN_FILE] = resolve_path(
        "plugin file",
        options.plugin_file,
        defaults.DEFAULT_PLUGIN_TXT,
        option_name="--plugin-file",
    )
    resolved[PLUGIN_DIR] = resolve_path(
        "plugin download directory",
        options.plugin_dir,
        plugin_dir_default,
        option_name="--plugin-download-directory",
    )
    resolved[JENKINS_WAR] = resolve_path(
        "war",
        options.jenkins_war,
        war_default,
        option_name="--war",
    )
    resolved[JENKINS_UC] = resolve_url(
        "update center",
        options.jenkins_uc,
        defaults.JENKINS_UC_ENV,
        defaults.DEFAULT_UPDATE_CENTER_LOCATION,
        env=env,
        option_name="--jenkins-update-center",
    )
    resolved[JENKINS_UC_EXPERIMENTAL] = resolve_url(
        "experimental update center",
        options.jenkins_uc_experimental,
        defaults.JENKINS_UC_EXPERIMENTAL_ENV,
        defaults.DEFAULT_EXPERIMENTAL_UPDATE_CENTER_LOCATION,
        env=env,
        option_name="--jenkins-experimental-update-center",
    )
    resolved[JENKINS_INCREMENTALS_REPO_MIRROR] = resolve_url(
        "incrementals mirror",
        options.jenkins_incrementals_repo_mirror,
        defaults.JENKINS_INCREMENTALS_REPO_MIRROR_ENV,
        defaults.DEFAULT_INCREMENTALS_REPO_MIRROR_LOCATION,
        env=env,
        option_name="--jenkins-incrementals-repo-mirror",
    )
    resolved[SHOW_WARNINGS] = resolve_flag(
        "security warnings for specified plugins",
        options.show_warnings,
        option_name="--view-security-warnings",
    )
    resolved[SHOW_ALL_WARNINGS] = resolve_flag(
        "security warnings for all plugins",
        options.show_all_warnings,
        option_name="--view-all-security-warnings",
    )
    return resolved


def assemble(
    plugins: Iterable[PluginRequest],
    resolved_settings: Mapping[str, ResolvedSetting[Any]],
) -> EffectiveConfiguration:
    """Aggregate parsed plugins and resolved settings.

    No validation and no I/O happens here.

    Raises:
        ConfigError: If a setting is missing from ``resolved_settings``.
    """
    missing = [key for key in SETTING_KEYS if key not in resolved_settings]
    if missing:
        raise ConfigError(f"Missing resolved settings: {', '.join(missing)}")

    return EffectiveConfiguration(
        plugins=tuple(plugins),
        **{key: resolved_settings[key] for key in SETTING_KEYS},
    )


def load_config(
    options: CliOptions,
    env: Optional[EnvLookup] = None,
    platform: Optional[str] = None,
) -> EffectiveConfiguration:
    """Resolve settings, collect plugin requests and assemble the result.

    Args:
        options: Parsed command line values.
        env: Environment lookup (default: ``os.environ``).
        platform: Platform used to pick path defaults (default: current).

    Returns:
        The effective configuration.

    Raises:
        MalformedSourceError: If any setting fails to resolve. Nothing is
            assembled in that case.
    """
    resolved = resolve_settings(options, env=env, platform=platform)

    manifest_path: Path = resolved[PLUGIN_FILE].value
    plugins = collect_plugins(options.plugins, manifest_path)

    config = assemble(plugins, resolved)
    sources = {key: setting.provenance.value for key, setting in resolved.items()}
    LOGGER.debug(f"Config resolved from sources: {sources}")
    return config
