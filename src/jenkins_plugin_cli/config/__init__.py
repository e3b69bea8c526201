"""Configuration module for jenkins-plugin-cli.

Resolves settings from CLI options, environment variables and defaults,
and parses plugin specifications from --plugins and plugins.txt.
"""

from jenkins_plugin_cli.config.models import CliOptions, EffectiveConfiguration
from jenkins_plugin_cli.config.loader import ConfigError, assemble, load_config
from jenkins_plugin_cli.config.plugin_spec import (
    SourceUnavailableError,
    collect_plugins,
    format_plugin_request,
    parse_plugin_line,
)
from jenkins_plugin_cli.config.resolver import MalformedSourceError, resolve
from jenkins_plugin_cli.config.validation import PluginValidationWarning, validate_plugins

__all__ = [
    "CliOptions",
    "EffectiveConfiguration",
    "ConfigError",
    "assemble",
    "load_config",
    "SourceUnavailableError",
    "collect_plugins",
    "format_plugin_request",
    "parse_plugin_line",
    "MalformedSourceError",
    "resolve",
    "PluginValidationWarning",
    "validate_plugins",
]
