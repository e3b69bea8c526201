"""Bridge between CLI arguments and configuration models."""

from __future__ import annotations

import argparse

from jenkins_plugin_cli.config.models import CliOptions


class ConfigBridge:
    """Translates CLI arguments to configuration objects."""

    @staticmethod
    def args_to_options(args: argparse.Namespace) -> CliOptions:
        """Convert parsed CLI arguments to CliOptions.

        Options that were not given stay None so the resolver can fall
        back to environment variables and defaults.

        Args:
            args: Parsed CLI arguments.

        Returns:
            CliOptions with the raw option values.
        """
        # Use getattr with defaults so partially built namespaces work too
        plugins = getattr(args, "plugins", None) or []

        return CliOptions(
            plugin_file=getattr(args, "plugin_file", None),
            plugin_dir=getattr(args, "plugin_dir", None),
            plugins=tuple(plugins),
            jenkins_war=getattr(args, "jenkins_war", None),
            show_warnings=getattr(args, "show_warnings", None),
            show_all_warnings=getattr(args, "show_all_warnings", None),
            jenkins_uc=getattr(args, "jenkins_uc", None),
            jenkins_uc_experimental=getattr(args, "jenkins_uc_experimental", None),
            jenkins_incrementals_repo_mirror=getattr(
                args, "jenkins_incrementals_repo_mirror", None
            ),
        )
