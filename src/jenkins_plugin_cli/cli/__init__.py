from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional

from importlib.metadata import version, PackageNotFoundError

from jenkins_plugin_cli.cli.config_bridge import ConfigBridge
from jenkins_plugin_cli.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from jenkins_plugin_cli.cli.report import OUTPUT_FORMATS, render_config
from jenkins_plugin_cli.config import settings as defaults
from jenkins_plugin_cli.config.loader import ConfigError, load_config
from jenkins_plugin_cli.config.resolver import MalformedSourceError
from jenkins_plugin_cli.config.validation import validate_plugins
from jenkins_plugin_cli.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def _get_version() -> str:
    try:
        return version("jenkins-plugin-cli")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from jenkins_plugin_cli import __version__

        return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jenkins-plugin-cli",
        description="jenkins-plugin-cli - Resolve plugins and settings for Jenkins plugin installation.",
    )

    # Global options
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show jenkins-plugin-cli version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce logging output to errors only.",
    )
    parser.add_argument(
        "--output",
        choices=list(OUTPUT_FORMATS),
        default="summary",
        help="Format of the configuration report (default: summary).",
    )

    # Plugin sources
    parser.add_argument(
        "--plugin-file",
        "-f",
        dest="plugin_file",
        metavar="PATH",
        help=f"Path to plugins.txt file (default: {defaults.DEFAULT_PLUGIN_TXT}).",
    )
    parser.add_argument(
        "--plugins",
        "-p",
        dest="plugins",
        nargs="*",
        metavar="PLUGIN",
        help="List of plugins to install, separated by a space.",
    )

    # Install locations
    parser.add_argument(
        "--plugin-download-directory",
        "-d",
        dest="plugin_dir",
        metavar="PATH",
        help="Path to directory in which to install plugins.",
    )
    parser.add_argument(
        "--war",
        "-w",
        dest="jenkins_war",
        metavar="PATH",
        help="Path to Jenkins war file.",
    )

    # Security warnings
    parser.add_argument(
        "--view-security-warnings",
        dest="show_warnings",
        action="store_true",
        default=None,
        help="Show specified plugins that have security warnings.",
    )
    parser.add_argument(
        "--view-all-security-warnings",
        dest="show_all_warnings",
        action="store_true",
        default=None,
        help="Show all plugins that have security warnings.",
    )

    # Update center and mirrors
    parser.add_argument(
        "--jenkins-update-center",
        dest="jenkins_uc",
        metavar="URL",
        help=(
            f"Sets main update center; will override {defaults.JENKINS_UC_ENV} environment "
            f"variable. If not set via CLI option or environment variable, will default to "
            f"{defaults.DEFAULT_UPDATE_CENTER_LOCATION}"
        ),
    )
    parser.add_argument(
        "--jenkins-experimental-update-center",
        dest="jenkins_uc_experimental",
        metavar="URL",
        help=(
            f"Sets experimental update center; will override "
            f"{defaults.JENKINS_UC_EXPERIMENTAL_ENV} environment variable. If not set via CLI "
            f"option or environment variable, will default to "
            f"{defaults.DEFAULT_EXPERIMENTAL_UPDATE_CENTER_LOCATION}"
        ),
    )
    parser.add_argument(
        "--jenkins-incrementals-repo-mirror",
        dest="jenkins_incrementals_repo_mirror",
        metavar="URL",
        help=(
            f"Set Maven mirror to be used to download plugins from the Incrementals "
            f"repository; will override the {defaults.JENKINS_INCREMENTALS_REPO_MIRROR_ENV} "
            f"environment variable. If not set via CLI option or environment variable, will "
            f"default to {defaults.DEFAULT_INCREMENTALS_REPO_MIRROR_LOCATION}"
        ),
    )

    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Returns an exit code suitable for use as a console script.
    """
    parser = build_parser()

    # Handle --help specially to return 0
    if argv is not None:
        argv_list = list(argv)
        if "--help" in argv_list or "-h" in argv_list:
            parser.print_help()
            return EXIT_SUCCESS
    else:
        argv_list = None

    args = parser.parse_args(argv_list)

    # Configure logging as early as possible.
    configure_logging(debug=args.debug, quiet=args.quiet)

    if args.version:
        print(_get_version())
        return EXIT_SUCCESS

    options = ConfigBridge.args_to_options(args)

    try:
        config = load_config(options)
    except (MalformedSourceError, ConfigError) as e:
        LOGGER.error(str(e))
        return EXIT_INVALID_USAGE

    validate_plugins(config.plugins)

    sys.stdout.write(render_config(config, args.output) + "\n")
    return EXIT_SUCCESS
