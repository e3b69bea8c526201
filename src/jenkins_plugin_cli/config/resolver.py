"""Precedence resolution for individual settings.

Each setting is resolved with the same precedence (highest to lowest):
1. Explicit CLI option
2. Environment variable (only for settings that have one)
3. Compiled-in default

The environment is read through an injectable mapping so callers and tests
never need to mutate ``os.environ``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Mapping, Optional, TypeVar, Union
from urllib.parse import urlparse

from jenkins_plugin_cli.core.errors import PluginManagerError
from jenkins_plugin_cli.core.logging import get_logger
from jenkins_plugin_cli.core.models import Provenance, ResolvedSetting

LOGGER = get_logger(__name__)

T = TypeVar("T")

EnvLookup = Mapping[str, str]
ValueParser = Callable[[str], T]

# Schemes accepted for update center and mirror URLs
ALLOWED_URL_SCHEMES = ("http", "https", "file", "ftp")


class MalformedSourceError(PluginManagerError):
    """An explicit or environment value could not be parsed for its setting."""

    def __init__(self, source: str, text: str, reason: str = "") -> None:
        self.source = source
        self.text = text
        self.reason = reason
        message = f"Invalid value {text!r} from {source}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def parse_url(text: str) -> str:
    """Validate an absolute URL and return it without surrounding whitespace.

    Raises:
        ValueError: If the text is not an absolute URL.
    """
    candidate = text.strip()
    parsed = urlparse(candidate)
    if not parsed.scheme:
        raise ValueError("no URL scheme")
    if parsed.scheme not in ALLOWED_URL_SCHEMES:
        raise ValueError(f"unknown protocol: {parsed.scheme}")
    if parsed.scheme == "file":
        if not parsed.path:
            raise ValueError("file URL has no path")
    elif not parsed.netloc:
        raise ValueError("no host")
    # Raises ValueError for a non-numeric or out-of-range port
    parsed.port
    return candidate


def parse_path(text: str) -> Path:
    """Convert text to a filesystem path.

    Raises:
        ValueError: If the text is blank or contains a NUL byte.
    """
    candidate = text.strip()
    if not candidate:
        raise ValueError("empty path")
    if "\0" in candidate:
        raise ValueError("path contains a NUL byte")
    return Path(candidate)


def _is_blank(value: Union[str, Path, None]) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return not str(value)


def _parse(parser: ValueParser[T], source: str, text: str) -> T:
    try:
        return parser(text)
    except ValueError as e:
        raise MalformedSourceError(source, text, str(e)) from e


def resolve(
    setting_name: str,
    explicit_value: Union[str, Path, None],
    env_var_name: Optional[str],
    default_value: T,
    parser: ValueParser[T],
    env: Optional[EnvLookup] = None,
    option_name: Optional[str] = None,
) -> ResolvedSetting[T]:
    """Resolve one setting from CLI option, environment variable and default.

    Args:
        setting_name: Human readable name used in diagnostics.
        explicit_value: Value given on the command line, or None.
        env_var_name: Environment variable to consult, or None if the
            setting has no environment tier.
        default_value: Compiled-in default, already of the target type.
        parser: Converts text into the target type, raising ValueError
            on malformed input.
        env: Environment lookup (default: ``os.environ``).
        option_name: CLI flag name, used to name the source in errors.

    Returns:
        The resolved setting with its provenance.

    Raises:
        MalformedSourceError: If the winning explicit or environment value
            cannot be parsed. There is no fallback to the default.
    """
    if not _is_blank(explicit_value):
        source = option_name or "CLI option"
        value = _parse(parser, source, str(explicit_value))
        LOGGER.info(f"Using {setting_name} {value} specified with CLI option")
        return ResolvedSetting(setting_name, value, Provenance.CLI, option_name)

    if env_var_name:
        lookup = os.environ if env is None else env
        env_value = lookup.get(env_var_name)
        if not _is_blank(env_value):
            value = _parse(parser, f"{env_var_name} environment variable", env_value)
            LOGGER.info(f"Using {setting_name} {value} from {env_var_name} environment variable")
            return ResolvedSetting(setting_name, value, Provenance.ENVIRONMENT, env_var_name)
        LOGGER.info(
            f"No CLI option or environment variable set for {setting_name}, "
            f"using default of {default_value}"
        )
    else:
        LOGGER.info(f"No {setting_name} entered. Will use default of {default_value}")

    return ResolvedSetting(setting_name, default_value, Provenance.DEFAULT)


def resolve_url(
    setting_name: str,
    explicit_value: Optional[str],
    env_var_name: str,
    default_value: str,
    env: Optional[EnvLookup] = None,
    option_name: Optional[str] = None,
) -> ResolvedSetting[str]:
    return resolve(
        setting_name,
        explicit_value,
        env_var_name,
        default_value,
        parse_url,
        env=env,
        option_name=option_name,
    )


def resolve_path(
    setting_name: str,
    explicit_value: Union[str, Path, None],
    default_value: Path,
    option_name: Optional[str] = None,
) -> ResolvedSetting[Path]:
    return resolve(
        setting_name,
        explicit_value,
        None,
        default_value,
        parse_path,
        option_name=option_name,
    )


def resolve_flag(
    setting_name: str,
    explicit: Optional[bool],
    option_name: Optional[str] = None,
) -> ResolvedSetting[bool]:
    """Resolve a boolean flag. Flags have no environment tier and default to False."""
    if explicit:
        LOGGER.info(f"{setting_name} enabled with CLI option")
        return ResolvedSetting(setting_name, True, Provenance.CLI, option_name)
    LOGGER.info(f"No CLI option set for {setting_name}, using default of False")
    return ResolvedSetting(setting_name, False, Provenance.DEFAULT)
