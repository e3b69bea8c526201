from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")

# Version requested when a plugin line names no version
DEFAULT_VERSION = "latest"


class Provenance(str, Enum):
    """Which source supplied a resolved setting."""

    CLI = "cli"
    ENVIRONMENT = "environment"
    DEFAULT = "default"


@dataclass(frozen=True)
class PluginRequest:
    """A single plugin to install, as written in --plugins or plugins.txt.

    Requests are not deduplicated; the installer resolves conflicts between
    requests for the same plugin.
    """

    name: str
    version: str = DEFAULT_VERSION
    url: Optional[str] = None

    def __post_init__(self) -> None:
        # An empty url means no url, as it does when parsed
        if self.url == "":
            object.__setattr__(self, "url", None)

    def to_spec(self) -> str:
        """Encode back to ``name:version[:url]``."""
        if self.url:
            return f"{self.name}:{self.version}:{self.url}"
        return f"{self.name}:{self.version}"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "version": self.version, "url": self.url}


@dataclass(frozen=True)
class ResolvedSetting(Generic[T]):
    """Final value of a setting together with where it came from.

    ``source`` names the flag or environment variable that won and is
    None for defaults. Provenance is for diagnostics only.
    """

    name: str
    value: T
    provenance: Provenance
    source: Optional[str] = None

    def describe(self) -> str:
        if self.provenance == Provenance.CLI:
            return self.source or "CLI option"
        if self.provenance == Provenance.ENVIRONMENT:
            return f"{self.source} environment variable"
        return "default"
