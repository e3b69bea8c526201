"""Compiled-in defaults and environment variable names.

Every resolvable setting has a default here, so resolution can never end
without a value.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Environment variables consulted when the matching CLI option is not given
JENKINS_UC_ENV = "JENKINS_UC"
JENKINS_UC_EXPERIMENTAL_ENV = "JENKINS_UC_EXPERIMENTAL"
JENKINS_INCREMENTALS_REPO_MIRROR_ENV = "JENKINS_INCREMENTALS_REPO_MIRROR"

DEFAULT_UPDATE_CENTER_LOCATION = "https://updates.jenkins.io"
DEFAULT_EXPERIMENTAL_UPDATE_CENTER_LOCATION = "https://updates.jenkins.io/experimental"
DEFAULT_INCREMENTALS_REPO_MIRROR_LOCATION = "https://repo.jenkins-ci.org/incrementals"

DEFAULT_PLUGIN_TXT = Path("./plugins.txt")

_POSIX_PLUGIN_DIR = Path("/usr/share/jenkins/ref/plugins")
_POSIX_WAR = Path("/usr/share/jenkins/jenkins.war")
_WINDOWS_PLUGIN_DIR = Path("C:/ProgramData/Jenkins/Reference/Plugins")
_WINDOWS_WAR = Path("C:/ProgramData/Jenkins/jenkins.war")


def default_plugin_dir(platform: str = sys.platform) -> Path:
    """Directory plugins are installed into when --plugin-download-directory is not given."""
    if platform == "win32":
        return _WINDOWS_PLUGIN_DIR
    return _POSIX_PLUGIN_DIR


def default_war(platform: str = sys.platform) -> Path:
    """Jenkins WAR used when --war is not given."""
    if platform == "win32":
        return _WINDOWS_WAR
    return _POSIX_WAR
