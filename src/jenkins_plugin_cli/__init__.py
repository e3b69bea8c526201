"""jenkins-plugin-cli - configuration front end for the Jenkins plugin manager."""

__version__ = "0.1.0"
