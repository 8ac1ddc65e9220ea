"""paasctl - command-line client for an app hosting platform."""

__version__ = "0.1.0"
