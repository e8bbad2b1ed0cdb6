"""Bridge local Claude CLI credentials into a credentials file for GitHub."""

from ccbridge._version import __version__


__all__ = ["__version__"]
