"""Version information for the restrictedstr package."""

from importlib import metadata as _md

try:
    __version__ = _md.version("restrictedstr")
except _md.PackageNotFoundError:
    __version__ = "unknown"
