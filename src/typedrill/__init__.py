"""typedrill package."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

try:
    __version__ = version("typedrill")
except PackageNotFoundError:
    __version__ = "0.1.0"  # editable install or not installed
