"""Version resolution for package metadata and runtime engine version."""

from importlib.metadata import PackageNotFoundError, version

ENGINE_VERSION = "1.0.0"

try:
    __version__ = version("curvecloak")
except PackageNotFoundError:
    __version__ = ENGINE_VERSION


__all__ = ["ENGINE_VERSION", "__version__"]
