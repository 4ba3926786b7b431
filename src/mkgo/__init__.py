"""mkgo: scaffolding tool for new Go main modules."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mkgo")
except PackageNotFoundError:
    __version__ = "0.0.0"
