"""Procedural spiral galaxy point clouds with an interactive PyVista viewer."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("galaxygenerator")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
