"""Resolve paths, find files by glob pattern and load them as modules, all relative to a root directory."""

from pathrooter.errors import FileNotFound, InvalidArgument, ModuleLoadError, RooterError
from pathrooter.rooter import Rooter, create

__version__ = "1.0.0"

__all__ = [
    "FileNotFound",
    "InvalidArgument",
    "ModuleLoadError",
    "Rooter",
    "RooterError",
    "__version__",
    "create",
]
