"""
Mirror — Local clone of the github/gitignore boilerplate collection.

This package locates the mirror, keeps it cloned and up to date,
and finds boilerplates inside it.
"""

from .config import MirrorSettings, resolve_mirror_path
from .index import BoilerplateIndex
from .store import MirrorStore

__all__ = [
    "MirrorSettings",
    "MirrorStore",
    "BoilerplateIndex",
    "resolve_mirror_path",
]
