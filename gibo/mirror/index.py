"""
Boilerplate Index — Find boilerplates in the mirror by name.

The mirror is walked depth-first, each directory's entries in byte-wise
name order, skipping git metadata. That order makes "first match" well
defined when the same name exists in several subdirectories, e.g.
Global/Vim.gitignore wins over community/Vim.gitignore.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List

from ..errors import BoilerplateNotFoundError, MirrorPathError
from ..models import BoilerplateEntry
from .store import MirrorStore

logger = logging.getLogger(__name__)

_SKIP_DIRS = {".git"}


def walk_files(root: Path) -> Iterator[Path]:
    """Lazily yield every regular file under root in traversal order."""
    with os.scandir(root) as it:
        children = sorted(it, key=lambda e: e.name)

    for child in children:
        if child.is_dir(follow_symlinks=False):
            if child.name in _SKIP_DIRS:
                continue
            yield from walk_files(Path(child.path))
        elif child.is_file():
            yield Path(child.path)


class BoilerplateIndex:
    """Name lookups and listings over a MirrorStore."""

    def __init__(self, store: MirrorStore):
        self.store = store

    @property
    def suffix(self) -> str:
        return self.store.settings.suffix

    def entries(self) -> Iterator[BoilerplateEntry]:
        """Every boilerplate file in the mirror, in traversal order."""
        suffix = self.suffix
        for path in walk_files(self.store.root):
            filename = path.name
            # A bare ".gitignore" is the mirror's own ignore file, not a boilerplate
            if filename.endswith(suffix) and len(filename) > len(suffix):
                yield BoilerplateEntry(
                    name=filename[: -len(suffix)],
                    path=path,
                    suffix=suffix,
                )

    def resolve(self, name: str) -> Path:
        """
        Path of the first boilerplate whose filename matches name
        case-insensitively (``python`` finds ``Python.gitignore``).

        Raises BoilerplateNotFoundError carrying name exactly as given.
        """
        wanted = (name + self.suffix).lower()
        try:
            for entry in self.entries():
                if entry.lookup_key == wanted:
                    logger.debug(f"Resolved {name!r} to {entry.path}")
                    return entry.path
        except OSError as e:
            raise MirrorPathError(f"cannot read mirror at {self.store.root}: {e}", path=self.store.root)

        raise BoilerplateNotFoundError(name)

    def list_all(self) -> List[str]:
        """All boilerplate names, sorted, duplicates kept."""
        try:
            names = [entry.name for entry in self.entries()]
        except OSError as e:
            raise MirrorPathError(f"cannot read mirror at {self.store.root}: {e}", path=self.store.root)
        names.sort()
        return names
