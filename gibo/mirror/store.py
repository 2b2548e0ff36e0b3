"""
Mirror Store — The on-disk clone of the boilerplate repository.

Created lazily by the first operation that needs it, refreshed only when
asked. No locking: two gibo processes cloning at once rely on git itself.

## Usage

    from gibo.mirror.config import MirrorSettings
    from gibo.mirror.store import MirrorStore

    store = MirrorStore(MirrorSettings.from_env())
    store.ensure_exists()
    print(store.current_revision())
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import GiboError, MirrorPathError
from ..models import RefreshOutcome
from . import git_sync
from .config import MirrorSettings

logger = logging.getLogger(__name__)


class MirrorStore:
    """Owns the mirror directory: clone-if-absent, revision lookup, pull."""

    def __init__(self, settings: MirrorSettings):
        self.settings = settings

    @property
    def root(self) -> Path:
        return self.settings.root

    def ensure_exists(self) -> None:
        """Clone the mirror if it is not there yet. Safe to call repeatedly."""
        root = self.root

        if root.exists():
            if not root.is_dir():
                raise MirrorPathError(f"{root} exists but is not a directory", path=root)
            return

        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MirrorPathError(f"cannot create {root}: {e}", path=root)

        try:
            git_sync.clone(self.settings.remote_url, root, depth=self.settings.clone_depth)
        except GiboError:
            # Leave no empty directory behind, or the next run would skip the clone
            if root.is_dir() and not any(root.iterdir()):
                root.rmdir()
            raise

        logger.info(f"Mirror ready at {root}")

    def current_revision(self) -> str:
        """Commit id the mirror is currently checked out at."""
        return git_sync.head_revision(self.root)

    def refresh(self) -> RefreshOutcome:
        """Pull the latest boilerplates from origin."""
        self.ensure_exists()

        before = git_sync.head_revision(self.root)
        git_sync.pull(self.root)
        after = git_sync.head_revision(self.root)

        if before == after:
            logger.info(f"Mirror already at {after[:12]}")
            return RefreshOutcome.ALREADY_CURRENT

        logger.info(f"Mirror updated {before[:12]} → {after[:12]}")
        return RefreshOutcome.UPDATED
