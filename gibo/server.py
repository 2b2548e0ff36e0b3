"""
Boilerplate Server — The three operations the CLI calls.

    fetch_and_render(name, out)  print one boilerplate with a provenance header
    list_names()                 every available name, never raises
    refresh_mirror()             pull the mirror, describe what happened

Each operation clones the mirror first if it is missing.

## Usage

    import sys
    from gibo.mirror.config import MirrorSettings
    from gibo.server import BoilerplateServer

    server = BoilerplateServer(MirrorSettings.from_env())
    server.fetch_and_render("python", sys.stdout.buffer)
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import BinaryIO, List, Optional

from .errors import GiboError
from .mirror.config import MirrorSettings
from .mirror.index import BoilerplateIndex
from .mirror.store import MirrorStore
from .models import ProvenanceHeader, RefreshOutcome

logger = logging.getLogger(__name__)

REFRESH_MESSAGES = {
    RefreshOutcome.UPDATED: "Updated",
    RefreshOutcome.ALREADY_CURRENT: "Already up to date",
}


class BoilerplateServer:
    """Composes MirrorStore and BoilerplateIndex for the CLI."""

    def __init__(
        self,
        settings: MirrorSettings,
        store: Optional[MirrorStore] = None,
        index: Optional[BoilerplateIndex] = None,
    ):
        self.settings = settings
        self.store = store or MirrorStore(settings)
        self.index = index or BoilerplateIndex(self.store)

    @property
    def mirror_root(self) -> Path:
        return self.settings.root

    def provenance_for(self, path: Path) -> ProvenanceHeader:
        """Header pointing at the raw file on GitHub at the mirror's revision."""
        relative = path.relative_to(self.settings.root).as_posix()
        return ProvenanceHeader(
            raw_base_url=self.settings.raw_base_url,
            revision=self.store.current_revision(),
            relative_path=relative,
        )

    def fetch_and_render(self, name: str, out: BinaryIO) -> ProvenanceHeader:
        """Write the header and then the boilerplate's bytes, untouched, to out."""
        self.store.ensure_exists()

        path = self.index.resolve(name)
        header = self.provenance_for(path)

        out.write(header.render().encode("utf-8"))
        with path.open("rb") as f:
            shutil.copyfileobj(f, out)
        out.flush()

        return header

    def list_names(self) -> List[str]:
        """Sorted boilerplate names, or [] if anything goes wrong."""
        try:
            self.store.ensure_exists()
            return self.index.list_all()
        except (GiboError, OSError) as e:
            logger.debug(f"Listing boilerplates failed: {e}")
            return []

    def refresh_mirror(self) -> str:
        outcome = self.store.refresh()
        return REFRESH_MESSAGES[outcome]
