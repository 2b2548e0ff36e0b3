"""
Models — Boilerplate entries, provenance headers and refresh outcomes.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel

ATTRIBUTION = "Generated by gibo (https://github.com/simonwhitaker/gibo)"
COMMENT_MARKER = "###"


class RefreshOutcome(str, Enum):
    """Result of pulling the mirror."""
    UPDATED = "updated"
    ALREADY_CURRENT = "already-current"


class BoilerplateEntry(BaseModel):
    """A boilerplate file found in the mirror."""

    name: str
    path: Path
    suffix: str = ".gitignore"

    @property
    def filename(self) -> str:
        return self.name + self.suffix

    @property
    def lookup_key(self) -> str:
        return self.filename.lower()


class ProvenanceHeader(BaseModel):
    """Where a served boilerplate came from, pinned to a mirror revision."""

    raw_base_url: str
    revision: str
    relative_path: str  # always forward slashes

    @property
    def url(self) -> str:
        return f"{self.raw_base_url}{self.revision}/{self.relative_path}"

    def render(self) -> str:
        """Two comment lines and a blank line, ready to prepend to the file."""
        return (
            f"{COMMENT_MARKER} {ATTRIBUTION}\n"
            f"{COMMENT_MARKER} {self.url}\n"
            "\n"
        )
