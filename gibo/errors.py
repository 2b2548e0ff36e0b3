"""
Errors — Typed failures raised by the mirror and lookup layers.

Everything derives from GiboError so the CLI can report any of them
uniformly. Only BoilerplateServer.list_names() swallows them.

## Usage

    from gibo.errors import BoilerplateNotFoundError, GiboError

    try:
        server.fetch_and_render("python", out)
    except BoilerplateNotFoundError as e:
        print(e.name)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class GiboError(Exception):
    """Base class for all gibo failures."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(message)


class MirrorEnvironmentError(GiboError):
    """The host cannot support a mirror at all (no cache dir, no git)."""
    pass


class MirrorPathError(GiboError):
    """Local filesystem problem with the mirror directory."""
    pass


class NetworkError(GiboError):
    """Clone or pull could not reach the remote."""
    pass


class RepositoryError(GiboError):
    """The mirror is not a usable git repository, or git refused an operation."""
    pass


class BoilerplateNotFoundError(GiboError):
    """No boilerplate in the mirror matches the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name}: boilerplate not found")
