"""
Mirror Configuration — Where the boilerplate mirror lives and what it tracks.

The mirror is a shallow clone of github/gitignore kept under the user's
cache directory:

    Linux:   ~/.cache/gibo           ($XDG_CACHE_HOME honoured)
    macOS:   ~/Library/Caches/gibo
    Windows: %LOCALAPPDATA%\\gibo

Set GIBO_BOILERPLATES to keep the mirror somewhere else.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_cache_dir

from ..errors import MirrorEnvironmentError

logger = logging.getLogger(__name__)

REMOTE_URL = "https://github.com/github/gitignore.git"
RAW_BASE_URL = "https://raw.github.com/github/gitignore/"
BOILERPLATE_SUFFIX = ".gitignore"
MIRROR_DIRNAME = "gibo"
ISSUES_URL = "https://github.com/simonwhitaker/gibo/issues"

ENV_BOILERPLATES = "GIBO_BOILERPLATES"


def resolve_mirror_path() -> Path:
    """
    Return <user cache dir>/gibo.

    Raises MirrorEnvironmentError when the platform has no usable cache
    directory. Callers must not try to carry on without one.
    """
    try:
        cache_dir = user_cache_dir()
    except (KeyError, OSError, RuntimeError) as e:
        logger.debug(f"user_cache_dir() failed: {e}")
        cache_dir = ""

    # expanduser() leaves "~" in place when no home directory can be found
    if not cache_dir or not os.path.isabs(cache_dir):
        raise MirrorEnvironmentError(
            "gibo can't determine your user cache directory. "
            f"Please file an issue at {ISSUES_URL}"
        )

    return Path(cache_dir) / MIRROR_DIRNAME


@dataclass(frozen=True)
class MirrorSettings:
    """Everything the store, index and server need to know about the mirror."""

    root: Path
    remote_url: str = REMOTE_URL
    raw_base_url: str = RAW_BASE_URL
    suffix: str = BOILERPLATE_SUFFIX
    clone_depth: int = 1

    @classmethod
    def from_env(cls) -> "MirrorSettings":
        """Build settings for this process, honouring GIBO_BOILERPLATES."""
        override = os.environ.get(ENV_BOILERPLATES, "").strip()
        if override:
            root = Path(override).expanduser()
            logger.debug(f"Mirror root from {ENV_BOILERPLATES}: {root}")
        else:
            root = resolve_mirror_path()
            logger.debug(f"Mirror root: {root}")
        return cls(root=root)
