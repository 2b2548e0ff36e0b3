"""
Git Sync — Clone, inspect and pull the boilerplate mirror.

Thin wrappers around the git executable. Each helper raises a typed
GiboError on failure instead of returning status codes, so callers
can let errors bubble up to the CLI.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from ..errors import GiboError, MirrorEnvironmentError, NetworkError, RepositoryError

logger = logging.getLogger(__name__)

# Local metadata lookups only; clone and pull run without a timeout.
LOCAL_TIMEOUT = 10

# Substrings of git's stderr that mean the remote could not be reached.
_NETWORK_MARKERS = (
    "could not resolve host",
    "unable to access",
    "failed to connect",
    "connection refused",
    "connection timed out",
    "operation timed out",
    "network is unreachable",
    "the remote end hung up",
    "early eof",
    "ssl",
)

_ALREADY_EXISTS_MARKER = "already exists and is not an empty directory"


def _git(*args: str, cwd: Path | None = None, timeout: int | None = None) -> subprocess.CompletedProcess:
    """Run a git command, never prompting for credentials."""
    cmd = ["git"] + list(args)
    # stderr is matched against English messages below
    env = dict(os.environ, GIT_TERMINAL_PROMPT="0", LC_ALL="C", LANGUAGE="C")
    logger.debug(f"[mirror-git] {' '.join(cmd)}")
    try:
        return subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            timeout=timeout,
            env=env,
        )
    except FileNotFoundError:
        raise MirrorEnvironmentError(
            "git executable not found; install git and make sure it is on your PATH"
        )
    except subprocess.TimeoutExpired:
        raise RepositoryError(f"git {args[0] if args else ''} timed out after {timeout}s")


def classify_failure(result: subprocess.CompletedProcess, action: str, path: Path | None = None) -> GiboError:
    """Turn a failed git invocation into NetworkError or RepositoryError."""
    detail = result.stderr.strip() or result.stdout.strip() or f"exit status {result.returncode}"
    message = f"{action} failed: {detail}"
    if any(marker in detail.lower() for marker in _NETWORK_MARKERS):
        return NetworkError(message, path=path)
    return RepositoryError(message, path=path)


def require_repository(root: Path) -> Path:
    """Return root/.git, or raise if root is not a git working copy."""
    git_dir = root / ".git"
    if not git_dir.exists():
        raise RepositoryError(f"{root} is not a git repository", path=root)
    return git_dir


def clone(remote_url: str, dest: Path, depth: int = 1) -> bool:
    """
    Shallow-clone remote_url into dest.

    Returns False if git reports the destination is already populated
    (another process got there first), True after a fresh clone.
    """
    logger.info(f"[mirror-git] Cloning {remote_url} to {dest}")
    result = _git("clone", "--depth", str(depth), remote_url, str(dest))

    if result.returncode == 0:
        return True

    if _ALREADY_EXISTS_MARKER in result.stderr:
        logger.warning(f"[mirror-git] {dest} already populated, skipping clone")
        return False

    raise classify_failure(result, "git clone", path=dest)


def head_revision(root: Path) -> str:
    """Full commit id of HEAD in the mirror at root."""
    git_dir = require_repository(root)
    result = _git("--git-dir", str(git_dir), "rev-parse", "HEAD", timeout=LOCAL_TIMEOUT)
    if result.returncode != 0:
        raise RepositoryError(
            f"cannot read HEAD of {root}: {result.stderr.strip()}", path=root
        )
    return result.stdout.strip()


def pull(root: Path) -> None:
    """Fast-forward the mirror's current branch from origin."""
    require_repository(root)
    logger.info(f"[mirror-git] Pulling origin into {root}")
    result = _git("pull", "--ff-only", cwd=root)
    if result.returncode != 0:
        raise classify_failure(result, "git pull", path=root)
