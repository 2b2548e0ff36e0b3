"""
Shared fixtures for mirror, index and server tests.

Provides settings pointing at a temporary mirror root, a pre-populated
fake mirror (no git involved), and a real local git remote for the
tests that exercise clone and pull end to end.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from gibo.mirror.config import MirrorSettings

REVISION = "0123456789abcdef0123456789abcdef01234567"

BOILERPLATES = {
    "C++.gitignore": "*.o\n*.obj\n",
    "Go.gitignore": "*.exe\n",
    "Python.gitignore": "__pycache__/\n*.py[cod]\n",
    "Global/macOS.gitignore": ".DS_Store\n",
    "Global/Vim.gitignore": "*.swp\n",
    "community/Vim.gitignore": "[._]*.sw[a-p]\n",
    "community/Golang/Hugo.gitignore": "/public/\n",
}


def write_tree(root: Path, files: dict) -> None:
    """Helper to create files (with parent dirs) under root."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def run_git(cwd: Path, *args: str) -> str:
    """Helper to run git in tests, failing loudly."""
    result = subprocess.run(
        ["git", "-c", "user.name=gibo", "-c", "user.email=gibo@example.com",
         "-c", "commit.gpgsign=false", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def settings(tmp_path: Path) -> MirrorSettings:
    """Settings whose mirror root does not exist yet."""
    return MirrorSettings(root=tmp_path / "cache" / "gibo")


@pytest.fixture
def mirror(settings: MirrorSettings) -> Path:
    """A populated mirror directory that looks like a clone."""
    root = settings.root
    write_tree(root, BOILERPLATES)
    write_tree(root, {
        "README.md": "# gitignore\n",
        ".gitignore": "*.swp\n",
        ".git/HEAD": "ref: refs/heads/main\n",
        ".git/info/Secret.gitignore": "not a boilerplate\n",
    })
    return root


@pytest.fixture
def remote_repo(tmp_path: Path) -> Path:
    """A local git repository standing in for github/gitignore."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    repo = tmp_path / "remote"
    repo.mkdir()
    run_git(repo, "init", "-q")
    write_tree(repo, {
        "C++.gitignore": "*.o\n",
        "Python.gitignore": "__pycache__/\n",
        "Global/macOS.gitignore": ".DS_Store\n",
    })
    run_git(repo, "add", ".")
    run_git(repo, "commit", "-q", "-m", "Initial boilerplates")
    return repo


@pytest.fixture
def remote_settings(tmp_path: Path, remote_repo: Path) -> MirrorSettings:
    """Settings cloning from the local remote over file://."""
    return MirrorSettings(root=tmp_path / "cache" / "gibo", remote_url=remote_repo.as_uri())
