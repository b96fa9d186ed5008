"""
Git adapter — revision metadata for the source tree.

Uses the git CLI — never raw repository parsing. Only a clean checkout
yields a revision; a dirty tree is reported without one, the same way
an untracked directory is.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from flakegen.adapters.base import RevisionProbe
from flakegen.core.models.revision import VcsState

logger = logging.getLogger(__name__)


class GitRevisionProbe(RevisionProbe):
    """Read HEAD and dirty state with git.

    Every failure mode (no git binary, not a repository, timeout)
    degrades to ``VcsState.untracked()``.
    """

    def __init__(self, timeout: int = 10):
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "git"

    def is_available(self) -> bool:
        return shutil.which("git") is not None

    def probe(self, root: Path) -> VcsState:
        if not self.is_available():
            logger.debug("git not found on PATH, no revision for %s", root)
            return VcsState.untracked(source=self.name)

        try:
            rev = self._git(["rev-parse", "HEAD"], root).strip()
            porcelain = self._git(["status", "--porcelain"], root)
        except (OSError, RuntimeError, subprocess.TimeoutExpired) as e:
            logger.debug("No git revision for %s: %s", root, e)
            return VcsState.untracked(source=self.name)

        if porcelain.strip():
            logger.info("Working tree at %s is dirty, using fallback revision", root)
            return VcsState.untracked(source=self.name, dirty=True)

        logger.debug("HEAD of %s is %s", root, rev)
        return VcsState(rev=rev, dirty=False, source=self.name)

    # ── Helpers ─────────────────────────────────────────────────

    def _git(self, args: list[str], cwd: Path) -> str:
        """Run a git command and return stdout."""
        result = subprocess.run(
            ["git", *args],
            cwd=str(cwd),
            capture_output=True,
            text=True,
            timeout=self._timeout,
        )
        if result.returncode != 0:
            raise RuntimeError(result.stderr.strip() or f"git {args[0]} failed")
        return result.stdout
