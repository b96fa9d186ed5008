"""
Static probe — fixed revision state for tests and explicit overrides.

Used when the caller already knows the revision (``--rev``) or wants
evaluation to ignore the working tree entirely.
"""

from __future__ import annotations

from pathlib import Path

from flakegen.adapters.base import RevisionProbe
from flakegen.core.models.revision import VcsState


class StaticRevisionProbe(RevisionProbe):
    """Probe that always reports the same state.

    Records every root it was asked about, for assertions in tests.
    """

    def __init__(
        self,
        rev: str | None = None,
        dirty: bool = False,
        available: bool = True,
    ):
        if rev:
            self._state = VcsState(rev=rev, dirty=dirty, source=self.name)
        else:
            self._state = VcsState.untracked(source=self.name, dirty=dirty)
        self._available = available
        self._call_log: list[Path] = []

    @property
    def name(self) -> str:
        return "static"

    @property
    def call_log(self) -> list[Path]:
        """All roots this probe has been asked about."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def is_available(self) -> bool:
        return self._available

    def probe(self, root: Path) -> VcsState:
        self._call_log.append(root)
        return self._state
