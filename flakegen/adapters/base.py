"""
Adapter base — the protocol contract between generation and external tools.

Generation only talks to version control through this protocol, never
directly to a VCS binary. Adapters report what they could observe;
they never raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from flakegen.core.models.revision import VcsState


class RevisionProbe(ABC):
    """Abstract base class for version-control probes.

    To create a new probe:
        1. Subclass RevisionProbe
        2. Implement name, is_available, probe
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'git', 'static')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the underlying tool is available.

        Should be fast and never raise.
        """

    @abstractmethod
    def probe(self, root: Path) -> VcsState:
        """Report the revision state of the tree at ``root``.

        MUST never raise. Missing metadata is returned as
        ``VcsState.untracked()``.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
