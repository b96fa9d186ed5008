"""Adapters — bindings for external version-control tools.

Public re-exports for convenient access.
"""

from flakegen.adapters.base import RevisionProbe
from flakegen.adapters.mock import StaticRevisionProbe
from flakegen.adapters.vcs.git import GitRevisionProbe

__all__ = [
    "GitRevisionProbe",
    "RevisionProbe",
    "StaticRevisionProbe",
]
