"""
Revision resolver — short, stable build identifier.

Pure: works on an already-probed ``VcsState``. Missing metadata is an
expected outcome and falls back deterministically.
"""

from __future__ import annotations

import logging
import string

from flakegen.core.models.revision import SHORT_REV_LENGTH, RevisionDescriptor, VcsState

logger = logging.getLogger(__name__)

_HEX = frozenset(string.hexdigits.lower())


class RevisionError(ValueError):
    """Raised for a malformed revision hash (too short or not hex)."""


def resolve(vcs_state: VcsState, fallback: str) -> str:
    """Return the first 8 characters of the revision, or ``fallback``.

    Raises:
        RevisionError: The hash is shorter than 8 characters or is not
            lowercase hex. Padding it would produce a fake identifier.
    """
    return describe_revision(vcs_state, fallback).effective


def describe_revision(vcs_state: VcsState, fallback: str) -> RevisionDescriptor:
    """Same as ``resolve`` but keeps track of which value was used."""
    if not vcs_state.has_rev:
        logger.debug("No revision from %s, falling back to %r", vcs_state.source, fallback)
        return RevisionDescriptor(resolved=None, fallback=fallback)

    rev = vcs_state.rev or ""
    if len(rev) < SHORT_REV_LENGTH:
        raise RevisionError(
            f"Revision {rev!r} is shorter than {SHORT_REV_LENGTH} characters"
        )
    short = rev[:SHORT_REV_LENGTH]
    if not set(short) <= _HEX:
        raise RevisionError(f"Revision {rev!r} is not a lowercase hex hash")

    return RevisionDescriptor(resolved=short, fallback=fallback)


def version_string(semver: str, revision: str) -> str:
    """``"<semver> (<revision>)"`` — the artifact's full version."""
    return f"{semver} ({revision})"
