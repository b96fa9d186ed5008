"""
Revision models — version-control state and the derived build identifier.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

SHORT_REV_LENGTH = 8

_SHORT_REV_RE = re.compile(r"^[0-9a-f]{8}$")


class VcsState(BaseModel):
    """What the version-control system reported for the source tree.

    ``rev`` is the full commit hash of a clean checkout. It is None when
    the tree is untracked, dirty, or git could not be queried.
    """

    model_config = ConfigDict(frozen=True)

    rev: str | None = None
    dirty: bool = False
    source: str = "none"

    @classmethod
    def untracked(cls, source: str = "none", dirty: bool = False) -> VcsState:
        return cls(rev=None, dirty=dirty, source=source)

    @property
    def has_rev(self) -> bool:
        return bool(self.rev)


class RevisionDescriptor(BaseModel):
    """Resolved short revision or caller-supplied fallback.

    Exactly one of the two is effective: ``resolved`` when present,
    ``fallback`` otherwise.
    """

    model_config = ConfigDict(frozen=True)

    resolved: str | None = None
    fallback: str

    @field_validator("resolved")
    @classmethod
    def _check_short_rev(cls, value: str | None) -> str | None:
        if value is not None and not _SHORT_REV_RE.match(value):
            raise ValueError(f"resolved revision must be 8 lowercase hex characters, got {value!r}")
        return value

    @field_validator("fallback")
    @classmethod
    def _check_fallback(cls, value: str) -> str:
        if not value:
            raise ValueError("fallback revision must not be empty")
        return value

    @property
    def effective(self) -> str:
        return self.resolved if self.resolved is not None else self.fallback

    @property
    def is_fallback(self) -> bool:
        return self.resolved is None
