"""
Manifest model — the artifact's static identity.

Parsed from the ``[package]`` table of the artifact's Cargo.toml.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$"
)


class Manifest(BaseModel):
    """Name, semantic version, and lock file of the packaged artifact."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    description: str = ""
    lock_file: str = "Cargo.lock"

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be empty")
        return value

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        if not SEMVER_RE.match(value):
            raise ValueError(f"version {value!r} is not a MAJOR.MINOR.PATCH semver string")
        return value
