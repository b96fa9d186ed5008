"""
Platform model — the closed set of target systems.

A platform identifier names one architecture/OS pair. Only the four
members of ``PlatformId`` are supported; anything else has no outputs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PlatformId(str, Enum):
    """Supported target systems, in output-table order."""

    AARCH64_DARWIN = "aarch64-darwin"
    AARCH64_LINUX = "aarch64-linux"
    X86_64_DARWIN = "x86_64-darwin"
    X86_64_LINUX = "x86_64-linux"

    @property
    def arch(self) -> str:
        return self.value.split("-", 1)[0]

    @property
    def family(self) -> str:
        """OS family: ``darwin`` or ``linux``."""
        return self.value.split("-", 1)[1]

    @property
    def is_darwin(self) -> bool:
        return self.family == "darwin"

    @classmethod
    def parse(cls, value: str) -> PlatformId | None:
        """Look up a platform by its identifier, or None if unsupported."""
        try:
            return cls(value)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class PlatformCapabilities(BaseModel):
    """Per-platform capability table entry.

    Holds the extra inputs a platform contributes to each descriptor.
    Built once per evaluation and injected into the builders.
    """

    model_config = ConfigDict(frozen=True)

    system: PlatformId
    package_inputs: tuple[str, ...] = Field(default_factory=tuple)
    dev_inputs: tuple[str, ...] = Field(default_factory=tuple)
