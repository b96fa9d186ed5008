"""
Toolchain bundle model — a base scheme combined with add-on modules.

The bundle is reused verbatim by the package descriptor and the
development environment, so both see the same capability set.
"""

from __future__ import annotations

import hashlib

from pydantic import BaseModel, ConfigDict, Field


class ToolchainBundle(BaseModel):
    """A named, composable capability set.

    Attributes:
        combiner:    Collection function that merges the parts
                     (e.g. ``texlive.combine``).
        base_scheme: Minimal base toolchain scheme.
        modules:     Add-on module names, order preserved.
    """

    model_config = ConfigDict(frozen=True)

    combiner: str
    base_scheme: str
    modules: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def capabilities(self) -> tuple[str, ...]:
        """Ordered union of the base scheme and the add-on modules."""
        seen: dict[str, None] = {self.base_scheme: None}
        for name in self.modules:
            seen.setdefault(name, None)
        return tuple(seen)

    @property
    def identity(self) -> str:
        """Stable name derived from the ordered inputs."""
        digest = hashlib.sha256(
            "\0".join([self.combiner, self.base_scheme, *self.modules]).encode("utf-8")
        ).hexdigest()[:12]
        return f"{self.combiner.rsplit('.', 1)[0]}-{self.base_scheme}-{digest}"

    def same_capabilities(self, other: ToolchainBundle) -> bool:
        """Whether two bundles expose the same effective capability set."""
        return set(self.capabilities) == set(other.capabilities)

    def to_dict(self) -> dict:
        return {
            "identity": self.identity,
            "combiner": self.combiner,
            "base_scheme": self.base_scheme,
            "modules": list(self.modules),
        }
