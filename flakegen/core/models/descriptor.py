"""
Descriptor models — inert records consumed by the external build executor.

Nothing here builds anything. Each descriptor is a fully-resolved,
immutable description produced in a single evaluation pass.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from flakegen.core.models.platform import PlatformId
from flakegen.core.models.revision import RevisionDescriptor
from flakegen.core.models.toolchain import ToolchainBundle


def _count_bundles(items: tuple) -> int:
    return sum(1 for item in items if isinstance(item, ToolchainBundle))


def _ref_to_json(item: str | ToolchainBundle) -> Any:
    return item.to_dict() if isinstance(item, ToolchainBundle) else item


def _read_only(env: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(env))


class SourceRef(BaseModel):
    """Reference to the artifact's source tree."""

    model_config = ConfigDict(frozen=True)

    path: str = "."
    rev: str | None = None


class LockRef(BaseModel):
    """Reference to the pinned-dependency lock file."""

    model_config = ConfigDict(frozen=True)

    lock_file: str
    allow_builtin_fetch_git: bool = True


class PackageDescriptor(BaseModel):
    """Build descriptor for one platform.

    ``version`` is always ``"<semver> (<revision>)"``.
    """

    model_config = ConfigDict(frozen=True)

    system: PlatformId
    builder: str
    name: str
    version: str
    source_ref: SourceRef
    lock_ref: LockRef
    native_build_tools: tuple[str, ...] = Field(default_factory=tuple)
    build_inputs: tuple[str, ...] = Field(default_factory=tuple)
    propagated_runtime_deps: tuple[str | ToolchainBundle, ...] = Field(default_factory=tuple)
    environment: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    revision: RevisionDescriptor

    @field_validator("environment")
    @classmethod
    def _freeze_environment(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return _read_only(value)

    @model_validator(mode="after")
    def _one_bundle(self) -> PackageDescriptor:
        if _count_bundles(self.propagated_runtime_deps) != 1:
            raise ValueError("propagated_runtime_deps must contain exactly one toolchain bundle")
        return self

    @property
    def bundle(self) -> ToolchainBundle:
        return next(d for d in self.propagated_runtime_deps if isinstance(d, ToolchainBundle))

    def to_dict(self) -> dict:
        return {
            "system": self.system.value,
            "builder": self.builder,
            "name": self.name,
            "version": self.version,
            "src": self.source_ref.model_dump(),
            "cargoLock": self.lock_ref.model_dump(),
            "nativeBuildInputs": list(self.native_build_tools),
            "buildInputs": list(self.build_inputs),
            "propagatedBuildInputs": [_ref_to_json(d) for d in self.propagated_runtime_deps],
            "env": dict(self.environment),
        }


class DevEnvironmentDescriptor(BaseModel):
    """Interactive development environment for one platform."""

    model_config = ConfigDict(frozen=True)

    system: PlatformId
    tools: tuple[str | ToolchainBundle, ...] = Field(default_factory=tuple)
    build_inputs: tuple[str, ...] = Field(default_factory=tuple)
    environment: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("environment")
    @classmethod
    def _freeze_environment(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return _read_only(value)

    @model_validator(mode="after")
    def _one_bundle(self) -> DevEnvironmentDescriptor:
        if _count_bundles(self.tools) != 1:
            raise ValueError("tools must contain exactly one toolchain bundle")
        return self

    @property
    def bundle(self) -> ToolchainBundle:
        return next(t for t in self.tools if isinstance(t, ToolchainBundle))

    def to_dict(self) -> dict:
        return {
            "system": self.system.value,
            "packages": [_ref_to_json(t) for t in self.tools],
            "buildInputs": list(self.build_inputs),
            "env": dict(self.environment),
        }


class FormatterBinding(BaseModel):
    """Code formatter exposed for one platform."""

    model_config = ConfigDict(frozen=True)

    system: PlatformId
    formatter: str


class OverlayConflictError(ValueError):
    """Raised when a collection already has an entry under the exposed name."""


class OverlayBinding(BaseModel):
    """A package descriptor inserted into a collection under a private name."""

    model_config = ConfigDict(frozen=True)

    exposed_name: str
    descriptor: PackageDescriptor

    def apply(self, base: Mapping[str, Any]) -> dict[str, Any]:
        """Return a new collection: ``base`` plus ``exposed_name``.

        ``base`` is never modified, and no existing entry is replaced.

        Raises:
            OverlayConflictError: ``base`` already has ``exposed_name``.
        """
        if self.exposed_name in base:
            raise OverlayConflictError(
                f"collection already has an entry named {self.exposed_name!r}"
            )
        extended = dict(base)
        extended[self.exposed_name] = self.descriptor
        return extended
