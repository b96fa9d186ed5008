"""
Registry — the final table of outputs.

Composes the platform matrix with both descriptor builders, the
formatter binding, and the overlay. Everything is derived from
(settings, manifest, VCS state); nothing is cached across evaluations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from flakegen.core.models.descriptor import (
    DevEnvironmentDescriptor,
    FormatterBinding,
    PackageDescriptor,
)
from flakegen.core.models.manifest import Manifest
from flakegen.core.models.platform import PlatformId
from flakegen.core.models.revision import RevisionDescriptor, VcsState
from flakegen.core.models.settings import GeneratorSettings
from flakegen.core.services.generators.devshell import DevEnvironmentBuilder
from flakegen.core.services.generators.overlay import PackageOverlay
from flakegen.core.services.generators.package import PackageDescriptorBuilder
from flakegen.core.services.generators.platforms import (
    SUPPORTED_SYSTEMS,
    capability_lookup,
    capability_table,
    each_system,
)
from flakegen.core.services.generators.revision import describe_revision
from flakegen.core.services.generators.toolchain import compose_from_settings

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "default"


@dataclass
class OutputTable:
    """Platform-keyed outputs plus the single overlay."""

    packages: dict[PlatformId, dict[str, PackageDescriptor]] = field(default_factory=dict)
    dev_shells: dict[PlatformId, dict[str, DevEnvironmentDescriptor]] = field(default_factory=dict)
    formatter: dict[PlatformId, FormatterBinding] = field(default_factory=dict)
    overlays: dict[str, PackageOverlay] = field(default_factory=dict, compare=False)

    @property
    def systems(self) -> list[PlatformId]:
        return list(self.packages)

    def default_package(self, system: PlatformId) -> PackageDescriptor | None:
        return self.packages.get(system, {}).get(DEFAULT_OUTPUT)

    def default_dev_shell(self, system: PlatformId) -> DevEnvironmentDescriptor | None:
        return self.dev_shells.get(system, {}).get(DEFAULT_OUTPUT)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "devShells": {
                s.value: {k: d.to_dict() for k, d in shells.items()}
                for s, shells in self.dev_shells.items()
            },
            "formatter": {s.value: b.formatter for s, b in self.formatter.items()},
            "overlays": {k: {"name": o.exposed_name} for k, o in self.overlays.items()},
            "packages": {
                s.value: {k: d.to_dict() for k, d in pkgs.items()}
                for s, pkgs in self.packages.items()
            },
        }


class Registry:
    """Evaluate every output for one artifact.

    Args:
        settings: Generator settings.
        manifest: Artifact manifest (already validated).
        vcs_state: Probed version-control state.
    """

    def __init__(self, settings: GeneratorSettings, manifest: Manifest, vcs_state: VcsState):
        self._settings = settings
        self._manifest = manifest
        self.revision: RevisionDescriptor = describe_revision(vcs_state, settings.revision.fallback)

        lookup = capability_lookup(capability_table(settings))
        self._packages = PackageDescriptorBuilder(settings, lookup)
        self._dev_shells = DevEnvironmentBuilder(settings, lookup)

    def package_for(self, system: PlatformId) -> PackageDescriptor:
        bundle = compose_from_settings(self._settings.toolchain)
        return self._packages.build(system, self._manifest, self.revision, bundle)

    def dev_shell_for(self, system: PlatformId) -> DevEnvironmentDescriptor:
        bundle = compose_from_settings(self._settings.toolchain)
        return self._dev_shells.build(system, bundle)

    def formatter_for(self, system: PlatformId) -> FormatterBinding:
        return FormatterBinding(system=system, formatter=self._settings.formatter)

    def overlay(self) -> PackageOverlay:
        return PackageOverlay(self._settings.overlay_name, self.package_for)

    def outputs(
        self,
        systems: Iterable[PlatformId | str] = SUPPORTED_SYSTEMS,
        parallel: bool = False,
    ) -> OutputTable:
        """Build the full output table."""
        systems = list(systems)
        table = OutputTable(
            packages=each_system(lambda s: {DEFAULT_OUTPUT: self.package_for(s)}, systems, parallel),
            dev_shells=each_system(lambda s: {DEFAULT_OUTPUT: self.dev_shell_for(s)}, systems, parallel),
            formatter=each_system(self.formatter_for, systems, parallel),
            overlays={DEFAULT_OUTPUT: self.overlay()},
        )
        logger.info(
            "Generated outputs for %s %s on %d platforms",
            self._manifest.name,
            self.revision.effective,
            len(table.packages),
        )
        return table
