"""
Package descriptor builder — the build recipe handed to the executor.

Uses the manifest for identity, the shared toolchain bundle for
propagated runtime dependencies, and the injected capability lookup
for platform-conditional build inputs.
"""

from __future__ import annotations

import logging

from flakegen.core.models.descriptor import LockRef, PackageDescriptor, SourceRef
from flakegen.core.models.manifest import Manifest
from flakegen.core.models.platform import PlatformId
from flakegen.core.models.revision import RevisionDescriptor
from flakegen.core.models.settings import GeneratorSettings
from flakegen.core.models.toolchain import ToolchainBundle
from flakegen.core.services.generators.platforms import CapabilityLookup
from flakegen.core.services.generators.revision import version_string

logger = logging.getLogger(__name__)


class PackageDescriptorBuilder:
    """Build ``PackageDescriptor``s for a single artifact.

    Args:
        settings: Generator settings (package section, source, lock).
        capabilities: ``PlatformId -> PlatformCapabilities`` lookup.
    """

    def __init__(self, settings: GeneratorSettings, capabilities: CapabilityLookup):
        self._settings = settings
        self._capabilities = capabilities

    def build(
        self,
        platform: PlatformId,
        manifest: Manifest,
        revision: RevisionDescriptor,
        bundle: ToolchainBundle,
    ) -> PackageDescriptor:
        pkg = self._settings.package
        caps = self._capabilities(platform)

        version = version_string(manifest.version, revision.effective)
        env_revision = revision.resolved or self._settings.revision.effective_version_fallback

        descriptor = PackageDescriptor(
            system=platform,
            builder=pkg.builder,
            name=manifest.name,
            version=version,
            source_ref=SourceRef(path=self._settings.source, rev=revision.resolved),
            lock_ref=LockRef(
                lock_file=manifest.lock_file,
                allow_builtin_fetch_git=self._settings.allow_builtin_fetch_git,
            ),
            native_build_tools=tuple(pkg.native_build_tools),
            build_inputs=caps.package_inputs,
            propagated_runtime_deps=(*pkg.runtime_tools, bundle),
            environment={
                pkg.artifacts_env: pkg.artifacts_dir,
                pkg.version_env: version_string(manifest.version, env_revision),
            },
            revision=revision,
        )
        logger.debug("Built package %s %s for %s", descriptor.name, descriptor.version, platform)
        return descriptor
