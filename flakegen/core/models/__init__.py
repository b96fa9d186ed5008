"""
Domain models — Pydantic types for descriptor generation.

All models are re-exported here for convenient access:

    from flakegen.core.models import PackageDescriptor, PlatformId, ToolchainBundle
"""

from flakegen.core.models.descriptor import (
    DevEnvironmentDescriptor,
    FormatterBinding,
    LockRef,
    OverlayBinding,
    OverlayConflictError,
    PackageDescriptor,
    SourceRef,
)
from flakegen.core.models.manifest import Manifest
from flakegen.core.models.platform import PlatformCapabilities, PlatformId
from flakegen.core.models.revision import RevisionDescriptor, VcsState
from flakegen.core.models.settings import GeneratorSettings
from flakegen.core.models.toolchain import ToolchainBundle

__all__ = [
    # descriptor.py
    "DevEnvironmentDescriptor",
    "FormatterBinding",
    # settings.py
    "GeneratorSettings",
    "LockRef",
    # manifest.py
    "Manifest",
    "OverlayBinding",
    "OverlayConflictError",
    "PackageDescriptor",
    # platform.py
    "PlatformCapabilities",
    "PlatformId",
    # revision.py
    "RevisionDescriptor",
    "SourceRef",
    # toolchain.py
    "ToolchainBundle",
    "VcsState",
]
