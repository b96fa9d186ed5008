"""
Development environment builder — the interactive shell descriptor.
"""

from __future__ import annotations

import logging

from flakegen.core.models.descriptor import DevEnvironmentDescriptor
from flakegen.core.models.platform import PlatformId
from flakegen.core.models.settings import GeneratorSettings
from flakegen.core.models.toolchain import ToolchainBundle
from flakegen.core.services.generators.platforms import CapabilityLookup

logger = logging.getLogger(__name__)


class DevEnvironmentBuilder:
    """Build ``DevEnvironmentDescriptor``s.

    The tool list holds the compiler, build tool, linter, formatter and
    language server, plus the same toolchain bundle the package uses.
    """

    def __init__(self, settings: GeneratorSettings, capabilities: CapabilityLookup):
        self._settings = settings
        self._capabilities = capabilities

    def build(self, platform: PlatformId, bundle: ToolchainBundle) -> DevEnvironmentDescriptor:
        shell = self._settings.dev_shell
        caps = self._capabilities(platform)

        descriptor = DevEnvironmentDescriptor(
            system=platform,
            tools=(*shell.tools, bundle),
            build_inputs=caps.dev_inputs,
            environment={shell.source_path_env: shell.source_path},
        )
        logger.debug("Built dev environment for %s (%d tools)", platform, len(descriptor.tools))
        return descriptor
