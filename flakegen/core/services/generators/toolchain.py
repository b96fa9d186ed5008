"""
Toolchain composer — base scheme plus add-on modules.
"""

from __future__ import annotations

from typing import Sequence

from flakegen.core.models.settings import ToolchainSettings
from flakegen.core.models.toolchain import ToolchainBundle

DEFAULT_COMBINER = "texlive.combine"


def compose(
    base_scheme: str,
    modules: Sequence[str],
    combiner: str = DEFAULT_COMBINER,
) -> ToolchainBundle:
    """Combine ``base_scheme`` with ``modules`` into a single bundle.

    Module order is kept as given; duplicates are harmless and only
    count once in ``ToolchainBundle.capabilities``.
    """
    if not base_scheme:
        raise ValueError("base_scheme must not be empty")
    return ToolchainBundle(combiner=combiner, base_scheme=base_scheme, modules=tuple(modules))


def compose_from_settings(settings: ToolchainSettings) -> ToolchainBundle:
    """Compose the bundle declared in the shared toolchain settings."""
    return compose(settings.base_scheme, settings.modules, combiner=settings.combiner)
