"""
Overlay exporter — insert a package into an existing collection.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from flakegen.core.models.descriptor import OverlayBinding, PackageDescriptor
from flakegen.core.models.platform import PlatformId
from flakegen.core.services.generators.platforms import UnsupportedPlatformError

logger = logging.getLogger(__name__)

Collection = Mapping[str, Any]
Overlay = Callable[[Collection], dict[str, Any]]

# Key a base collection uses to declare which platform it is for.
SYSTEM_KEY = "system"


def bind(exposed_name: str, descriptor: PackageDescriptor) -> Overlay:
    """Return a function adding ``exposed_name -> descriptor`` to a collection.

    The base collection is copied, never mutated.
    """
    if not exposed_name:
        raise ValueError("exposed_name must not be empty")
    return OverlayBinding(exposed_name=exposed_name, descriptor=descriptor).apply


class PackageOverlay:
    """The registry's single, platform-independent overlay.

    The descriptor is built for the platform the base collection
    declares under ``system``, then inserted via ``bind``.
    """

    def __init__(self, exposed_name: str, package_for: Callable[[PlatformId], PackageDescriptor]):
        self.exposed_name = exposed_name
        self._package_for = package_for

    def __call__(self, base: Collection) -> dict[str, Any]:
        system = PlatformId.parse(str(base.get(SYSTEM_KEY, "")))
        if system is None:
            raise UnsupportedPlatformError(
                f"collection system {base.get(SYSTEM_KEY)!r} is not a supported platform"
            )
        logger.debug("Applying overlay %s for %s", self.exposed_name, system)
        return bind(self.exposed_name, self._package_for(system))(base)

    def __repr__(self) -> str:
        return f"<PackageOverlay name={self.exposed_name!r}>"
