"""
System matrix — the fixed platform set and per-platform capability tables.

``each_system`` maps a single-platform generator across every supported
platform. Generators must not share state: each call sees only its
own platform, so the expansion may run in any order or in parallel.
"""

from __future__ import annotations

import concurrent.futures
import logging
from typing import Callable, Iterable, TypeVar

from flakegen.core.models.platform import PlatformCapabilities, PlatformId
from flakegen.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

SUPPORTED_SYSTEMS: tuple[PlatformId, ...] = tuple(PlatformId)

CapabilityLookup = Callable[[PlatformId], PlatformCapabilities]


class UnsupportedPlatformError(KeyError):
    """Raised when a platform outside the supported set is requested."""


def each_system(
    generator: Callable[[PlatformId], T],
    systems: Iterable[PlatformId | str] = SUPPORTED_SYSTEMS,
    parallel: bool = False,
) -> dict[PlatformId, T]:
    """Run ``generator`` once per platform and key the results by platform.

    Args:
        generator: Single-platform generator.
        systems: Platforms to evaluate (default: all four). Identifiers
            outside the supported set get no entry.
        parallel: Evaluate platforms on a thread pool.

    Returns:
        Platform-keyed table, in ``systems`` order.
    """
    targets: list[PlatformId] = []
    for value in systems:
        system = value if isinstance(value, PlatformId) else PlatformId.parse(value)
        if system is None:
            logger.debug("Skipping unsupported platform %r", value)
        elif system not in targets:
            targets.append(system)

    if not parallel or len(targets) < 2:
        return {system: generator(system) for system in targets}

    with concurrent.futures.ThreadPoolExecutor(max_workers=len(targets)) as pool:
        futures = {system: pool.submit(generator, system) for system in targets}
        return {system: futures[system].result() for system in targets}


def capability_table(settings: GeneratorSettings) -> dict[PlatformId, PlatformCapabilities]:
    """Evaluate the per-platform capability table once.

    Extra inputs come from the platform's OS family entry.
    """
    table = {}
    for system in SUPPORTED_SYSTEMS:
        inputs = settings.family_inputs(system.family)
        table[system] = PlatformCapabilities(
            system=system,
            package_inputs=tuple(dict.fromkeys(inputs.package_inputs)),
            dev_inputs=tuple(dict.fromkeys(inputs.dev_inputs)),
        )
    logger.debug(
        "Capability table: %s",
        {s.value: len(c.package_inputs) + len(c.dev_inputs) for s, c in table.items()},
    )
    return table


def capability_lookup(table: dict[PlatformId, PlatformCapabilities]) -> CapabilityLookup:
    """Turn a capability table into the lookup function builders take."""

    def lookup(system: PlatformId) -> PlatformCapabilities:
        try:
            return table[system]
        except KeyError:
            raise UnsupportedPlatformError(str(system)) from None

    return lookup
