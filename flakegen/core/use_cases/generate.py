"""
Generate use case — one full evaluation pass.

Reads settings and manifest, probes version control, and builds the
output table. Fatal errors produce no table at all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from flakegen.adapters.base import RevisionProbe
from flakegen.adapters.mock import StaticRevisionProbe
from flakegen.adapters.vcs.git import GitRevisionProbe
from flakegen.core.config.loader import ConfigError, load_settings, project_root
from flakegen.core.config.manifest_loader import ManifestError, load_manifest
from flakegen.core.models.manifest import Manifest
from flakegen.core.models.revision import VcsState
from flakegen.core.services.generators.platforms import SUPPORTED_SYSTEMS
from flakegen.core.services.generators.registry import OutputTable, Registry
from flakegen.core.services.generators.revision import RevisionError

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Outcome of an evaluation."""

    outputs: OutputTable | None = None
    manifest: Manifest | None = None
    vcs_state: VcsState | None = None
    root: Path | None = None
    error: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and self.outputs is not None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        if self.error:
            return {"error": self.error}
        assert self.outputs is not None and self.manifest is not None
        result: dict = {
            "artifact": {"name": self.manifest.name, "version": self.manifest.version},
            "revision": {
                "rev": self.vcs_state.rev if self.vcs_state else None,
                "dirty": self.vcs_state.dirty if self.vcs_state else False,
                "source": self.vcs_state.source if self.vcs_state else "none",
            },
            "outputs": self.outputs.to_dict(),
        }
        if self.warnings:
            result["warnings"] = self.warnings
        return result


def generate(
    config_path: Path | None = None,
    rev: str | None = None,
    systems: Iterable[str] | None = None,
    probe: RevisionProbe | None = None,
    parallel: bool = False,
) -> GenerateResult:
    """Evaluate all outputs for the project.

    Args:
        config_path: Path to flakegen.yml (None: defaults, cwd as root).
        rev: Explicit revision hash, bypassing the VCS probe.
        systems: Restrict to these platform identifiers.
        probe: Revision probe (default: git, or static when ``rev`` given).
        parallel: Evaluate platforms concurrently.

    Returns:
        GenerateResult with either ``outputs`` or ``error``.
    """
    result = GenerateResult()
    root = project_root(config_path)
    result.root = root

    try:
        settings = load_settings(config_path)
        manifest = load_manifest(root / settings.manifest, lock_file=settings.lock_file)
    except (ConfigError, ManifestError) as e:
        result.error = str(e)
        return result
    result.manifest = manifest

    if probe is None:
        probe = StaticRevisionProbe(rev=rev) if rev else GitRevisionProbe()
    vcs_state = probe.probe(root)
    result.vcs_state = vcs_state
    if vcs_state.dirty:
        result.warnings.append(
            f"Working tree is dirty; using fallback revision {settings.revision.fallback!r}."
        )

    requested = list(systems) if systems is not None else [s.value for s in SUPPORTED_SYSTEMS]
    supported = {s.value for s in SUPPORTED_SYSTEMS}
    for name in requested:
        if name not in supported:
            result.warnings.append(f"Unsupported platform {name!r} has no outputs.")

    try:
        registry = Registry(settings, manifest, vcs_state)
        result.outputs = registry.outputs(requested, parallel=parallel)
    except RevisionError as e:
        result.error = str(e)
        return result

    return result
