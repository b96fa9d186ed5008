"""
Config check use case — validate flakegen.yml and the manifest.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from flakegen.core.config.loader import ConfigError, load_settings, project_root
from flakegen.core.config.manifest_loader import ManifestError, load_manifest
from flakegen.core.models.manifest import Manifest
from flakegen.core.models.settings import GeneratorSettings


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    settings: GeneratorSettings | None = None
    manifest: Manifest | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "artifact": self.manifest.name if self.manifest else None,
            "version": self.manifest.version if self.manifest else None,
            "toolchain_modules": list(self.settings.toolchain.modules) if self.settings else [],
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator settings and the artifact manifest.

    Args:
        config_path: Optional explicit path to flakegen.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult(config_path=config_path)

    try:
        settings = load_settings(config_path)
        result.settings = settings
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if config_path is None:
        result.warnings.append("No flakegen.yml found; using built-in defaults.")

    try:
        result.manifest = load_manifest(
            project_root(config_path) / settings.manifest, lock_file=settings.lock_file
        )
    except ManifestError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    modules = settings.toolchain.modules
    if not modules:
        result.warnings.append("No toolchain modules listed; only the base scheme is available.")

    dupes = sorted({m for m in modules if modules.count(m) > 1})
    if dupes:
        result.warnings.append(f"Duplicate toolchain modules: {', '.join(dupes)}")

    if settings.toolchain.base_scheme in modules:
        result.warnings.append(
            f"Base scheme '{settings.toolchain.base_scheme}' is also listed as a module."
        )

    if not settings.family_inputs("darwin").package_inputs:
        result.warnings.append(
            "No darwin package inputs; darwin builds will lack the system-services framework."
        )

    lock = project_root(config_path) / result.manifest.lock_file
    if not lock.is_file():
        result.warnings.append(f"Lock file not found: {result.manifest.lock_file}")

    result.valid = True
    return result
