"""
Manifest loader — reads the artifact's Cargo.toml.

The manifest is read once, before any descriptor is built. Any
failure here is fatal: the version string is part of the artifact's
identity and is never substituted.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from flakegen.core.models.manifest import Manifest

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """Raised when the artifact manifest is missing or invalid."""


def load_manifest(path: Path, lock_file: str | None = None) -> Manifest:
    """Load the ``[package]`` table of a Cargo manifest.

    Args:
        path: Path to Cargo.toml.
        lock_file: Lock file override (default: ``Cargo.lock`` beside it).

    Returns:
        Validated Manifest.

    Raises:
        ManifestError: File missing or unreadable, invalid TOML, no
            ``[package]`` table, or missing/invalid name or version.
    """
    if not path.is_file():
        raise ManifestError(f"Manifest not found: {path}")

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    package = data.get("package")
    if not isinstance(package, dict):
        raise ManifestError(f"No [package] table in {path}")

    for key in ("name", "version"):
        if key not in package:
            raise ManifestError(f"Manifest {path} has no package.{key}")
        if not isinstance(package[key], str):
            # e.g. `version.workspace = true`, which we cannot resolve
            raise ManifestError(f"package.{key} in {path} must be a string")

    try:
        manifest = Manifest(
            name=package["name"],
            version=package["version"],
            description=package.get("description", ""),
            lock_file=lock_file or "Cargo.lock",
        )
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest {path}: {e}") from e

    logger.debug("Loaded manifest %s %s from %s", manifest.name, manifest.version, path)
    return manifest
