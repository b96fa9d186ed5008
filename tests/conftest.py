"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from flakegen.core.models import GeneratorSettings, Manifest, VcsState

FULL_REV = "abcdef0123456789abcdef0123456789abcdef01"


@pytest.fixture
def artifact_dir(tmp_path: Path) -> Path:
    """A directory holding a minimal typst-tikz Cargo manifest and lock."""
    (tmp_path / "Cargo.toml").write_text(textwrap.dedent("""\
        [package]
        name = "typst-tikz"
        description = "The command line interface for Typst, with TikZ support."
        version = "0.6.0"
        edition = "2021"

        [dependencies]
        clap = { version = "4.2.4", features = ["derive", "env"] }
    """))
    (tmp_path / "Cargo.lock").write_text("version = 3\n")
    return tmp_path


@pytest.fixture
def manifest() -> Manifest:
    return Manifest(name="typst-tikz", version="0.6.0")


@pytest.fixture
def settings() -> GeneratorSettings:
    return GeneratorSettings()


@pytest.fixture
def clean_vcs() -> VcsState:
    return VcsState(rev=FULL_REV, source="static")


@pytest.fixture
def no_vcs() -> VcsState:
    return VcsState.untracked()
