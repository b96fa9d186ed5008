"""
Tests for configuration loading — flakegen.yml and the Cargo manifest.
"""

import textwrap
from pathlib import Path

import pytest

from flakegen.core.config.loader import (
    ConfigError,
    find_settings_file,
    load_settings,
    project_root,
)
from flakegen.core.config.manifest_loader import ManifestError, load_manifest


@pytest.fixture
def settings_yml(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        overlay_name: typst-next
        revision:
          fallback: "00000000"
          version_fallback: unknown hash
        toolchain:
          base_scheme: scheme-small
          modules: [pgf, tikz-cd]
        platforms:
          darwin:
            package_inputs: [darwin.apple_sdk.frameworks.CoreServices]
            dev_inputs: [libiconv]
    """)
    path = tmp_path / "flakegen.yml"
    path.write_text(content)
    return path


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults_without_file(self):
        settings = load_settings(None)
        assert settings.manifest == "Cargo.toml"
        assert settings.toolchain.base_scheme == "scheme-basic"

    def test_load_valid(self, settings_yml: Path):
        settings = load_settings(settings_yml)
        assert settings.overlay_name == "typst-next"
        assert settings.toolchain.modules == ["pgf", "tikz-cd"]
        assert settings.revision.effective_version_fallback == "unknown hash"
        assert settings.family_inputs("darwin").dev_inputs == ["libiconv"]

    def test_empty_file_is_defaults(self, tmp_path: Path):
        path = tmp_path / "flakegen.yml"
        path.write_text("")
        assert load_settings(path).overlay_name == "typst-dev"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "flakegen.yml"
        path.write_text("toolchain: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "flakegen.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(path)

    def test_schema_violation(self, tmp_path: Path):
        path = tmp_path / "flakegen.yml"
        path.write_text("platforms:\n  linux:\n    dev_inputs: [libiconv]\n")
        with pytest.raises(ConfigError, match="Invalid generator configuration"):
            load_settings(path)


class TestFindSettingsFile:
    def test_finds_in_parent(self, settings_yml: Path):
        nested = settings_yml.parent / "src" / "deep"
        nested.mkdir(parents=True)
        assert find_settings_file(nested) == settings_yml.resolve()

    def test_none_when_absent(self, tmp_path: Path):
        # tmp_path may sit under a directory with a flakegen.yml on odd
        # machines; only assert the found file is not inside tmp_path
        found = find_settings_file(tmp_path)
        assert found is None or tmp_path.resolve() not in found.parents

    def test_project_root(self, settings_yml: Path):
        assert project_root(settings_yml) == settings_yml.parent.resolve()


class TestLoadManifest:
    def test_load(self, artifact_dir: Path):
        manifest = load_manifest(artifact_dir / "Cargo.toml")
        assert manifest.name == "typst-tikz"
        assert manifest.version == "0.6.0"
        assert manifest.description.startswith("The command line interface")
        assert manifest.lock_file == "Cargo.lock"

    def test_lock_file_override(self, artifact_dir: Path):
        manifest = load_manifest(artifact_dir / "Cargo.toml", lock_file="locks/Cargo.lock")
        assert manifest.lock_file == "locks/Cargo.lock"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ManifestError, match="not found"):
            load_manifest(tmp_path / "Cargo.toml")

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "Cargo.toml"
        path.write_text("[package\nname = 1")
        with pytest.raises(ManifestError, match="Invalid TOML"):
            load_manifest(path)

    def test_no_package_table(self, tmp_path: Path):
        path = tmp_path / "Cargo.toml"
        path.write_text('[workspace]\nmembers = ["a"]\n')
        with pytest.raises(ManifestError, match=r"\[package\]"):
            load_manifest(path)

    def test_missing_version_is_fatal(self, tmp_path: Path):
        path = tmp_path / "Cargo.toml"
        path.write_text('[package]\nname = "typst-tikz"\n')
        with pytest.raises(ManifestError, match="package.version"):
            load_manifest(path)

    def test_workspace_version_is_fatal(self, tmp_path: Path):
        path = tmp_path / "Cargo.toml"
        path.write_text('[package]\nname = "typst-tikz"\nversion.workspace = true\n')
        with pytest.raises(ManifestError, match="must be a string"):
            load_manifest(path)

    def test_unparseable_version_is_fatal(self, tmp_path: Path):
        path = tmp_path / "Cargo.toml"
        path.write_text('[package]\nname = "typst-tikz"\nversion = "0.6"\n')
        with pytest.raises(ManifestError, match="Invalid manifest"):
            load_manifest(path)
