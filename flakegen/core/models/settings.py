"""
Generator settings — loaded from flakegen.yml.

Every field defaults to the values the typst-tikz flake ships with,
so a project without a settings file still generates its descriptors.
The toolchain module list is declared once here and shared by the
package and development-environment builders.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator


class RevisionSettings(BaseModel):
    """Fallbacks used when the checkout has no clean revision."""

    fallback: str = "00000000"
    version_fallback: str | None = None  # defaults to ``fallback``

    @property
    def effective_version_fallback(self) -> str:
        return self.version_fallback or self.fallback


class ToolchainSettings(BaseModel):
    """The shared toolchain composition."""

    combiner: str = "texlive.combine"
    base_scheme: str = "scheme-basic"
    modules: list[str] = Field(
        default_factory=lambda: ["luatex85", "standalone", "pgf", "tikz-cd"]
    )


class PackageSettings(BaseModel):
    """Package descriptor knobs."""

    builder: str = "rustPlatform.buildRustPackage"
    native_build_tools: list[str] = Field(default_factory=lambda: ["installShellFiles"])
    runtime_tools: list[str] = Field(default_factory=lambda: ["pdf2svg"])
    artifacts_dir: str = "artifacts"
    artifacts_env: str = "GEN_ARTIFACTS"
    version_env: str = "TYPST_VERSION"

    @field_validator("artifacts_env", "version_env")
    @classmethod
    def _env_name(cls, value: str) -> str:
        if not value or not value.replace("_", "").isalnum():
            raise ValueError(f"invalid environment variable name: {value!r}")
        return value


class DevShellSettings(BaseModel):
    """Development environment knobs."""

    tools: list[str] = Field(
        default_factory=lambda: ["cargo", "clippy", "pdf2svg", "rust-analyzer", "rustc", "rustfmt"]
    )
    source_path_env: str = "RUST_SRC_PATH"
    source_path: str = "rustPlatform.rustLibSrc"


class FamilyInputs(BaseModel):
    """Extra inputs contributed by one OS family."""

    package_inputs: list[str] = Field(default_factory=list)
    dev_inputs: list[str] = Field(default_factory=list)


def _default_families() -> dict[str, FamilyInputs]:
    core_services = "darwin.apple_sdk.frameworks.CoreServices"
    return {
        "darwin": FamilyInputs(
            package_inputs=[core_services],
            dev_inputs=[core_services, "libiconv"],
        ),
        "linux": FamilyInputs(),
    }


class GeneratorSettings(BaseModel):
    """Root settings document (flakegen.yml)."""

    manifest: str = "Cargo.toml"
    lock_file: str | None = None  # defaults to the manifest's lock file
    source: str = "."
    allow_builtin_fetch_git: bool = True

    overlay_name: str = "typst-dev"
    formatter: str = "nixpkgs-fmt"

    revision: RevisionSettings = Field(default_factory=RevisionSettings)
    toolchain: ToolchainSettings = Field(default_factory=ToolchainSettings)
    package: PackageSettings = Field(default_factory=PackageSettings)
    dev_shell: DevShellSettings = Field(default_factory=DevShellSettings)
    platforms: dict[str, FamilyInputs] = Field(default_factory=_default_families)

    @model_validator(mode="after")
    def _check_families(self) -> GeneratorSettings:
        unknown = set(self.platforms) - {"darwin", "linux"}
        if unknown:
            raise ValueError(f"unknown platform families: {', '.join(sorted(unknown))}")
        linux = self.platforms.get("linux")
        if linux and (linux.package_inputs or linux.dev_inputs):
            raise ValueError("platform-specific inputs are only supported for the darwin family")
        return self

    def family_inputs(self, family: str) -> FamilyInputs:
        return self.platforms.get(family) or FamilyInputs()
