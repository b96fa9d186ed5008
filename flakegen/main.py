"""
flakegen — CLI entrypoint.

Usage:
    python -m flakegen.main --help
    python -m flakegen.main show
    python -m flakegen.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from flakegen import __version__
from flakegen.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="flakegen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to flakegen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """flakegen — build and dev-environment descriptors for every platform."""
    from flakegen.core.config.loader import find_settings_file

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else find_settings_file()

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("FLAKEGEN_LOG_LEVEL", "WARNING")

    setup_logging(level=level, log_file=os.environ.get("FLAKEGEN_LOG_FILE"))


@cli.command()
@click.option("--system", "systems", multiple=True, help="Only this platform (repeatable).")
@click.option("--rev", default=None, help="Use this revision hash instead of asking git.")
@click.option("--parallel", is_flag=True, help="Evaluate platforms concurrently.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(
    ctx: click.Context,
    systems: tuple[str, ...],
    rev: str | None,
    parallel: bool,
    as_json: bool,
) -> None:
    """Evaluate and print the output table."""
    from flakegen.core.use_cases.generate import generate

    result = generate(
        config_path=ctx.obj.get("config_path"),
        rev=rev,
        systems=systems or None,
        parallel=parallel,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    assert result.outputs is not None and result.manifest is not None
    outputs = result.outputs

    if not ctx.obj.get("quiet", False):
        click.secho(f"\n📦 {result.manifest.name}", fg="cyan", bold=True)
        for warning in result.warnings:
            click.secho(f"   ⚠️  {warning}", fg="yellow")
        click.echo()

    for system in outputs.systems:
        pkg = outputs.default_package(system)
        shell = outputs.default_dev_shell(system)
        assert pkg is not None and shell is not None
        click.secho(f"   {system.value}", fg="white", bold=True)
        click.echo(f"     package:   {pkg.name} {pkg.version}")
        click.echo(f"     toolchain: {pkg.bundle.identity}")
        if pkg.build_inputs:
            click.echo(f"     inputs:    {', '.join(pkg.build_inputs)}")
        click.echo(f"     devShell:  {len(shell.tools)} tools")
        click.echo(f"     formatter: {outputs.formatter[system].formatter}")

    for name, overlay in outputs.overlays.items():
        click.echo()
        click.echo(f"   overlay {name}: adds '{overlay.exposed_name}'")
    click.echo()


@cli.command()
def systems() -> None:
    """List the supported platforms."""
    from flakegen.core.services.generators.platforms import SUPPORTED_SYSTEMS

    for system in SUPPORTED_SYSTEMS:
        click.echo(system.value)


@cli.group()
def config() -> None:
    """Generator configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate flakegen.yml and the artifact manifest."""
    from flakegen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.manifest is not None
        click.secho(
            f"✅ {result.manifest.name} {result.manifest.version} — configuration valid",
            fg="green",
        )
    for error in result.errors:
        click.secho(f"❌ {error}", fg="red")
    for warning in result.warnings:
        click.secho(f"⚠️  {warning}", fg="yellow")

    if not result.valid:
        sys.exit(1)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
