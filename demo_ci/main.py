"""
demo-ci — CLI entrypoint.

Usage:
    demo-ci /path/to/godot-demo-projects
    python -m demo_ci.main /path/to/godot-demo-projects
    demo-ci --dry-run --json /path/to/godot-demo-projects
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from demo_ci import __version__
from demo_ci.core.observability.logging_config import setup_logging


@click.command()
@click.version_option(version=__version__, prog_name="demo-ci")
@click.argument("root", required=False)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(),
    default=None,
    help="Path to a demo-ci.yml override (default: ROOT/demo-ci.yml if present).",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(),
    default=None,
    help="Directory for the generated files (default: current directory).",
)
@click.option("--dry-run", is_flag=True, help="Discover and render, but write nothing.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
def cli(
    root: str | None,
    config_path: str | None,
    output_dir: str | None,
    dry_run: bool,
    as_json: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Generate CI pipeline files for a Godot demo-projects repository.

    ROOT is the absolute path of the repository checkout.  Two files,
    ci_data_default.txt and ci_data_sanitizers.txt, are written to the
    current directory.
    """
    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("DEMO_CI_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("DEMO_CI_LOG_FILE"),
        log_file_level=os.environ.get("DEMO_CI_LOG_FILE_LEVEL"),
    )

    from demo_ci.core.use_cases.generate import run_generate

    result = run_generate(
        root,
        config_path=Path(config_path) if config_path else None,
        output_dir=Path(output_dir) if output_dir else None,
        write=not dry_run,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(result.exit_code)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if quiet:
        return

    mode_label = "[dry-run] " if dry_run else ""
    click.secho(f"\n🔍 {mode_label}Demo projects: {result.root}", fg="cyan", bold=True)
    click.echo(
        f"   Found: {len(result.projects)} | Disabled: {len(result.excluded)}"
    )

    if verbose:
        if result.discovery is not None:
            click.echo(f"   Directories scanned: {result.discovery.directories_scanned}")
        click.echo()
        for project in result.projects:
            if project in result.excluded:
                click.secho(f"   ⊘ {project}", fg="yellow")
            else:
                click.secho(f"   ✓ {project}", fg="green")

    click.echo()
    for path in result.files:
        if result.written:
            click.secho(f"   ✅ Written: {path}", fg="green")
        else:
            click.secho(f"   📄 Planned: {path}", fg="cyan")
        if verbose and result.reasons.get(path):
            click.echo(f"      {result.reasons[path]}")
    click.echo()


if __name__ == "__main__":
    cli()
