# SPDX-License-Identifier: MIT
"""CLI entry point for the mover command."""

from __future__ import annotations

import sys
from typing import Optional

import click

from .compare import compare, version_key
from .config import MoverConfig, configure_logging
from .errors import SemverError
from .grammar import validate
from .semver import Version, parse_version


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def _parse(text: str) -> Version:
    try:
        return parse_version(text)
    except SemverError as e:
        raise click.ClickException(str(e)) from e


def _mutate(action, *args) -> None:
    try:
        action(*args)
    except (SemverError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(package_name="semver-mover")
@click.option("--debug", is_flag=True, help="Log library debug events to stderr.")
@click.option("--json-logs", is_flag=True, help="Render log lines as JSON.")
@click.pass_context
def cli(ctx: click.Context, debug: bool, json_logs: bool) -> None:
    """Parse, compare, bump and tag semantic versions.

    \b
    Examples:
        mover validate 3.2.56-rc.1+build.7
        mover compare 4.1.75-rc.111 4.1.75-rc.beta
        mover bump minor 1.4.2
        mover tag 4.1.1 --prerelease rc --flavor debug --build-number 12
    """
    ctx.obj = MoverConfig(debug=debug, json_logs=json_logs)
    configure_logging(ctx.obj)


@cli.command("validate")
@click.argument("version")
def validate_command(version: str) -> None:
    """Check VERSION against the version grammar and show its fields."""
    result = validate(version)
    if not result.ok:
        echo_error(f"'{version}' is not a valid version ({result.error})")
        sys.exit(1)

    click.echo(f"major: {result.major}")
    click.echo(f"minor: {result.minor}")
    click.echo(f"patch: {result.patch}")
    click.echo(f"prerelease: {result.prerelease or ''}")
    click.echo(f"build: {result.build_metadata or ''}")


@cli.command("compare")
@click.argument("first")
@click.argument("second")
def compare_command(first: str, second: str) -> None:
    """Print -1, 0 or 1 as FIRST is lower, equal or higher than SECOND."""
    click.echo(int(compare(_parse(first), _parse(second))))


@cli.command("sort")
@click.argument("versions", nargs=-1, required=True)
def sort_command(versions: tuple[str, ...]) -> None:
    """Print VERSIONS in ascending order, one per line."""
    parsed = [_parse(v) for v in versions]
    for version in sorted(parsed, key=version_key):
        click.echo(str(version))


@cli.command("bump")
@click.argument("field", type=click.Choice(["major", "minor", "patch", "prerelease", "build"]))
@click.argument("version")
@click.option("--by", "amount", type=click.IntRange(min=0), default=1, show_default=True)
def bump_command(field: str, version: str, amount: int) -> None:
    """Bump FIELD of VERSION and print the result."""
    v = _parse(version)
    action = {
        "major": v.bump_major,
        "minor": v.bump_minor,
        "patch": v.bump_patch,
        "prerelease": v.bump_prerelease,
        "build": v.bump_build_number,
    }[field]
    _mutate(action, amount)
    click.echo(str(v))


@cli.command("tag")
@click.argument("version")
@click.option("--prerelease", help="Replace the prerelease (e.g. rc, beta, alpha).")
@click.option("--meta", help="Replace the raw build metadata.")
@click.option("--timestamp", is_flag=True, help="Add the current epoch seconds.")
@click.option("--flavor", help="Add a build flavor (e.g. debug, test, dev).")
@click.option("--build-number", type=click.IntRange(min=0), help="Add a build number.")
def tag_command(
    version: str,
    prerelease: Optional[str],
    meta: Optional[str],
    timestamp: bool,
    flavor: Optional[str],
    build_number: Optional[int],
) -> None:
    """Tag VERSION and print the result."""
    v = _parse(version)
    if prerelease is not None:
        _mutate(v.tag_with_prerelease, prerelease)
    if meta is not None:
        _mutate(v.tag_with, meta)
    if timestamp:
        _mutate(v.tag_with_timestamp)
    if flavor is not None:
        _mutate(v.tag_with_flavor, flavor)
    if build_number is not None:
        _mutate(v.tag_with_build_number, build_number)
    click.echo(str(v))


@cli.command("untag")
@click.argument("version")
@click.option("--build-only", is_flag=True, help="Keep the prerelease.")
def untag_command(version: str, build_only: bool) -> None:
    """Strip tags from VERSION and print the result."""
    v = _parse(version)
    v.untag(build_meta_only=build_only)
    click.echo(str(v))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
