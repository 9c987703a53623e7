# SPDX-License-Identifier: MIT
"""CLI entry point for the lexver command."""

from __future__ import annotations

import sys

import click

from .compare import compare_versions, is_compatible, sort_versions
from .semver import MalformedVersionError, Version, parse_version
from .serialize import dumps


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def _fields(version: Version) -> dict[str, str]:
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "pre": version.pre,
        "build": version.build,
    }


def _parse_or_exit(ctx: Context, version_string: str) -> Version:
    """Parse a version argument, exiting with status 1 if it is malformed."""
    try:
        version = parse_version(version_string)
    except MalformedVersionError as e:
        echo_error(f"{e.message} Got '{e.version}'")
        sys.exit(1)

    if ctx.verbose:
        breakdown = ", ".join(f"{k}={v!r}" for k, v in _fields(version).items())
        echo_info(f"Parsed '{version_string}': {breakdown}")
    return version


@click.group()
@click.version_option(package_name="lexver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show how each version argument was parsed.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Parse and compare MAJOR.MINOR.PATCH[-PRE][+BUILD] versions.

    All segments compare as strings, so 1.9.0 is newer than 1.10.0.

    \b
    Examples:
        lexver parse 1.2.5-beta1+322
        lexver compare 1.2.5-beta1 1.2.5-beta4
        lexver satisfies 1.2.3 1.0.0
        lexver sort 1.2.3 2.2.3 1.4.3
    """
    ctx.verbose = verbose


@cli.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Output the fields as JSON.")
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Print the fields of VERSION."""
    parsed = _parse_or_exit(ctx, version)

    if as_json:
        click.echo(dumps(_fields(parsed), indent=2))
        return

    for name, value in _fields(parsed).items():
        echo_info(f"{name}: {value}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print LESS, EQUAL or GREATER for VERSION1 against VERSION2."""
    v1 = _parse_or_exit(ctx, version1)
    v2 = _parse_or_exit(ctx, version2)

    if v1.build != v2.build and v1.equal(v2):
        echo_warning("Build metadata differs but is ignored in comparisons")

    echo_info(compare_versions(v1, v2).name)


@cli.command()
@click.argument("version")
@click.argument("floor")
@pass_context
def satisfies(ctx: Context, version: str, floor: str) -> None:
    """Check that VERSION satisfies the pessimistic constraint ~> FLOOR.

    Exits with status 1 when it does not.
    """
    v = _parse_or_exit(ctx, version)
    f = _parse_or_exit(ctx, floor)

    if is_compatible(v, f):
        echo_success(f"{v} satisfies ~> {f}")
        return

    echo_error(f"{v} does not satisfy ~> {f}")
    sys.exit(1)


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Print newest first.")
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS ordered oldest to newest."""
    parsed = [_parse_or_exit(ctx, v) for v in versions]
    for version in sort_versions(parsed, reverse=reverse):
        echo_info(str(version))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
