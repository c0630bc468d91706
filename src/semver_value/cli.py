# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import sys

import click

from .compare import compare_versions, version_key
from .errors import VersionError
from .version import Version


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def _parse_or_exit(text: str) -> Version:
    try:
        return Version.parse(text)
    except VersionError as e:
        echo_error(str(e))
        raise SystemExit(1)


@click.group()
@click.version_option(package_name="semver-value")
def cli() -> None:
    """Parse, compare and bump semantic version numbers.

    \b
    Examples:
        semver validate 1.0.0-alpha.1
        semver compare 1.0.0-10 1.0.0-2
        semver bump minor 1.2.3
        semver sort 1.0.0 1.0.0-rc.1 0.9
    """


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("-q", "--quiet", is_flag=True, help="Only set the exit status.")
def validate(versions: tuple[str, ...], quiet: bool) -> None:
    """Check that every VERSION parses.

    Exits with status 1 if any of them is invalid.
    """
    failed = False
    for text in versions:
        try:
            version = Version.parse(text)
        except VersionError as e:
            failed = True
            if not quiet:
                echo_error(f"{text}: {e}")
            continue
        if not quiet:
            echo_success(f"{text}: valid ({version})")

    if failed:
        raise SystemExit(1)


@cli.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2."""
    echo_info(str(compare_versions(_parse_or_exit(version1), _parse_or_exit(version2))))


@cli.command()
@click.argument("part", type=click.Choice(["major", "minor", "patch"]))
@click.argument("version")
def bump(part: str, version: str) -> None:
    """Print VERSION with PART incremented.

    Lower parts reset to 0; pre-release and build metadata are dropped.
    """
    current = _parse_or_exit(version)
    if part == "major":
        bumped = current.increment_major()
    elif part == "minor":
        bumped = current.increment_minor()
    else:
        bumped = current.increment_patch()
    echo_info(str(bumped))


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Highest precedence first.")
def sort_command(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in precedence order, one per line."""
    pairs = [(_parse_or_exit(text), text) for text in versions]
    pairs.sort(key=lambda pair: version_key(pair[0]), reverse=reverse)
    for _, text in pairs:
        echo_info(text)


@cli.command()
@click.argument("version")
def normalize(version: str) -> None:
    """Print the canonical form of VERSION."""
    echo_info(str(_parse_or_exit(version)))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
