"""Typer CLI application for mkgo."""

from __future__ import annotations

import logging
from typing import Annotated

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import mkgo
from mkgo.cli._scaffold import EXIT_NO_IDENTIFIER, ScaffoldError, generate
from mkgo.cli._types import License
from mkgo.core.changelog import print_changelog
from mkgo.core.config import DEFAULT_VERSION, ScaffoldConfig

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console(soft_wrap=True, emoji=False)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("mkgo")
    logger.handlers = [
        RichHandler(console=Console(stderr=True), show_time=False, show_path=False),
    ]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _fail(message: str, code: int, output: str = "") -> Exit:
    if output:
        _console.out(output, end="" if output.endswith("\n") else "\n", highlight=False)
    _console.print(f"[bold red]error:[/] {escape(message)}")
    return Exit(code=code)


@app.command()
def main(
    identifier: Annotated[
        str | None,
        Argument(help="Module import path, e.g. example.com/acme/tool", show_default=False),
    ] = None,
    changelog: Annotated[
        bool, Option("-changelog", "--changelog", help="Display change history.")
    ] = False,
    show_version: Annotated[
        bool, Option("-version", "--version", help="Display version information.")
    ] = False,
    date: Annotated[
        str | None,
        Option("-d", help="Date of initial revision.", show_default="today, e.g. 2020 Oct 10"),
    ] = None,
    semver: Annotated[
        str, Option("-s", help="Semantic version of initial revision.")
    ] = DEFAULT_VERSION,
    force: Annotated[
        bool, Option("-f", help="Force overwriting files if they already exist.")
    ] = False,
    readme: Annotated[bool, Option("-r", help="Create a simple README.md.")] = False,
    license_name: Annotated[
        str,
        Option(
            "-l",
            help=f"Create a LICENSE file (options: {' '.join(License.names())}).",
            show_default=False,
        ),
    ] = "",
    user: Annotated[
        str | None,
        Option("-u", help="User name for license file copyright.", show_default="$USER"),
    ] = None,
    verbose: Annotated[bool, Option("--verbose", help="Log each step to stderr.")] = False,
) -> None:
    """Create a new Go main module under the first GOPATH entry."""
    _configure_logging(verbose)

    if changelog:
        print_changelog(_console)
        return
    if show_version:
        _console.print(f"mkgo version {mkgo.__version__}", markup=False)
        return

    if not identifier:
        raise _fail("no package path specified (use -h for help)", EXIT_NO_IDENTIFIER)

    config = ScaffoldConfig.from_env(
        identifier,
        date=date,
        version=semver,
        user=user,
        overwrite=force,
        readme=readme,
        license=license_name,
    )

    try:
        path = generate(config)
    except ScaffoldError as err:
        raise _fail(err.message, err.exit_code, err.output) from None

    _console.print(f'mkgo: successfully created "{identifier}": {path}', markup=False)
