"""Drives one scaffolding run: directory, source file, tools, LICENSE, README."""

from __future__ import annotations

import logging
from pathlib import Path

from mkgo.cli._renderer import Template, build_context, render
from mkgo.cli._types import License, Token
from mkgo.cli.templates import LICENSES, README, SOURCE, SOURCE_EXTENSION
from mkgo.core.config import ScaffoldConfig
from mkgo.core.files import write_file
from mkgo.core.paths import resolve
from mkgo.core.tools import ToolRunner, run_tool

logger = logging.getLogger(__name__)

EXIT_NO_IDENTIFIER = 1
EXIT_MKDIR = 2
EXIT_SOURCE_IS_DIR = 3
EXIT_SOURCE_WRITE = 4
EXIT_FORMAT_TOOL = 5
EXIT_MOD_INIT_TOOL = 6
EXIT_SOURCE_EXISTS = 7
EXIT_UNKNOWN_LICENSE = 8
EXIT_AUX_IS_DIR = 9
EXIT_AUX_WRITE = 10
EXIT_AUX_EXISTS = 11


class ScaffoldError(Exception):
    """A terminal failure, carrying the process exit code and any captured tool output."""

    def __init__(self, message: str, exit_code: int, output: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
        self.output = output


def _write(
    path: Path,
    template: Template,
    context: dict[Token, str],
    overwrite: bool,
    codes: tuple[int, int, int],
) -> None:
    """Render and write one file, mapping failures to (is-dir, write, exists) exit codes."""
    is_dir, write_failed, exists = codes
    try:
        write_file(path, render(template, context), overwrite=overwrite)
    except IsADirectoryError:
        raise ScaffoldError(f"output file is a directory: {path}", is_dir) from None
    except FileExistsError:
        raise ScaffoldError(f"file exists (use -f to overwrite): {path}", exists) from None
    except OSError as exc:
        raise ScaffoldError(str(exc), write_failed) from exc


def _run(runner: ToolRunner, cwd: Path, exit_code: int, command: str, *args: str) -> None:
    result = runner(cwd, command, *args)
    if not result.ok:
        if result.returncode is None:
            status = "could not be run"
        else:
            status = f"exited with status {result.returncode}"
        raise ScaffoldError(f"{' '.join(result.command)} {status}", exit_code, result.output)


def generate(config: ScaffoldConfig, runner: ToolRunner = run_tool) -> Path:
    """
    Scaffold the module named by ``config.identifier`` and return its directory.

    Steps run in order and the first failure raises :class:`ScaffoldError`.
    Files written by earlier steps are left in place.
    """
    resolved = resolve(config.identifier, config.gopath)
    if not resolved.name:
        raise ScaffoldError("no package path specified (use -h for help)", EXIT_NO_IDENTIFIER)
    path, name = resolved.destination, resolved.name

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ScaffoldError(str(exc), EXIT_MKDIR) from exc

    context = build_context(config, name)
    source_name = f"{name}.{SOURCE_EXTENSION}"
    _write(
        path / source_name,
        SOURCE,
        context,
        config.overwrite,
        (EXIT_SOURCE_IS_DIR, EXIT_SOURCE_WRITE, EXIT_SOURCE_EXISTS),
    )
    _run(runner, path, EXIT_FORMAT_TOOL, "goimports", "-w", source_name)
    _run(runner, path, EXIT_MOD_INIT_TOOL, "go", "mod", "init", config.identifier)

    aux_codes = (EXIT_AUX_IS_DIR, EXIT_AUX_WRITE, EXIT_AUX_EXISTS)

    if config.license:
        kind = License.lookup(config.license)
        if kind is None:
            raise ScaffoldError(
                f"unsupported license (use -h to view options): {config.license}",
                EXIT_UNKNOWN_LICENSE,
            )
        logger.debug("writing %s", kind.label)
        _write(path / "LICENSE", LICENSES[kind], context, config.overwrite, aux_codes)

    if config.readme:
        _write(path / "README.md", README, context, config.overwrite, aux_codes)

    return path
