"""Run external developer tools and capture their combined output."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import subprocess
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of one external command.

    ``returncode`` is ``None`` when the command could not be started at all,
    in which case ``output`` holds the reason.
    """

    command: tuple[str, ...]
    returncode: int | None
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ToolRunner(Protocol):
    """Anything that can run a command in a directory, like :func:`run_tool`."""

    def __call__(self, cwd: Path, command: str, *args: str) -> ToolResult: ...


def run_tool(cwd: Path, command: str, *args: str) -> ToolResult:
    """Run *command* with *args* from *cwd*, with stdout and stderr interleaved."""
    argv = (command, *args)
    logger.debug("running %s in %s", " ".join(argv), cwd)
    try:
        proc = subprocess.run(
            argv,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        logger.debug("could not start %s: %s", command, exc)
        return ToolResult(argv, None, f"{command}: {exc.strerror or exc}\n")

    logger.debug("%s exited with %d", command, proc.returncode)
    return ToolResult(argv, proc.returncode, proc.stdout or "")
