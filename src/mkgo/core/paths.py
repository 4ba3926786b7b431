"""Map a module identifier to its directory under GOPATH."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedPath:
    destination: Path
    name: str


def split_identifier(identifier: str) -> list[str]:
    """Split a slash-delimited identifier into its components, left to right."""
    return [part for part in PurePosixPath(identifier).parts if part != "/"]


def resolve(identifier: str, gopath: str | None = None) -> ResolvedPath:
    """
    Resolve *identifier* to ``<GOPATH[0]>/src/<components>`` and its short name.

    When the GOPATH list is empty the destination is just the relative
    components, i.e. it lands under the current working directory.
    """
    if gopath is None:
        gopath = os.environ.get("GOPATH", "")
    parts = split_identifier(identifier)
    base = gopath.split(os.pathsep)[0] if gopath else ""

    if base:
        destination = Path(base, "src", *parts)
    else:
        logger.warning(
            "GOPATH is not set; creating %r relative to the working directory", identifier
        )
        destination = Path(*parts)

    name = parts[-1] if parts else ""
    logger.debug("resolved %r to %s (name %r)", identifier, destination, name)
    return ResolvedPath(destination, name)
