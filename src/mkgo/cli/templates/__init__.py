"""Static templates for generated files."""

from __future__ import annotations

from mkgo.cli._renderer import Template
from mkgo.cli._types import License
from mkgo.cli.templates._license import BSD_3_CLAUSE, ISC, MIT
from mkgo.cli.templates._readme import README
from mkgo.cli.templates._source import SOURCE, SOURCE_EXTENSION

LICENSES: dict[License, Template] = {
    License.MIT: MIT,
    License.ISC: ISC,
    License.BSD_3_CLAUSE: BSD_3_CLAUSE,
}

__all__ = ["LICENSES", "README", "SOURCE", "SOURCE_EXTENSION"]
