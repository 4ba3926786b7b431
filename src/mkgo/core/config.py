"""Run configuration for a single scaffolding invocation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _date
import os

DATE_FORMAT = "%Y %b %d"
DEFAULT_VERSION = "0.1.0"


def today() -> str:
    """Today's date in the format embedded in generated sources (``2020 Oct 10``)."""
    return _date.today().strftime(DATE_FORMAT)


@dataclass(kw_only=True, frozen=True)
class ScaffoldConfig:
    """
    Everything one run of mkgo needs, resolved once at startup.

    Attributes:
        identifier: Module identifier as given on the command line, e.g. ``example.com/acme/tool``.
        date: Initial revision date embedded in the generated source.
        version: Initial revision semantic version embedded in the generated source.
        user: Copyright holder written into the LICENSE file.
        year: Copyright year written into the LICENSE file.
        overwrite: Replace output files that already exist.
        readme: Also generate ``README.md``.
        license: License kind to generate, or ``""`` for none.
        gopath: Raw ``GOPATH`` list; its first entry roots the destination.
    """

    identifier: str
    date: str
    version: str = DEFAULT_VERSION
    user: str = ""
    year: str = ""
    overwrite: bool = False
    readme: bool = False
    license: str = ""
    gopath: str = ""

    @classmethod
    def from_env(
        cls,
        identifier: str,
        *,
        date: str | None = None,
        version: str = DEFAULT_VERSION,
        user: str | None = None,
        overwrite: bool = False,
        readme: bool = False,
        license: str = "",
    ) -> ScaffoldConfig:
        """Build a config, filling date, year, user and GOPATH from the clock and environment."""
        return cls(
            identifier=identifier,
            date=today() if date is None else date,
            version=version,
            user=os.environ.get("USER", "") if user is None else user,
            year=str(_date.today().year),
            overwrite=overwrite,
            readme=readme,
            license=license,
            gopath=os.environ.get("GOPATH", ""),
        )
