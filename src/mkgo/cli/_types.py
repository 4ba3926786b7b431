"""Enums for placeholder tokens and CLI options."""

from __future__ import annotations

from enum import Enum


class Token(str, Enum):
    """Placeholder sentinels recognized in templates, in substitution order."""

    IMPORT = "__IMPORT__"
    NAME = "__NAME__"
    DATE = "__DATE__"
    VERSION = "__VERSION__"
    USER = "__USER__"
    YEAR = "__YEAR__"


class License(str, Enum):
    """Supported LICENSE file kinds."""

    MIT = "MIT"
    ISC = "ISC"
    BSD_3_CLAUSE = "BSD-3-Clause"

    @property
    def label(self) -> str:
        labels: dict[License, str] = {
            License.MIT: "MIT License",
            License.ISC: "ISC License",
            License.BSD_3_CLAUSE: 'BSD 3-Clause "New" or "Revised" License',
        }
        return labels[self]

    @classmethod
    def lookup(cls, name: str) -> License | None:
        """Return the license kind named *name*, or ``None`` if unsupported."""
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def names(cls) -> list[str]:
        return [lic.value for lic in cls]
