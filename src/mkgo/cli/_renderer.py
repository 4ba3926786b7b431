"""Line templates and placeholder substitution."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from mkgo.cli._types import Token
from mkgo.core.config import ScaffoldConfig


@dataclass(frozen=True)
class Template:
    """An immutable, ordered sequence of lines containing placeholder tokens."""

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> Template:
        return cls(tuple(text.split("\n")))


def render(template: Template, context: Mapping[Token, str]) -> str:
    """
    Substitute every token in *context* throughout *template* and join the lines.

    Tokens are replaced in ``Token`` declaration order. A replacement value
    that itself contains a later token's sentinel is substituted again.
    Tokens absent from *context* are left as-is.
    """
    out = []
    for line in template.lines:
        for token in Token:
            if token in context:
                line = line.replace(token.value, context[token])
        out.append(line)
    return "\n".join(out)


def build_context(config: ScaffoldConfig, name: str) -> dict[Token, str]:
    """Substitution values for one run."""
    return {
        Token.IMPORT: config.identifier,
        Token.NAME: name,
        Token.DATE: config.date,
        Token.VERSION: config.version,
        Token.USER: config.user,
        Token.YEAR: config.year,
    }
