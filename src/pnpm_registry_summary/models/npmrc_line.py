"""Classified ``.npmrc`` declarations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class ScopeDeclaration:
    """``@scope:registry = URL``"""

    scope: str
    registry: str

    def __post_init__(self) -> None:
        if not self.scope.startswith("@"):
            raise ValueError(f"Invalid scope: {self.scope}")


@dataclass(frozen=True)
class DefaultDeclaration:
    """``registry = URL``"""

    registry: str


@dataclass(frozen=True)
class Unrecognized:
    """Any other non-empty line; kept for debugging, never applied."""

    line: str


NpmrcLine: TypeAlias = ScopeDeclaration | DefaultDeclaration | Unrecognized
