"""Merged registry configuration model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_REGISTRY = "https://registry.npmjs.org/"


@dataclass(frozen=True)
class RegistryConfig:
    """Result of merging one or more ``.npmrc`` layers.

    ``files`` lists the layers in application order, lowest precedence first.
    """

    registries: dict[str, str] = field(default_factory=dict)
    default_registry: str = DEFAULT_REGISTRY
    files: tuple[Path, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "files": [str(p) for p in self.files],
            "defaultRegistry": self.default_registry,
            "registries": dict(self.registries),
        }
