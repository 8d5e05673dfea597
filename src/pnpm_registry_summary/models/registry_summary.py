"""Summary of how a lockfile's scopes resolve against registry configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .registry_config import RegistryConfig


@dataclass(frozen=True)
class RegistrySummary:
    """Everything the presentation layer needs to render a registry report."""

    lockfile: Path
    config: RegistryConfig
    scopes: frozenset[str]
    non_default_scopes: tuple[str, ...]
    packages_by_registry: dict[str, list[str]]

    @property
    def total_packages(self) -> int:
        return sum(len(packages) for packages in self.packages_by_registry.values())

    @property
    def registry_count(self) -> int:
        return len(self.packages_by_registry)

    @property
    def uses_custom_registries(self) -> bool:
        return self.total_packages > 0

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "lockfile": str(self.lockfile),
            **self.config.to_dict(),
            "scopes": sorted(self.scopes),
            "nonDefaultScopes": list(self.non_default_scopes),
            "packagesByRegistry": {
                registry: list(packages)
                for registry, packages in self.packages_by_registry.items()
            },
            "totals": {
                "scopes": len(self.scopes),
                "nonDefaultScopes": len(self.non_default_scopes),
                "packages": self.total_packages,
                "registries": self.registry_count,
            },
        }
        return data
