"""Classify lockfile scopes against the merged registry configuration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from .models import RegistryConfig, RegistrySummary


def aggregate(
    lockfile: Path,
    config: RegistryConfig,
    scopes: Iterable[str],
    packages_by_registry: Mapping[str, list[str]],
) -> RegistrySummary:
    """Derive the summary statistics the presentation layer renders.

    A scope counts as non-default when it has any mapping entry, even one that
    equals the default registry; ``packages_by_registry`` is expected to
    exclude those already.
    """
    scope_set = frozenset(scopes)
    non_default = tuple(sorted(s for s in scope_set if s in config.registries))

    return RegistrySummary(
        lockfile=lockfile,
        config=config,
        scopes=scope_set,
        non_default_scopes=non_default,
        packages_by_registry={k: list(v) for k, v in packages_by_registry.items()},
    )
