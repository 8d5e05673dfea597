"""Data models for registry resolution and reporting."""

from __future__ import annotations

from .npmrc_line import DefaultDeclaration, NpmrcLine, ScopeDeclaration, Unrecognized
from .registry_config import DEFAULT_REGISTRY, RegistryConfig
from .registry_summary import RegistrySummary

__all__ = [
    "DEFAULT_REGISTRY",
    "DefaultDeclaration",
    "NpmrcLine",
    "RegistryConfig",
    "RegistrySummary",
    "ScopeDeclaration",
    "Unrecognized",
]
