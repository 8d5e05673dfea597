"""Parse pnpm-lock.yaml to capture scoped packages and their registries."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)

# Keys look like "@scope/name@1.2.3", "@scope/name/1.2.3" or "name@1.2.3"
SCOPE_RE = re.compile(r"^(@[^/]+)/")

LOCKFILE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "pnpm-lock.yaml",
    "type": "object",
}


class LockfileError(RuntimeError):
    """Base error for lockfiles that cannot be read."""


class LockfileNotFoundError(LockfileError):
    """Raised when the lockfile does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Lockfile not found: {path}")
        self.path = path


class LockfileParseError(LockfileError):
    """Raised when the lockfile is not a YAML mapping."""


def load_lockfile(path: Path) -> dict[str, Any]:
    """Read and parse a lockfile document.

    An empty document is treated as an empty mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise LockfileNotFoundError(path)

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise LockfileParseError(f"Failed to parse lockfile: {exc}") from exc

    if data is None:
        return {}

    try:
        Draft202012Validator(LOCKFILE_SCHEMA).validate(data)
    except ValidationError as exc:
        raise LockfileParseError(f"Failed to parse lockfile: {exc.message}") from exc

    return data


def packages_from(document: Mapping[str, Any]) -> dict[Any, Any]:
    """Return the ``packages`` mapping, or an empty one when absent or not a mapping."""
    packages = document.get("packages")
    if isinstance(packages, dict):
        return packages
    if packages is not None:
        logger.debug("Ignoring non-mapping 'packages' of type %s", type(packages).__name__)
    return {}


def scope_of(key: object) -> str | None:
    """Return the ``@scope`` prefix of a package key, if any."""
    if not isinstance(key, str):
        return None
    match = SCOPE_RE.match(key)
    return match.group(1) if match else None


def scopes_from(document: Mapping[str, Any]) -> set[str]:
    scopes: set[str] = set()
    for key in packages_from(document):
        scope = scope_of(key)
        if scope is not None:
            scopes.add(scope)
    return scopes


def packages_by_registry_from(
    document: Mapping[str, Any],
    registries: Mapping[str, str],
    default_registry: str,
) -> dict[str, list[str]]:
    """Group scoped package keys by the non-default registry their scope maps to.

    Packages without a scope, whose scope is unmapped, or whose scope maps to
    exactly ``default_registry`` are left out. Order follows the document.
    """
    grouped: dict[str, list[str]] = {}
    for key in packages_from(document):
        scope = scope_of(key)
        if scope is None or scope not in registries:
            continue
        registry = registries[scope]
        if registry == default_registry:
            continue
        grouped.setdefault(registry, []).append(key)
    return grouped


def extract_scopes(path: Path) -> set[str]:
    """Return the unique scopes of all packages in the lockfile."""
    return scopes_from(load_lockfile(path))


def extract_packages_by_registry(
    path: Path,
    registries: Mapping[str, str],
    default_registry: str,
) -> dict[str, list[str]]:
    """Return package keys grouped by custom registry URL."""
    return packages_by_registry_from(load_lockfile(path), registries, default_registry)
