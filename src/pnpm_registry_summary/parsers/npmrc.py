"""Parse layered ``.npmrc`` files into a merged registry configuration."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from ..models import (
    DEFAULT_REGISTRY,
    DefaultDeclaration,
    NpmrcLine,
    RegistryConfig,
    ScopeDeclaration,
    Unrecognized,
)

logger = logging.getLogger(__name__)

SCOPED_REGISTRY_RE = re.compile(r"^(@[^:]+):registry\s*=\s*(.+)$")
DEFAULT_REGISTRY_RE = re.compile(r"^registry\s*=\s*(.+)$")


def _strip_comment(line: str) -> str:
    return line.strip().split("#", 1)[0]


def _setting_name(line: str) -> str:
    # Values may be credentials such as _authToken
    return line.split("=", 1)[0].strip()


def classify_line(line: str) -> NpmrcLine | None:
    """Classify a single ``.npmrc`` line.

    Returns ``None`` for lines that are blank once whitespace and ``#``
    comments are removed.
    """
    clean = _strip_comment(line)
    if not clean:
        return None

    scoped = SCOPED_REGISTRY_RE.match(clean)
    if scoped:
        scope, registry = scoped.groups()
        return ScopeDeclaration(scope=scope, registry=registry.strip())

    default = DEFAULT_REGISTRY_RE.match(clean)
    if default:
        return DefaultDeclaration(registry=default.group(1).strip())

    return Unrecognized(line=clean)


def parse(paths: Iterable[Path]) -> RegistryConfig:
    """Merge ``.npmrc`` files into a single :class:`RegistryConfig`.

    Files are applied in the given order, so the last file wins for any key
    it declares. Paths that do not exist are skipped.
    """
    registries: dict[str, str] = {}
    default_registry = DEFAULT_REGISTRY
    applied: list[Path] = []

    for path in paths:
        path = Path(path)
        if not path.is_file():
            logger.debug("Skipping missing .npmrc: %s", path)
            continue

        for lineno, line in enumerate(
            path.read_text(encoding="utf-8", errors="replace").splitlines(), start=1
        ):
            entry = classify_line(line)
            if isinstance(entry, ScopeDeclaration):
                registries[entry.scope] = entry.registry
            elif isinstance(entry, DefaultDeclaration):
                default_registry = entry.registry
            elif isinstance(entry, Unrecognized):
                logger.debug("Ignoring %s:%d: %s", path, lineno, _setting_name(entry.line))

        applied.append(path)
        logger.debug("Applied .npmrc: %s", path)

    return RegistryConfig(
        registries=registries,
        default_registry=default_registry,
        files=tuple(applied),
    )
