"""Core registry summary entrypoint.

This module never prints or exits so it can back both the CLI and callers
that want the structured summary.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .discovery import find_npmrc_files
from .models import RegistrySummary
from .parsers.npmrc import parse as parse_npmrc
from .parsers.pnpm_lock import load_lockfile, packages_by_registry_from, scopes_from
from .report import aggregate

logger = logging.getLogger(__name__)


def summarize_lockfile(
    lockfile_path: Path,
    *,
    userconfig: Path | str | None = None,
) -> RegistrySummary:
    """Summarize which registries the scoped packages of a lockfile resolve to.

    Params:
        lockfile_path: path to pnpm-lock.yaml; its directory is searched for a
            project-level .npmrc
        userconfig: optional explicit user-level .npmrc

    Raises LockfileNotFoundError or LockfileParseError from the lockfile parser.
    """
    lockfile_path = Path(lockfile_path)

    npmrc_files = find_npmrc_files(lockfile_path, userconfig=userconfig)
    config = parse_npmrc(npmrc_files)

    document = load_lockfile(lockfile_path)
    scopes = scopes_from(document)
    classified = packages_by_registry_from(document, config.registries, config.default_registry)
    logger.debug(
        "Lockfile %s: %d scope(s), %d registry group(s)",
        lockfile_path,
        len(scopes),
        len(classified),
    )

    return aggregate(lockfile_path, config, scopes, classified)
