"""Lockfile path resolution and ``.npmrc`` discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

NPMRC_NAME = ".npmrc"
USERCONFIG_ENV_VAR = "NPM_CONFIG_USERCONFIG"


def resolve_lockfile_path(value: str | Path | None) -> Path | None:
    """Return ``value`` as an absolute path, relative to the current directory."""
    if value is None or str(value) == "":
        return None
    path = Path(value)
    return path if path.is_absolute() else Path.cwd() / path


def user_npmrc_path(userconfig: Path | str | None = None) -> Path:
    """Resolve the user-level ``.npmrc``.

    Priority:
    1. Explicit ``userconfig`` argument
    2. NPM_CONFIG_USERCONFIG environment variable
    3. ``~/.npmrc``
    """
    if userconfig is not None:
        return Path(userconfig)

    env_path = os.environ.get(USERCONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return Path.home() / NPMRC_NAME


def find_npmrc_files(
    lockfile_path: Path | str | None = None,
    *,
    userconfig: Path | str | None = None,
) -> list[Path]:
    """Find existing ``.npmrc`` files, lowest precedence first.

    The user-level file comes first and the project-level file (next to the
    lockfile) last, so applying them in order lets the project override the
    user. Candidates that do not exist are omitted.
    """
    candidates = [user_npmrc_path(userconfig)]
    if lockfile_path is not None:
        candidates.append(Path(lockfile_path).parent / NPMRC_NAME)

    found: list[Path] = []
    for path in candidates:
        if not path.is_file():
            continue
        if any(_same_file(path, seen) for seen in found):
            continue
        found.append(path)

    logger.debug("Found .npmrc files: %s", [str(p) for p in found])
    return found


def _same_file(a: Path, b: Path) -> bool:
    try:
        return a.samefile(b)
    except OSError:
        return False
