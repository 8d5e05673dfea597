"""pnpm registry summary package.

Reports which scoped packages in a pnpm lockfile resolve to non-default
registries according to the user- and project-level ``.npmrc`` files.
"""

from .core import summarize_lockfile

__all__ = [
    "summarize_lockfile",
]
