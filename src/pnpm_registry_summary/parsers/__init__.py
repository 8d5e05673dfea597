"""Parsers for ``.npmrc`` files and ``pnpm-lock.yaml`` lockfiles."""
