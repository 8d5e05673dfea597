from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import yaml


@pytest.fixture(autouse=True)
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ~ at an empty directory so the real ~/.npmrc never leaks in."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("NPM_CONFIG_USERCONFIG", raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so they do not outlive captured streams."""
    yield
    package_logger = logging.getLogger("pnpm_registry_summary")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def write_lockfile(project_dir: Path) -> Callable[[dict], Path]:
    def _write(packages: dict | None, **extra: object) -> Path:
        document: dict = {"lockfileVersion": "9.0", **extra}
        if packages is not None:
            document["packages"] = packages
        path = project_dir / "pnpm-lock.yaml"
        path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_npmrc() -> Callable[[Path, str], Path]:
    def _write(directory: Path, content: str) -> Path:
        path = directory / ".npmrc"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
