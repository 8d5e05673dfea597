"""Tests for .npmrc line classification and layered merging."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pnpm_registry_summary.models import (
    DEFAULT_REGISTRY,
    DefaultDeclaration,
    ScopeDeclaration,
    Unrecognized,
)
from pnpm_registry_summary.parsers.npmrc import classify_line, parse


class TestClassifyLine:
    def test_scoped_registry(self) -> None:
        assert classify_line("@foo:registry = https://custom.example/") == ScopeDeclaration(
            scope="@foo", registry="https://custom.example/"
        )

    def test_scoped_registry_without_spaces(self) -> None:
        assert classify_line("@foo:registry=https://x/") == ScopeDeclaration(
            scope="@foo", registry="https://x/"
        )

    def test_default_registry(self) -> None:
        assert classify_line("  registry = https://mirror.example/  ") == DefaultDeclaration(
            registry="https://mirror.example/"
        )

    def test_trailing_comment_removed(self) -> None:
        assert classify_line("registry = https://r/ # mirror") == DefaultDeclaration(
            registry="https://r/"
        )

    def test_commented_line_is_blank(self) -> None:
        assert classify_line("# @foo:registry = https://x/") is None

    def test_blank_line(self) -> None:
        assert classify_line("   ") is None

    def test_other_settings_unrecognized(self) -> None:
        assert classify_line("//npm.pkg.github.com/:_authToken=abc") == Unrecognized(
            line="//npm.pkg.github.com/:_authToken=abc"
        )
        assert classify_line("strict-ssl=false") == Unrecognized(line="strict-ssl=false")


class TestParse:
    def test_no_files_gives_defaults(self) -> None:
        config = parse([])
        assert config.registries == {}
        assert config.default_registry == DEFAULT_REGISTRY
        assert config.files == ()

    def test_missing_file_is_skipped(self, tmp_path: Path) -> None:
        config = parse([tmp_path / "nope" / ".npmrc"])
        assert config.registries == {}
        assert config.files == ()

    def test_reads_scopes_and_default(self, tmp_path: Path, write_npmrc) -> None:
        path = write_npmrc(
            tmp_path,
            "# company settings\n"
            "registry = https://mirror.example/\n"
            "@foo:registry = https://custom.example/\n"
            "always-auth = true\n",
        )
        config = parse([path])
        assert config.default_registry == "https://mirror.example/"
        assert config.registries == {"@foo": "https://custom.example/"}
        assert config.files == (path,)

    def test_commented_scope_contributes_nothing(self, tmp_path: Path, write_npmrc) -> None:
        path = write_npmrc(tmp_path, "# @foo:registry = https://x/\n")
        assert parse([path]).registries == {}

    def test_later_file_wins(self, tmp_path: Path, write_npmrc) -> None:
        user_dir = tmp_path / "user"
        project_dir = tmp_path / "proj"
        user_dir.mkdir()
        project_dir.mkdir()
        user = write_npmrc(
            user_dir,
            "@shared:registry = https://user.example/\n@only-user:registry = https://u/\n",
        )
        project = write_npmrc(project_dir, "@shared:registry = https://project.example/\n")

        config = parse([user, project])

        assert config.registries == {
            "@shared": "https://project.example/",
            "@only-user": "https://u/",
        }
        assert config.files == (user, project)

    def test_crlf_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / ".npmrc"
        path.write_bytes(b"@foo:registry = https://x/\r\nregistry = https://r/\r\n")
        config = parse([path])
        assert config.registries == {"@foo": "https://x/"}
        assert config.default_registry == "https://r/"

    def test_undecodable_bytes_only_affect_their_line(self, tmp_path: Path) -> None:
        path = tmp_path / ".npmrc"
        path.write_bytes(b"# caf\xe9 mirror\n@a:registry = https://a/\n")
        config = parse([path])
        assert config.registries == {"@a": "https://a/"}
        assert config.files == (path,)

    def test_ignored_lines_log_setting_name_only(
        self, tmp_path: Path, write_npmrc, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = write_npmrc(
            tmp_path,
            "//npm.pkg.github.com/:_authToken=s3cr3t-token\n@a:registry = https://a/\n",
        )
        caplog.set_level(logging.DEBUG, logger="pnpm_registry_summary")

        parse([path])

        assert "//npm.pkg.github.com/:_authToken" in caplog.text
        assert "s3cr3t-token" not in caplog.text
