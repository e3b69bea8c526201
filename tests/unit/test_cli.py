"""Tests for CLI functionality."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

import jenkins_plugin_cli.cli as cli
from jenkins_plugin_cli.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS

ENV_VARS = ("JENKINS_UC", "JENKINS_UC_EXPERIMENTAL", "JENKINS_INCREMENTALS_REPO_MIRROR")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run in an empty directory with no Jenkins variables set."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestBuildParser:
    """Tests for CLI argument parser."""

    def test_build_parser_includes_core_flags(self) -> None:
        parser = cli.build_parser()
        assert isinstance(parser, argparse.ArgumentParser)

        # Global flags
        for flag in ["--version", "--debug", "--quiet", "--output"]:
            assert any(a.option_strings and flag in a.option_strings for a in parser._actions)

        # Plugin and location flags
        for flag in ["--plugin-file", "-f", "--plugins", "-p", "--plugin-download-directory", "-d", "--war", "-w"]:
            assert any(a.option_strings and flag in a.option_strings for a in parser._actions)

        # Warning and update center flags
        for flag in [
            "--view-security-warnings",
            "--view-all-security-warnings",
            "--jenkins-update-center",
            "--jenkins-experimental-update-center",
            "--jenkins-incrementals-repo-mirror",
        ]:
            assert any(a.option_strings and flag in a.option_strings for a in parser._actions)

    def test_warning_flags_unset_by_default(self) -> None:
        args = cli.build_parser().parse_args([])
        assert args.show_warnings is None
        assert args.show_all_warnings is None


class TestMainCommand:
    """Tests for main CLI entry point."""

    def test_main_help_exits_successfully(self, capsys) -> None:
        exit_code = cli.main(["--help"])
        captured = capsys.readouterr()
        assert exit_code == EXIT_SUCCESS
        assert "usage:" in captured.out.lower()

    def test_main_version_shows_version(self, capsys) -> None:
        exit_code = cli.main(["--version"])
        captured = capsys.readouterr()
        assert exit_code == EXIT_SUCCESS
        assert captured.out.strip()

    def test_main_reports_defaults(self, capsys, clean_env: Path) -> None:
        exit_code = cli.main([])
        captured = capsys.readouterr()
        assert exit_code == EXIT_SUCCESS
        assert "jenkins_uc: https://updates.jenkins.io (default)" in captured.out
        assert "Plugins: none" in captured.out
        assert "No CLI option or environment variable set for update center" in captured.err

    def test_main_environment_variable(self, capsys, clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JENKINS_UC", "https://env.example.com")
        exit_code = cli.main(["--output", "json"])
        captured = capsys.readouterr()
        assert exit_code == EXIT_SUCCESS
        data = json.loads(captured.out)
        assert data["settings"]["jenkins_uc"] == {
            "value": "https://env.example.com",
            "provenance": "environment",
        }

    def test_main_cli_option_overrides_environment(
        self, capsys, clean_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("JENKINS_UC", "https://env.example.com")
        exit_code = cli.main(["--output", "json", "--jenkins-update-center", "https://cli.example.com"])
        data = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_SUCCESS
        assert data["settings"]["jenkins_uc"]["value"] == "https://cli.example.com"
        assert data["settings"]["jenkins_uc"]["provenance"] == "cli"

    def test_main_reads_plugin_file(self, capsys, clean_env: Path) -> None:
        manifest = clean_env / "plugins.txt"
        manifest.write_text("c\nd:3.0:url\n", encoding="utf-8")
        exit_code = cli.main(["--output", "json", "-f", str(manifest), "-p", "a", "b:2.0"])
        data = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_SUCCESS
        assert [(p["name"], p["version"], p["url"]) for p in data["plugins"]] == [
            ("a", "latest", None),
            ("b", "2.0", None),
            ("c", "latest", None),
            ("d", "3.0", "url"),
        ]

    def test_main_malformed_environment_url(
        self, capsys, clean_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("JENKINS_UC_EXPERIMENTAL", "not-a-url")
        exit_code = cli.main([])
        captured = capsys.readouterr()
        assert exit_code == EXIT_INVALID_USAGE
        assert "JENKINS_UC_EXPERIMENTAL" in captured.err
        assert captured.out == ""

    def test_main_warns_about_blank_manifest_lines(self, capsys, clean_env: Path) -> None:
        (clean_env / "plugins.txt").write_text("git\n\n", encoding="utf-8")
        exit_code = cli.main([])
        captured = capsys.readouterr()
        assert exit_code == EXIT_SUCCESS
        assert "empty name" in captured.err

    def test_main_quiet_suppresses_info(self, capsys, clean_env: Path) -> None:
        exit_code = cli.main(["--quiet"])
        captured = capsys.readouterr()
        assert exit_code == EXIT_SUCCESS
        assert captured.err == ""
