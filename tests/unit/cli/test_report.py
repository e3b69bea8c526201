"""Tests for jenkins_plugin_cli.cli.report."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from jenkins_plugin_cli.cli.report import render_config
from jenkins_plugin_cli.config.loader import load_config
from jenkins_plugin_cli.config.models import CliOptions, EffectiveConfiguration


@pytest.fixture
def config(tmp_path: Path) -> EffectiveConfiguration:
    options = CliOptions(
        plugin_file=str(tmp_path / "missing.txt"),
        plugins=("git:4.2.2", "ssh:1.0:https://example.com/ssh.hpi"),
        jenkins_uc="https://uc.example.com",
    )
    return load_config(options, env={}, platform="linux")


class TestRenderConfig:
    """Tests for render_config function."""

    def test_json(self, config: EffectiveConfiguration) -> None:
        data = json.loads(render_config(config, "json"))
        assert data == config.to_dict()

    def test_yaml(self, config: EffectiveConfiguration) -> None:
        data = yaml.safe_load(render_config(config, "yaml"))
        assert data == config.to_dict()

    def test_summary_lists_settings_and_plugins(self, config: EffectiveConfiguration) -> None:
        text = render_config(config, "summary")
        assert "jenkins_uc: https://uc.example.com (--jenkins-update-center)" in text
        assert "jenkins_uc_experimental: https://updates.jenkins.io/experimental (default)" in text
        assert "Plugins (2):" in text
        assert "  git:4.2.2" in text
        assert "  ssh:1.0:https://example.com/ssh.hpi" in text

    def test_summary_without_plugins(self, tmp_path: Path) -> None:
        config = load_config(CliOptions(plugin_file=str(tmp_path / "missing.txt")), env={})
        assert "Plugins: none" in render_config(config)

    def test_unknown_format(self, config: EffectiveConfiguration) -> None:
        with pytest.raises(ValueError):
            render_config(config, "xml")
