"""Tests for CLI settings resolution."""

from pathlib import Path

import pytest

from kumi.core.config import DEFAULT_TEMPLATE_REPO, KumiSettings, load_settings
from kumi.core.errors import ConfigError


class TestLoadSettings:
    """Test defaults, kumi.toml and environment overrides."""

    def test_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path, environ={})

        assert settings == KumiSettings()
        assert settings.template_repo == DEFAULT_TEMPLATE_REPO

    def test_toml_values(self, tmp_path: Path) -> None:
        (tmp_path / "kumi.toml").write_text(
            '[kumi]\ntemplate_repo = "https://example.test/t.git"\nnode_bin = "nodejs"\n'
            'unknown = "ignored"\n'
        )

        settings = load_settings(tmp_path, environ={})

        assert settings.template_repo == "https://example.test/t.git"
        assert settings.node_bin == "nodejs"
        assert settings.git_bin == "git"

    def test_environment_wins(self, tmp_path: Path) -> None:
        (tmp_path / "kumi.toml").write_text('[kumi]\nnode_bin = "nodejs"\nlog_level = "info"\n')

        settings = load_settings(
            tmp_path, environ={"KUMI_NODE": "/opt/node/bin/node", "KUMI_LOG_LEVEL": "debug"}
        )

        assert settings.node_bin == "/opt/node/bin/node"
        assert settings.log_level == "DEBUG"

    def test_malformed_toml(self, tmp_path: Path) -> None:
        (tmp_path / "kumi.toml").write_text("[kumi\nnode_bin = ")

        with pytest.raises(ConfigError):
            load_settings(tmp_path, environ={})
