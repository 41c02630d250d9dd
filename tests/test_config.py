"""Tests for configuration loading."""

import dataclasses

import pytest

from forgejo_mcp.config import ForgejoConfig, load_config, load_config_file


@pytest.fixture
def config_file(temp_dir):
    """Write a YAML config file and return its path."""
    path = temp_dir / "forgejo.yaml"
    path.write_text("forgejo:\n  base_url: https://file.example.com\n  token: file-token\n  timeout: 15\n")
    return path


class TestLoadConfig:
    """Tests for load_config function."""

    def test_reads_environment(self, monkeypatch):
        """Should pick up FORGEJO_BASE_URL and FORGEJO_TOKEN."""
        monkeypatch.setenv("FORGEJO_BASE_URL", "https://env.example.com")
        monkeypatch.setenv("FORGEJO_TOKEN", "env-token")

        config = load_config()

        assert config.base_url == "https://env.example.com"
        assert config.token == "env-token"
        assert config.timeout is None

    def test_explicit_arguments_win(self, monkeypatch, config_file):
        """CLI values override environment and file."""
        monkeypatch.setenv("FORGEJO_BASE_URL", "https://env.example.com")

        config = load_config(config_file=config_file, base_url="https://cli.example.com", token="cli-token")

        assert config.base_url == "https://cli.example.com"
        assert config.token == "cli-token"

    def test_environment_overrides_file(self, monkeypatch, config_file):
        """Environment values override the YAML file."""
        monkeypatch.setenv("FORGEJO_TOKEN", "env-token")

        config = load_config(config_file=config_file)

        assert config.base_url == "https://file.example.com"
        assert config.token == "env-token"
        assert config.timeout == 15.0

    def test_config_file_from_environment(self, monkeypatch, config_file):
        """FORGEJO_CONFIG points at the YAML file."""
        monkeypatch.setenv("FORGEJO_CONFIG", str(config_file))

        config = load_config()

        assert config.base_url == "https://file.example.com"

    def test_timeout_from_environment(self, monkeypatch):
        """FORGEJO_TIMEOUT is parsed as seconds."""
        monkeypatch.setenv("FORGEJO_TIMEOUT", "2.5")
        assert load_config().timeout == 2.5

    def test_missing_values_are_not_rejected(self, caplog):
        """Absent settings only produce warnings."""
        config = load_config()

        assert config == ForgejoConfig(base_url="", token="", timeout=None)
        assert "FORGEJO_BASE_URL" in caplog.text
        assert "FORGEJO_TOKEN" in caplog.text

    def test_config_is_immutable(self):
        """ForgejoConfig is frozen."""
        config = ForgejoConfig(base_url="https://x", token="t")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.token = "other"  # type: ignore[misc]

    def test_repr_masks_token(self):
        """The token never appears in repr (and so never in logs)."""
        config = ForgejoConfig(base_url="https://x", token="super-secret")
        assert "super-secret" not in repr(config)


class TestConfigFile:
    """Tests for the YAML config file format."""

    def test_missing_file_returns_empty(self, temp_dir):
        """A path that does not exist yields no settings."""
        assert load_config_file(temp_dir / "nope.yaml") == {}

    def test_no_path_returns_empty(self):
        """No path yields no settings."""
        assert load_config_file(None) == {}

    def test_reads_forgejo_section(self, config_file):
        """Only the forgejo section is returned."""
        section = load_config_file(config_file)
        assert section["base_url"] == "https://file.example.com"
        assert section["token"] == "file-token"

    def test_rejects_non_mapping(self, temp_dir):
        """A YAML list at the top level is an error."""
        path = temp_dir / "bad.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_config_file(path)
