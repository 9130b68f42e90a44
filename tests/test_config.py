"""Tests for the config module."""

import pytest
import yaml

from loggerfy.config import Config, load_config, load_yaml_config


class TestConfigDefaults:
    def test_default_service(self):
        assert Config().service == "default-service"

    def test_default_environment(self):
        assert Config().environment == "development"

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.service = "other"


class TestLoadConfig:
    def test_defaults(self):
        cfg = load_config()
        assert cfg.service == "default-service"
        assert cfg.environment == "development"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SERVICE_NAME", "fleet-management")
        monkeypatch.setenv("APP_ENV", "production")
        cfg = load_config()
        assert cfg.service == "fleet-management"
        assert cfg.environment == "production"

    def test_empty_env_uses_default(self, monkeypatch):
        monkeypatch.setenv("SERVICE_NAME", "")
        monkeypatch.setenv("APP_ENV", "")
        cfg = load_config()
        assert cfg.service == "default-service"
        assert cfg.environment == "development"

    def test_yaml_file(self, tmp_path, monkeypatch):
        path = tmp_path / "loggerfy.yaml"
        path.write_text(yaml.dump({"service": "billing", "environment": "staging"}))
        monkeypatch.setenv("LOGGERFY_CONFIG", str(path))
        cfg = load_config()
        assert cfg.service == "billing"
        assert cfg.environment == "staging"

    def test_env_beats_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "loggerfy.yaml"
        path.write_text(yaml.dump({"service": "billing", "environment": "staging"}))
        monkeypatch.setenv("LOGGERFY_CONFIG", str(path))
        monkeypatch.setenv("SERVICE_NAME", "orders")
        cfg = load_config()
        assert cfg.service == "orders"
        assert cfg.environment == "staging"

    def test_partial_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "loggerfy.yaml"
        path.write_text(yaml.dump({"environment": "test"}))
        monkeypatch.setenv("LOGGERFY_CONFIG", str(path))
        cfg = load_config()
        assert cfg.service == "default-service"
        assert cfg.environment == "test"


class TestLoadYamlConfig:
    def test_no_path(self):
        assert load_yaml_config(None) == {}
        assert load_yaml_config("") == {}

    def test_missing_file(self, tmp_path, caplog):
        assert load_yaml_config(str(tmp_path / "nope.yaml")) == {}
        assert "not found" in caplog.text

    def test_invalid_yaml(self, tmp_path, caplog):
        path = tmp_path / "bad.yaml"
        path.write_text("service: [unclosed\n")
        assert load_yaml_config(str(path)) == {}
        assert "Invalid YAML" in caplog.text

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        assert load_yaml_config(str(path)) == {}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml_config(str(path)) == {}

    def test_directory_path(self, tmp_path, caplog):
        assert load_yaml_config(str(tmp_path)) == {}
        assert "using defaults" in caplog.text

    def test_not_utf8(self, tmp_path, caplog):
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"service: \xff\xfe\n")
        assert load_yaml_config(str(path)) == {}
        assert "using defaults" in caplog.text

    def test_unreadable_path_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOGGERFY_CONFIG", str(tmp_path))
        cfg = load_config()
        assert cfg.service == "default-service"
        assert cfg.environment == "development"
