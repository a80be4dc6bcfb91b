"""Tests for configuration loading and schemas."""
import json
import os
from unittest.mock import patch

import pytest

from resource_binder.config import ConfigurationLoader, InvalidConfigurationError, load_config
from resource_binder.config.schemas import AppConfig, LogDestination, validate_config


@pytest.mark.unit
class TestConfigurationLoader:
    """Test loading configuration files."""

    def test_defaults_without_file(self):
        with patch.dict(os.environ, {}, clear=True):
            config = load_config()

        assert config.provider.type == "azure"
        assert config.provider.environment == "public"
        assert config.reader.configure_timeout_seconds == 300.0
        assert config.reader.normalize_nested is False
        assert config.logging.level == "WARNING"

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "binder.yaml"
        path.write_text(
            "provider:\n"
            "  type: AWS\n"
            "  region: eu-west-1\n"
            "reader:\n"
            "  configure_timeout_seconds: 30\n"
            "logging:\n"
            "  level: debug\n"
            "  destination: both\n"
        )

        config = load_config(str(path))

        assert config.provider.type == "aws"
        assert config.provider.region == "eu-west-1"
        assert config.reader.configure_timeout_seconds == 30.0
        assert config.logging.level == "DEBUG"
        assert config.logging.destination == LogDestination.BOTH

    def test_json_file(self, tmp_path):
        path = tmp_path / "binder.json"
        path.write_text(json.dumps({"provider": {"type": "azure", "environment": "USGovernment"}}))

        assert load_config(str(path)).provider.environment == "usgovernment"

    def test_path_from_environment(self, tmp_path):
        path = tmp_path / "binder.yaml"
        path.write_text("reader:\n  normalize_nested: true\n")

        with patch.dict(os.environ, {"RESOURCE_BINDER_CONFIG": str(path)}):
            assert ConfigurationLoader().load().reader.normalize_nested is True

    def test_env_vars_expanded(self, tmp_path):
        path = tmp_path / "binder.yaml"
        path.write_text("provider:\n  subscription_id: ${BINDER_TEST_SUB}\n")

        with patch.dict(os.environ, {"BINDER_TEST_SUB": "sub-1"}):
            assert load_config(str(path)).provider.subscription_id == "sub-1"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "binder.yaml"
        path.write_text("")
        assert isinstance(load_config(str(path)), AppConfig)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidConfigurationError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "binder.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(InvalidConfigurationError):
            load_config(str(path))

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "binder.yaml"
        path.write_text("provider: [unclosed\n")
        with pytest.raises(InvalidConfigurationError):
            load_config(str(path))

    def test_invalid_values_report_details(self, tmp_path):
        path = tmp_path / "binder.yaml"
        path.write_text("reader:\n  configure_timeout_seconds: 0\n")

        with pytest.raises(InvalidConfigurationError) as exc_info:
            load_config(str(path))

        assert exc_info.value.details[0]["loc"] == ("reader", "configure_timeout_seconds")


@pytest.mark.unit
class TestConfigSchemas:
    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            validate_config({"logging": {"level": "LOUD"}})

    def test_empty_provider_type(self):
        with pytest.raises(ValueError):
            validate_config({"provider": {"type": ""}})

    def test_settings_from_environment(self):
        with patch.dict(
            os.environ,
            {"AZURE_SUBSCRIPTION_ID": "env-sub", "AWS_REGION": "ap-south-1", "AWS_PROFILE": "ops"},
        ):
            config = validate_config({})

        assert config.provider.subscription_id == "env-sub"
        assert config.provider.region == "ap-south-1"
        assert config.provider.profile == "ops"
