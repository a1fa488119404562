"""
Configuration Module Unit Tests
"""

import json
from pathlib import Path
import pytest

from ainfinit_sdk.config import (
    AinfinitConfig,
    ConfigLoader,
    ConfigValidator,
    ConfigDefaults,
    DEFAULT_BASE_URL,
)
from ainfinit_sdk.exceptions import AinfinitError, ConfigError, ValidationError


@pytest.fixture
def valid_config() -> dict:
    return {
        "merchant_code": "merchant",
        "secret_key": "4UafmbIJroNY2lXX",
    }


class TestConfigValidator:
    """Tests for ConfigValidator"""

    @pytest.fixture
    def validator(self) -> ConfigValidator:
        return ConfigValidator()

    def test_validate_valid_config(self, validator: ConfigValidator, valid_config: dict):
        """Should pass with valid configuration"""
        result = validator.validate(valid_config)
        assert result.valid is True
        assert result.errors == []

    def test_validate_missing_merchant_code(self, validator: ConfigValidator, valid_config: dict):
        """Should fail when merchant_code is missing"""
        del valid_config["merchant_code"]
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "merchant_code" for e in result.errors)

    def test_validate_empty_secret_key_is_redacted(self, validator: ConfigValidator, valid_config: dict):
        """Should fail on a blank secret_key without echoing it"""
        valid_config["secret_key"] = "   "
        result = validator.validate(valid_config)
        assert result.valid is False
        error = next(e for e in result.errors if e.field == "secret_key")
        assert "empty" in error.message
        assert error.value == "[REDACTED]"

    def test_validate_invalid_timeout(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with negative timeout"""
        valid_config["timeout"] = -1000
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "timeout" for e in result.errors)

    def test_validate_timeout_too_low(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with timeout too low"""
        valid_config["timeout"] = 100
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(
            e.field == "timeout" and "1000ms" in e.message
            for e in result.errors
        )

    def test_validate_timeout_too_high(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with timeout above five minutes"""
        valid_config["timeout"] = 300001
        result = validator.validate(valid_config)
        assert any(
            e.field == "timeout" and "300000ms" in e.message
            for e in result.errors
        )

    def test_validate_invalid_base_url(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with invalid base_url"""
        valid_config["base_url"] = "not-a-url"
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "base_url" for e in result.errors)

    def test_validate_non_boolean_debug(self, validator: ConfigValidator, valid_config: dict):
        """Should fail when debug is not a boolean"""
        valid_config["debug"] = "yes"
        result = validator.validate(valid_config)
        assert any(e.field == "debug" for e in result.errors)

    def test_validate_or_raise_invalid(self, validator: ConfigValidator, valid_config: dict):
        """Should raise ValidationError with invalid configuration"""
        del valid_config["secret_key"]
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_or_raise(valid_config)
        assert exc_info.value.field == "secret_key"


class TestConfigLoader:
    """Tests for ConfigLoader"""

    @pytest.fixture
    def loader(self) -> ConfigLoader:
        return ConfigLoader()

    def test_from_dict(self, loader: ConfigLoader, valid_config: dict):
        """Should return a copy of the configuration"""
        result = loader.from_dict(valid_config)
        assert result == valid_config
        assert result is not valid_config

    def test_from_environment(self, loader: ConfigLoader, monkeypatch):
        """Should load configuration from environment variables"""
        monkeypatch.setenv("AINFINIT_MERCHANT_CODE", "env-merchant")
        monkeypatch.setenv("AINFINIT_SECRET_KEY", "env-secret-key-16")
        monkeypatch.setenv("AINFINIT_BASE_URL", "https://staging.example.com")
        monkeypatch.setenv("AINFINIT_TIMEOUT", "60000")
        monkeypatch.setenv("AINFINIT_ENABLE_AUDIT_LOG", "false")

        result = loader.from_environment()

        assert result["merchant_code"] == "env-merchant"
        assert result["secret_key"] == "env-secret-key-16"
        assert result["base_url"] == "https://staging.example.com"
        assert result["timeout"] == 60000
        assert result["enable_audit_log"] is False

    def test_from_environment_boolean_parsing(self, loader: ConfigLoader, monkeypatch):
        """Should parse boolean values correctly"""
        monkeypatch.setenv("AINFINIT_DEBUG", "true")
        assert loader.from_environment()["debug"] is True

        monkeypatch.setenv("AINFINIT_DEBUG", "1")
        assert loader.from_environment()["debug"] is True

        monkeypatch.setenv("AINFINIT_DEBUG", "false")
        assert loader.from_environment()["debug"] is False

    def test_from_environment_ignores_empty(self, loader: ConfigLoader, monkeypatch):
        """Should skip variables that are set but empty"""
        monkeypatch.setenv("AINFINIT_MERCHANT_CODE", "")
        assert "merchant_code" not in loader.from_environment()

    def test_merge(self, loader: ConfigLoader):
        """Should merge multiple configurations with priority"""
        base = {"merchant_code": "base", "secret_key": "k"}
        override = {"merchant_code": "override", "timeout": 5000}

        result = loader.merge(base, override)

        assert result["merchant_code"] == "override"
        assert result["secret_key"] == "k"
        assert result["timeout"] == 5000

    def test_merge_filters_none(self, loader: ConfigLoader):
        """Should not include None values from overrides"""
        base = {"merchant_code": "base", "timeout": 30000}
        override = {"merchant_code": "override", "timeout": None}

        result = loader.merge(base, override)

        assert result["merchant_code"] == "override"
        assert result["timeout"] == 30000

    def test_resolve_applies_defaults(self, loader: ConfigLoader, valid_config: dict):
        """Should apply default values"""
        result = loader.resolve(valid_config)

        assert result.base_url == DEFAULT_BASE_URL
        assert result.timeout == ConfigDefaults.TIMEOUT
        assert result.debug is ConfigDefaults.DEBUG
        assert result.enable_audit_log == ConfigDefaults.ENABLE_AUDIT_LOG
        assert result.user_agent == ConfigDefaults.USER_AGENT

    def test_resolve_allows_custom_base_url(self, loader: ConfigLoader, valid_config: dict):
        """Should allow custom base_url"""
        valid_config["base_url"] = "https://custom.example.com/"
        result = loader.resolve(valid_config)
        assert result.base_url == "https://custom.example.com/"
        assert result.get_resolved_base_url() == "https://custom.example.com"

    def test_resolve_invalid_raises(self, loader: ConfigLoader):
        """Should raise ValidationError before building the config"""
        with pytest.raises(ValidationError):
            loader.resolve({"merchant_code": "m"})

    def test_from_file(self, loader: ConfigLoader, valid_config: dict, tmp_path: Path):
        """Should load configuration from JSON file"""
        path = tmp_path / "ainfinit.json"
        path.write_text(json.dumps(valid_config), encoding="utf-8")

        result = loader.from_file(path)
        assert result["merchant_code"] == valid_config["merchant_code"]

    def test_from_file_not_found(self, loader: ConfigLoader):
        """Should raise error for missing file"""
        with pytest.raises(AinfinitError) as exc_info:
            loader.from_file("/nonexistent/path.json")

        assert "CONFIG_FILE_NOT_FOUND" in str(exc_info.value.code)

    def test_from_file_invalid_json(self, loader: ConfigLoader, tmp_path: Path):
        """Should raise ConfigError for unparsable content"""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            loader.from_file(path)
        assert exc_info.value.code == "CONFIG_PARSE_ERROR"

    def test_from_file_non_object(self, loader: ConfigLoader, tmp_path: Path):
        """Should reject a JSON document that is not an object"""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigError):
            loader.from_file(path)

    def test_load_precedence(self, loader: ConfigLoader, valid_config: dict, tmp_path: Path, monkeypatch):
        """Should let environment override the file and explicit config override both"""
        path = tmp_path / "ainfinit.json"
        path.write_text(json.dumps({**valid_config, "timeout": 10000}), encoding="utf-8")
        monkeypatch.setenv("AINFINIT_TIMEOUT", "20000")
        monkeypatch.setenv("AINFINIT_MERCHANT_CODE", "from-env")

        result = loader.load(file=path, config={"merchant_code": "explicit"})

        assert result.timeout == 20000
        assert result.merchant_code == "explicit"

    def test_load_from_config(self, loader: ConfigLoader, valid_config: dict):
        """Should load and resolve configuration from dict"""
        result = loader.load(config=valid_config, env=False)

        assert result.merchant_code == valid_config["merchant_code"]
        assert result.base_url == DEFAULT_BASE_URL

    def test_create_template(self, loader: ConfigLoader, tmp_path: Path):
        """Should create template configuration file"""
        template_path = tmp_path / "config" / "template.json"
        loader.create_template(template_path)

        assert template_path.exists()
        template = json.loads(template_path.read_text(encoding="utf-8"))

        assert "merchant_code" in template
        assert "secret_key" in template
        assert template["base_url"] == DEFAULT_BASE_URL


class TestAinfinitConfig:
    """Tests for AinfinitConfig Pydantic model"""

    def test_create_valid_config(self, valid_config: dict):
        """Should create config with valid data"""
        config = AinfinitConfig(**valid_config)
        assert config.merchant_code == "merchant"
        assert config.base_url == DEFAULT_BASE_URL

    def test_secret_key_hidden_from_repr(self, valid_config: dict):
        """Should keep the secret key out of repr"""
        config = AinfinitConfig(**valid_config)
        assert valid_config["secret_key"] not in repr(config)

    def test_invalid_base_url(self, valid_config: dict):
        """Should reject invalid base_url"""
        valid_config["base_url"] = "ftp://example.com"
        with pytest.raises(ValueError):
            AinfinitConfig(**valid_config)

    def test_timeout_bounds(self, valid_config: dict):
        """Should reject timeouts outside 1000..300000 ms"""
        with pytest.raises(ValueError):
            AinfinitConfig(**valid_config, timeout=999)
        with pytest.raises(ValueError):
            AinfinitConfig(**valid_config, timeout=300001)
