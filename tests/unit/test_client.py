"""
Client Unit Tests
"""

import logging
from unittest.mock import MagicMock

import pytest

from ainfinit_sdk import AinfinitClient, DEFAULT_BASE_URL
from ainfinit_sdk.exceptions import (
    AinfinitError,
    AinfinitErrorCategory,
    ApiError,
    NetworkError,
    UnknownStatusError,
    ValidationError,
)
from ainfinit_sdk.models import ApiResponse
from ainfinit_sdk.utils import enable_debug_logging, get_logger


EXPECTED_TOKEN = (
    "eyJtZXJjaGFudF9jb2RlIjoibWVyY2hhbnQiLCJub25jZV9zdHIiOiJWU0h2M0IzUG1MNDlSMllwaG54L0hS"
    "a2w2VUxSMzRBcS9PSTdVRk5uTGV1UG5nRXZ2VjdIUisyRFhQUVFiOHpjU3hZWlVXQTFIM1d4TTRUeFNma1Bo"
    "Zz09IiwidGltZXN0YW1wIjoxNTU3MjE4MTU3MzE1fQ=="
)


class TestClientConstruction:
    """Tests for building clients"""

    def test_from_credentials(self):
        """Should build a client with default settings"""
        client = AinfinitClient.from_credentials("merchant", "4UafmbIJroNY2lXX")
        assert client.config.base_url == DEFAULT_BASE_URL
        assert client.credentials.merchant_code == "merchant"
        client.close()

    def test_from_credentials_with_options(self):
        """Should pass extra options through to the configuration"""
        client = AinfinitClient.from_credentials(
            "merchant", "4UafmbIJroNY2lXX", base_url="https://staging.local", timeout=5000
        )
        assert client.http.base_url == "https://staging.local"
        assert client.config.timeout == 5000
        client.close()

    def test_from_credentials_invalid(self):
        """Should reject empty credentials"""
        with pytest.raises(ValidationError):
            AinfinitClient.from_credentials("", "4UafmbIJroNY2lXX")

    def test_load_from_environment(self, monkeypatch):
        """Should read AINFINIT_* variables"""
        monkeypatch.setenv("AINFINIT_MERCHANT_CODE", "env-merchant")
        monkeypatch.setenv("AINFINIT_SECRET_KEY", "4UafmbIJroNY2lXX")
        client = AinfinitClient.load()
        assert client.config.merchant_code == "env-merchant"
        client.close()

    def test_context_manager_closes_transport(self, config):
        """Should close the transport on exit"""
        http = MagicMock()
        with AinfinitClient(config, http_client=http) as client:
            assert client.http is http
        http.close.assert_called_once()

    def test_debug_enables_sdk_logging(self, config):
        """Should switch the SDK logger to DEBUG when debug is set"""
        logger = get_logger()
        previous = logger.level
        try:
            debug_config = config.model_copy(update={"debug": True})
            AinfinitClient(debug_config, http_client=MagicMock())
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)

    def test_services_share_client(self, client: AinfinitClient):
        """Should expose one service per resource group"""
        for service in (client.devices, client.products, client.advertisements, client.operations):
            assert service._client is client


class TestClientSignature:
    """Tests for get_signature"""

    def test_uses_clock(self, client: AinfinitClient):
        """Should sign with the client clock"""
        assert client.get_signature() == EXPECTED_TOKEN

    def test_explicit_timestamp(self, client: AinfinitClient):
        """Should sign an explicit timestamp"""
        assert client.get_signature(1557218157315) == EXPECTED_TOKEN
        assert client.get_signature(1) != EXPECTED_TOKEN


class TestClientCall:
    """Tests for call"""

    def test_drops_none_params(self, client: AinfinitClient, transport):
        """Should leave None query values out"""
        client.call("device.info", ApiResponse, params={"code": "VM001", "page": None})
        assert transport.last_query() == {"code": ["VM001"]}

    def test_unknown_operation(self, client: AinfinitClient, transport):
        """Should fail for an operation missing from the endpoint table"""
        with pytest.raises(KeyError):
            client.call("device.reboot", ApiResponse)
        assert transport.requests == []

    def test_http_error_passes_through(self, client: AinfinitClient, transport):
        """Should surface non-2xx HTTP statuses as ApiError"""
        transport.queue({"status": 500}, status_code=500)
        with pytest.raises(ApiError) as exc_info:
            client.call("device.info", ApiResponse)
        assert exc_info.value.category == AinfinitErrorCategory.PROTOCOL

    def test_envelope_status_201_is_success(self, client: AinfinitClient, transport):
        """Should accept any 2xx envelope status"""
        transport.queue({"status": 201, "message": "created", "ok": True})
        result = client.call("device.info", ApiResponse)
        assert result.is_success is True
        assert result.ok is True

    def test_null_envelope_fields_use_defaults(self, client: AinfinitClient, transport):
        """Should treat null message and ok like missing keys"""
        transport.queue({"status": 200, "message": None, "ok": None})
        result = client.call("device.info", ApiResponse)
        assert result.message == ""
        assert result.ok is None

    def test_null_status_is_failure(self, client: AinfinitClient, transport):
        """Should read a null status as zero, which is not a success"""
        transport.queue({"status": None, "message": "?"})
        with pytest.raises(UnknownStatusError) as exc_info:
            client.call("device.info", ApiResponse)
        assert exc_info.value.status == 0

    def test_list_body_is_malformed(self, client: AinfinitClient, transport):
        """Should reject a JSON array envelope"""
        transport.queue("[]")
        with pytest.raises(NetworkError) as exc_info:
            client.call("device.info", ApiResponse)
        assert exc_info.value.category == AinfinitErrorCategory.TRANSPORT


class TestErrors:
    """Tests for the error hierarchy"""

    def test_to_dict(self):
        """Should serialize code, category and details"""
        error = AinfinitError("boom", code="CRYPTO01", details={"key_length": 5})
        data = error.to_dict()
        assert data["name"] == "AinfinitError"
        assert data["category"] == "CRYPTO"
        assert data["details"] == {"key_length": 5}

    def test_description_is_tagged(self):
        """Should tag descriptions with the SDK origin"""
        error = NetworkError.timeout()
        assert error.get_description() == "[ainfinit] [NET01] Request timed out (HTTP 408)"

    def test_unknown_category(self):
        """Should fall back to UNKNOWN without a recognised code"""
        assert AinfinitError("x").category == AinfinitErrorCategory.UNKNOWN
        assert AinfinitError("x", code="ZZZ").is_category(AinfinitErrorCategory.UNKNOWN)


class TestLogging:
    """Tests for logging helpers"""

    def test_child_logger_names(self):
        """Should nest loggers under the SDK namespace"""
        assert get_logger().name == "ainfinit_sdk"
        assert get_logger("services").name == "ainfinit_sdk.services"
        assert get_logger("ainfinit_sdk.client").name == "ainfinit_sdk.client"

    def test_enable_debug_logging_once(self):
        """Should not stack handlers across repeated calls"""
        logger = get_logger()
        saved_handlers, saved_level = list(logger.handlers), logger.level
        for handler in saved_handlers:
            logger.removeHandler(handler)
        try:
            enable_debug_logging()
            enable_debug_logging()
            assert len(logger.handlers) == 1
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            for handler in saved_handlers:
                logger.addHandler(handler)
            logger.setLevel(saved_level)

    def test_custom_handler(self):
        """Should attach a caller-supplied handler"""
        handler = logging.NullHandler()
        logger = enable_debug_logging(handler)
        try:
            assert handler in logger.handlers
        finally:
            logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
