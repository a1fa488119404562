"""
HTTP Client Unit Tests
"""

from unittest.mock import MagicMock

import pytest
import requests

from ainfinit_sdk.client import HttpClient, HttpMethod, HttpRequestOptions
from ainfinit_sdk.config import AinfinitConfig
from ainfinit_sdk.exceptions import ApiError, NetworkError


@pytest.fixture
def http_client(config: AinfinitConfig, transport, monkeypatch) -> HttpClient:
    client = HttpClient(config)
    monkeypatch.setattr(client._session, "send", transport)
    return client


class TestHttpClientRequests:
    """Tests for request shaping"""

    def test_builds_url_from_base(self, http_client: HttpClient, transport):
        """Should prefix the path with the configured base URL"""
        http_client.get("/facade/open/goods/latestInfo")
        assert transport.last.url == "https://api.test.local/facade/open/goods/latestInfo"

    def test_default_headers(self, http_client: HttpClient, transport):
        """Should send Accept, User-Agent and a request ID"""
        http_client.get("/x")
        headers = transport.last.headers
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"] == "ainfinit-sdk-python"
        assert headers["X-Request-ID"].startswith("ainfinit-")

    def test_json_body(self, http_client: HttpClient, transport):
        """Should send data as a JSON body"""
        http_client.post("/x", {"name": "vm"})
        assert transport.last.headers["Content-Type"] == "application/json"
        assert transport.last_json() == {"name": "vm"}

    def test_delete_with_body(self, http_client: HttpClient, transport):
        """Should allow a JSON body on DELETE"""
        http_client.delete("/x", {"itemCodes": ["a"]})
        assert transport.last.method == "DELETE"
        assert transport.last_json() == {"itemCodes": ["a"]}

    def test_query_params(self, http_client: HttpClient, transport):
        """Should encode params into the query string"""
        http_client.get("/x", HttpRequestOptions(params={"code": "VM1", "page": 2}))
        assert transport.last_query() == {"code": ["VM1"], "page": ["2"]}

    def test_multipart(self, http_client: HttpClient, transport):
        """Should send files as multipart with the item part first"""
        http_client.request(
            HttpMethod.POST,
            "/x",
            options=HttpRequestOptions(files=[
                ("item", (None, '{"name":"Cola"}', "application/json")),
                ("file", ("cola.png", b"\x89PNG", "image/png")),
            ]),
        )
        prepared = transport.last
        assert prepared.headers["Content-Type"].startswith("multipart/form-data")
        body = prepared.body
        assert b'name="item"' in body
        assert b'{"name":"Cola"}' in body
        assert b'filename="cola.png"' in body
        assert body.index(b'name="item"') < body.index(b'name="file"')

    def test_custom_headers(self, http_client: HttpClient, transport):
        """Should merge per-request headers"""
        http_client.get("/x", HttpRequestOptions(headers={"Authorization": "token"}))
        assert transport.last.headers["Authorization"] == "token"

    def test_returns_text_for_non_json(self, http_client: HttpClient, transport):
        """Should return raw text when the body is not JSON"""
        transport.queue("plain text")
        response = http_client.get("/x")
        assert response.data == "plain text"
        assert response.status == 200

    def test_request_interceptor(self, http_client: HttpClient, transport):
        """Should apply request interceptors before sending"""
        def add_header(prepared):
            prepared.headers["X-Trace"] = "1"
            return prepared

        http_client.add_request_interceptor(add_header)
        http_client.get("/x")
        assert transport.last.headers["X-Trace"] == "1"


class TestHttpClientErrors:
    """Tests for error normalization"""

    def test_http_error_becomes_api_error(self, http_client: HttpClient, transport):
        """Should raise ApiError carrying status and body"""
        transport.queue("bad gateway", status_code=502)
        with pytest.raises(ApiError) as exc_info:
            http_client.get("/x")
        assert exc_info.value.status_code == 502
        assert exc_info.value.body == "bad gateway"
        assert exc_info.value.code == "HTTP502"

    def test_timeout(self, http_client: HttpClient, transport):
        """Should raise NetworkError NET01 on timeout"""
        transport.fail(requests.exceptions.ReadTimeout("slow"))
        with pytest.raises(NetworkError) as exc_info:
            http_client.get("/x")
        assert exc_info.value.code == "NET01"

    def test_connection_error(self, http_client: HttpClient, transport):
        """Should raise NetworkError NET02 on connection failure"""
        transport.fail(requests.exceptions.ConnectionError("refused"))
        with pytest.raises(NetworkError) as exc_info:
            http_client.get("/x")
        assert exc_info.value.code == "NET02"

    def test_ssl_error(self, http_client: HttpClient, transport):
        """Should raise NetworkError NET04 on TLS failure"""
        transport.fail(requests.exceptions.SSLError("bad cert"))
        with pytest.raises(NetworkError) as exc_info:
            http_client.get("/x")
        assert exc_info.value.code == "NET04"

    def test_no_retry(self, http_client: HttpClient, transport):
        """Should attempt a failing request exactly once"""
        transport.fail(requests.exceptions.ConnectionError("refused"))
        with pytest.raises(NetworkError):
            http_client.get("/x")
        assert len(transport.requests) == 1

    def test_cause_is_kept(self, http_client: HttpClient, transport):
        """Should chain the original exception"""
        error = requests.exceptions.ConnectionError("refused")
        transport.fail(error)
        with pytest.raises(NetworkError) as exc_info:
            http_client.get("/x")
        assert exc_info.value.__cause__ is error


class TestHttpClientAudit:
    """Tests for audit entries"""

    def test_audit_callback_redacts(self, config: AinfinitConfig, transport, monkeypatch):
        """Should emit audit entries with sensitive values redacted"""
        audited = AinfinitConfig(**{**config.model_dump(), "enable_audit_log": True})
        client = HttpClient(audited)
        monkeypatch.setattr(client._session, "send", transport)
        callback = MagicMock()
        client.set_audit_log_callback(callback)

        transport.queue({"status": 200, "nonce_str": "abc"})
        client.post(
            "/x",
            {"secret_key": "s"},
            HttpRequestOptions(headers={"Authorization": "token"}),
        )

        entry = callback.call_args[0][0]
        assert entry.success is True
        assert entry.headers["Authorization"] == "[REDACTED]"
        assert entry.body == {"secret_key": "[REDACTED]"}
        assert entry.response["body"]["nonce_str"] == "[REDACTED]"

    def test_audit_disabled_by_default(self, http_client: HttpClient, transport):
        """Should not call the callback unless audit logging is enabled"""
        callback = MagicMock()
        http_client.set_audit_log_callback(callback)
        http_client.get("/x")
        callback.assert_not_called()

    def test_audit_records_failure(self, config: AinfinitConfig, transport, monkeypatch):
        """Should record failed requests with their error"""
        client = HttpClient(AinfinitConfig(**{**config.model_dump(), "enable_audit_log": True}))
        monkeypatch.setattr(client._session, "send", transport)
        callback = MagicMock()
        client.set_audit_log_callback(callback)

        transport.fail(requests.exceptions.ConnectionError("refused"))
        with pytest.raises(NetworkError):
            client.get("/x")

        entry = callback.call_args[0][0]
        assert entry.success is False
        assert "refused" in entry.error

    def test_no_entry_built_when_inactive(self, http_client: HttpClient, transport, monkeypatch):
        """Should skip building entries without debug or an audit callback"""
        create_entry = MagicMock()
        monkeypatch.setattr(http_client, "_create_audit_entry", create_entry)

        http_client.get("/x")
        transport.fail(requests.exceptions.ConnectionError("refused"))
        with pytest.raises(NetworkError):
            http_client.get("/x")

        create_entry.assert_not_called()

    def test_no_entry_built_without_callback(self, config: AinfinitConfig, transport, monkeypatch):
        """Should skip building entries when audit logging has no callback"""
        client = HttpClient(AinfinitConfig(**{**config.model_dump(), "enable_audit_log": True}))
        monkeypatch.setattr(client._session, "send", transport)
        create_entry = MagicMock()
        monkeypatch.setattr(client, "_create_audit_entry", create_entry)

        client.get("/x")

        create_entry.assert_not_called()

    def test_entry_built_for_debug(self, config: AinfinitConfig, transport, monkeypatch):
        """Should build entries for debug logging without a callback"""
        client = HttpClient(config.model_copy(update={"debug": True}))
        monkeypatch.setattr(client._session, "send", transport)
        create_entry = MagicMock(wraps=client._create_audit_entry)
        monkeypatch.setattr(client, "_create_audit_entry", create_entry)

        client.get("/x")

        create_entry.assert_called_once()
