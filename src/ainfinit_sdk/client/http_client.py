"""
HTTP transport layer for the Ainfinit API
Handles HTTP communication with interceptors, request IDs, redacted audit
entries and connection pooling. Requests are attempted exactly once.
"""

import time
import uuid
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

import requests
from requests.adapters import HTTPAdapter

from ainfinit_sdk.config.ainfinit_config import AinfinitConfig
from ainfinit_sdk.endpoints import HttpMethod
from ainfinit_sdk.exceptions import AinfinitError, ApiError, NetworkError


# Type variable for generic response
T = TypeVar("T")

# Logger for this module
logger = logging.getLogger(__name__)

# Multipart part: (field name, (filename or None, content, content type))
MultipartPart = Tuple[str, Tuple[Optional[str], Union[bytes, str], str]]


class NetworkErrorCode(str, Enum):
    """Network error codes"""
    TIMEOUT = "NET01"
    CONNECTION_FAILED = "NET02"
    SSL_ERROR = "NET04"
    NO_RESPONSE = "NET06"
    MALFORMED_RESPONSE = "NET08"
    UNKNOWN = "NET10"


@dataclass
class HttpRequestOptions:
    """Request options for HTTP client"""
    headers: Optional[Dict[str, str]] = None
    params: Optional[Dict[str, Any]] = None
    files: Optional[Sequence[MultipartPart]] = None
    timeout: Optional[int] = None  # milliseconds
    metadata: Optional[Dict[str, Any]] = None


@dataclass
class HttpResponse(Generic[T]):
    """HTTP response wrapper"""
    data: T
    status: int
    headers: Dict[str, str]
    duration: int  # milliseconds
    request_id: str


@dataclass
class HttpAuditEntry:
    """Audit log entry for HTTP requests"""
    timestamp: str
    request_id: str
    method: str
    url: str
    headers: Dict[str, str]
    params: Optional[Dict[str, Any]] = None
    body: Optional[Any] = None
    response: Optional[Dict[str, Any]] = None
    duration: int = 0
    success: bool = False
    error: Optional[str] = None


# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "secret_key",
    "secretkey",
    "nonce_str",
]


# Request interceptor type
RequestInterceptor = Callable[[requests.PreparedRequest], requests.PreparedRequest]

# Response interceptor type
ResponseInterceptor = Callable[[requests.Response], requests.Response]


class HttpClient:
    """
    HTTP Client for the Ainfinit API

    Features:
    - Request/response interceptors
    - Request ID generation for traceability
    - Redacted audit entries and DEBUG request logging
    - Connection keep-alive via session pooling

    Example:
        >>> config = AinfinitConfig(merchant_code="m", secret_key="k" * 16)
        >>> client = HttpClient(config)
        >>> response = client.get("/facade/open/goods/latestInfo")
        >>> print(response.data)
    """

    def __init__(self, config: AinfinitConfig) -> None:
        """
        Create a new HTTP client instance

        Args:
            config: Resolved Ainfinit configuration
        """
        self.config = config

        # Custom interceptors
        self._request_interceptors: List[RequestInterceptor] = []
        self._response_interceptors: List[ResponseInterceptor] = []

        # Audit logging callback
        self._audit_log_callback: Optional[Callable[[HttpAuditEntry], None]] = None

        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with connection pooling"""
        session = requests.Session()

        # Content-Type is left to requests so JSON and multipart both work
        session.headers.update({
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        })

        adapter = HTTPAdapter(
            pool_connections=10,
            pool_maxsize=10,
            max_retries=0,
        )

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _generate_request_id(self) -> str:
        """Generate unique request ID for traceability"""
        timestamp = hex(int(time.time() * 1000))[2:]
        unique_id = uuid.uuid4().hex[:8]
        return f"ainfinit-{timestamp}-{unique_id}"

    def _redact_sensitive_data(self, obj: Any) -> Any:
        """Redact sensitive data from object for logging"""
        if obj is None:
            return obj

        if isinstance(obj, str):
            return obj

        if isinstance(obj, list):
            return [self._redact_sensitive_data(item) for item in obj]

        if isinstance(obj, dict):
            redacted = {}
            for key, value in obj.items():
                lower_key = str(key).lower()
                is_sensitive = any(
                    field in lower_key for field in SENSITIVE_FIELDS
                )

                if is_sensitive:
                    redacted[key] = "[REDACTED]"
                elif isinstance(value, (dict, list)):
                    redacted[key] = self._redact_sensitive_data(value)
                else:
                    redacted[key] = value
            return redacted

        return obj

    def _normalize_error(
        self, error: requests.exceptions.RequestException,
        response: Optional[requests.Response] = None,
    ) -> AinfinitError:
        """Map a requests exception onto the SDK error taxonomy"""
        if isinstance(error, requests.exceptions.Timeout):
            return NetworkError.timeout(cause=error)

        if isinstance(error, requests.exceptions.SSLError):
            return NetworkError.ssl_error(f"SSL/TLS error: {error}", cause=error)

        if isinstance(error, requests.exceptions.ConnectionError):
            return NetworkError.connection_error(
                f"Connection error: {error}", cause=error
            )

        if isinstance(error, requests.exceptions.HTTPError) and response is not None:
            body = response.text
            return ApiError(
                f"HTTP {response.status_code}: {body[:200] if body else response.reason}",
                status_code=response.status_code,
                body=body,
                cause=error,
            )

        return NetworkError(
            f"Request error: {error}",
            network_code=NetworkErrorCode.UNKNOWN.value,
            cause=error,
        )

    def _create_audit_entry(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        params: Optional[Dict[str, Any]],
        body: Optional[Any],
        request_id: str,
        start_time: float,
        response: Optional[requests.Response] = None,
        error: Optional[Exception] = None,
    ) -> HttpAuditEntry:
        """Create audit log entry"""
        duration = int((time.time() - start_time) * 1000)

        response_data = None
        if response is not None:
            try:
                response_body = response.json()
            except ValueError:
                response_body = response.text[:500] if response.text else None

            response_data = {
                "statusCode": response.status_code,
                "body": self._redact_sensitive_data(response_body),
            }

        return HttpAuditEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            request_id=request_id,
            method=method,
            url=url,
            headers=self._redact_sensitive_data(dict(headers)),
            params=params,
            body=self._redact_sensitive_data(body),
            response=response_data,
            duration=duration,
            success=error is None,
            error=str(error) if error else None,
        )

    @property
    def _audit_active(self) -> bool:
        # Entries are only built when debug logging or a callback consumes them
        return self.config.debug or (
            self.config.enable_audit_log and self._audit_log_callback is not None
        )

    def _log_audit(self, entry: HttpAuditEntry) -> None:
        if self.config.debug:
            logger.debug(
                f"{entry.method} {entry.url} [{entry.request_id}] "
                f"params={entry.params} body={entry.body} "
                f"response={entry.response} duration={entry.duration}ms"
                + (f" error={entry.error}" if entry.error else "")
            )
        if self.config.enable_audit_log and self._audit_log_callback:
            self._audit_log_callback(entry)

    def add_request_interceptor(self, interceptor: RequestInterceptor) -> None:
        """Add a custom request interceptor"""
        self._request_interceptors.append(interceptor)

    def add_response_interceptor(self, interceptor: ResponseInterceptor) -> None:
        """Add a custom response interceptor"""
        self._response_interceptors.append(interceptor)

    def set_audit_log_callback(
        self, callback: Callable[[HttpAuditEntry], None]
    ) -> None:
        """Set audit log callback"""
        self._audit_log_callback = callback

    def _apply_request_interceptors(
        self, prepared: requests.PreparedRequest
    ) -> requests.PreparedRequest:
        for interceptor in self._request_interceptors:
            prepared = interceptor(prepared)
        return prepared

    def _apply_response_interceptors(
        self, response: requests.Response
    ) -> requests.Response:
        for interceptor in self._response_interceptors:
            response = interceptor(response)
        return response

    def request(
        self,
        method: HttpMethod,
        url: str,
        data: Optional[Any] = None,
        options: Optional[HttpRequestOptions] = None,
    ) -> HttpResponse[Any]:
        """
        Execute one HTTP request

        ``data`` is sent as a JSON body; multipart parts in ``options.files``
        take precedence over it. The decoded JSON body is returned, or the
        raw text when the body is not JSON.

        Args:
            method: HTTP method
            url: Request path (relative to base URL)
            data: JSON-serializable request body
            options: Optional request options

        Returns:
            HTTP response wrapper

        Raises:
            NetworkError: On timeout or connection failure
            ApiError: On a non-2xx HTTP status
        """
        options = options or HttpRequestOptions()

        full_url = f"{self.config.get_resolved_base_url()}{url}"
        timeout_seconds = (options.timeout or self.config.timeout) / 1000.0

        start_time = time.time()
        request_id = self._generate_request_id()

        headers = dict(self._session.headers)
        headers["X-Request-ID"] = request_id
        if options.headers:
            headers.update(options.headers)

        response: Optional[requests.Response] = None

        try:
            if options.files:
                request = requests.Request(
                    method=method.value,
                    url=full_url,
                    headers=headers,
                    params=options.params,
                    files=list(options.files),
                )
            else:
                request = requests.Request(
                    method=method.value,
                    url=full_url,
                    headers=headers,
                    params=options.params,
                    json=data,
                )
            prepared = self._session.prepare_request(request)
            prepared = self._apply_request_interceptors(prepared)

            response = self._session.send(prepared, timeout=timeout_seconds)
            response = self._apply_response_interceptors(response)

            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            if self._audit_active:
                self._log_audit(self._create_audit_entry(
                    method=method.value,
                    url=full_url,
                    headers=headers,
                    params=options.params,
                    body=data,
                    request_id=request_id,
                    start_time=start_time,
                    response=response,
                    error=e,
                ))
            raise self._normalize_error(e, response) from e

        if self._audit_active:
            self._log_audit(self._create_audit_entry(
                method=method.value,
                url=full_url,
                headers=headers,
                params=options.params,
                body=data,
                request_id=request_id,
                start_time=start_time,
                response=response,
            ))

        try:
            response_data = response.json()
        except ValueError:
            response_data = response.text

        return HttpResponse(
            data=response_data,
            status=response.status_code,
            headers=dict(response.headers),
            duration=int((time.time() - start_time) * 1000),
            request_id=request_id,
        )

    def get(
        self,
        url: str,
        options: Optional[HttpRequestOptions] = None,
    ) -> HttpResponse[Any]:
        """Perform GET request"""
        return self.request(HttpMethod.GET, url, None, options)

    def post(
        self,
        url: str,
        data: Optional[Any] = None,
        options: Optional[HttpRequestOptions] = None,
    ) -> HttpResponse[Any]:
        """Perform POST request"""
        return self.request(HttpMethod.POST, url, data, options)

    def put(
        self,
        url: str,
        data: Optional[Any] = None,
        options: Optional[HttpRequestOptions] = None,
    ) -> HttpResponse[Any]:
        """Perform PUT request"""
        return self.request(HttpMethod.PUT, url, data, options)

    def delete(
        self,
        url: str,
        data: Optional[Any] = None,
        options: Optional[HttpRequestOptions] = None,
    ) -> HttpResponse[Any]:
        """Perform DELETE request, optionally with a JSON body"""
        return self.request(HttpMethod.DELETE, url, data, options)

    @property
    def base_url(self) -> str:
        """Get base URL"""
        return self.config.get_resolved_base_url()

    def close(self) -> None:
        """Close the HTTP session"""
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
