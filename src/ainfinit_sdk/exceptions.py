"""Exception classes for the Ainfinit SDK"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class AinfinitErrorCategory(str, Enum):
    """Ainfinit error category codes"""
    TRANSPORT = "NET"
    PROTOCOL = "HTTP"
    STATUS = "STATUS"
    VALIDATION = "VAL"
    CRYPTO = "CRYPTO"
    ENCODING = "ENCODING"
    CONFIG = "CONFIG"
    UNKNOWN = "UNKNOWN"


class AinfinitError(Exception):
    """
    Base exception for Ainfinit errors

    All errors raised by the SDK extend from this class, so callers can
    catch a single type and still tell transport, protocol and vendor
    status failures apart through ``category``.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now(timezone.utc)
        self.category = self._determine_category(code)

    def _determine_category(self, code: Optional[str]) -> AinfinitErrorCategory:
        """Determine error category from code"""
        if not code:
            return AinfinitErrorCategory.UNKNOWN

        if code.startswith("NET"):
            return AinfinitErrorCategory.TRANSPORT
        if code.startswith("HTTP"):
            return AinfinitErrorCategory.PROTOCOL
        if code.startswith("STATUS"):
            return AinfinitErrorCategory.STATUS
        if code.startswith("VAL"):
            return AinfinitErrorCategory.VALIDATION
        if code.startswith("CRYPTO"):
            return AinfinitErrorCategory.CRYPTO
        if code.startswith("ENCODING"):
            return AinfinitErrorCategory.ENCODING
        if code.startswith("CONFIG"):
            return AinfinitErrorCategory.CONFIG

        return AinfinitErrorCategory.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "code": self.code,
            "status_code": self.status_code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def has_code(self, code: str) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_category(self, category: AinfinitErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category

    def get_description(self) -> str:
        """Get human-readable error description, tagged with the SDK origin"""
        parts = ["[ainfinit]", str(self)]

        if self.code:
            parts.insert(1, f"[{self.code}]")

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        return " ".join(parts)


class ValidationError(AinfinitError):
    """Invalid request object or configuration, raised before any network call"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field


class NetworkError(AinfinitError):
    """
    Transport error: the request never produced a usable response
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        network_code: str = "NET10",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message, code=network_code, status_code=status_code, cause=cause
        )
        self.network_code = network_code

    @classmethod
    def timeout(
        cls, message: str = "Request timed out", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create a timeout error"""
        return cls(message, status_code=408, network_code="NET01", cause=cause)

    @classmethod
    def connection_error(
        cls, message: str = "Connection failed", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create a connection error"""
        return cls(message, network_code="NET02", cause=cause)

    @classmethod
    def ssl_error(
        cls, message: str = "SSL/TLS error", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create an SSL error"""
        return cls(message, network_code="NET04", cause=cause)

    @classmethod
    def malformed_response(
        cls, message: str = "Malformed response body", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create an error for a response that could not be decoded"""
        return cls(message, network_code="NET08", cause=cause)


class ApiError(AinfinitError):
    """
    Protocol error: the platform answered with a non-2xx HTTP status

    The raw response body is kept on ``body`` for diagnostics.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Optional[str] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message, code=f"HTTP{status_code}", status_code=status_code, cause=cause
        )
        self.body = body


class StatusError(AinfinitError):
    """
    Application error: HTTP succeeded but the envelope ``status`` is a failure

    Attributes:
        status: Numeric vendor status code
        name: Symbolic name from the operation's status table
        description: Human-readable meaning of the status
        remote_message: ``message`` field from the response envelope
        group: Resource group that raised it (device, product, ...)
    """

    def __init__(
        self,
        status: int,
        description: str,
        remote_message: str = "",
        name: Optional[str] = None,
        group: Optional[str] = None,
    ) -> None:
        message = f"{description} (status {status})"
        if remote_message:
            message = f"{message}: {remote_message}"
        super().__init__(
            message,
            code="STATUS",
            details={"status": status, "name": name, "group": group},
        )
        self.status = status
        self.name = name
        self.description = description
        self.remote_message = remote_message
        self.group = group


class UnknownStatusError(StatusError):
    """Failure status that no status table documents"""

    def __init__(
        self,
        status: int,
        remote_message: str = "",
        group: Optional[str] = None,
    ) -> None:
        super().__init__(
            status,
            f"Unknown status code: {status}",
            remote_message=remote_message,
            group=group,
        )


class CryptoError(AinfinitError):
    """Cryptographic operation error"""

    def __init__(
        self,
        message: str,
        code: str = "CRYPTO01",
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, cause=cause, details=details)


class EncodingError(AinfinitError):
    """JSON, base64 or text encoding failure"""

    def __init__(
        self,
        message: str,
        code: str = "ENCODING01",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code=code, cause=cause)


class ConfigError(AinfinitError):
    """Configuration error"""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
