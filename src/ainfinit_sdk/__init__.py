"""
Ainfinit Vending Platform SDK for Python

Main entry point for the SDK
"""

from ainfinit_sdk.client import AinfinitClient
from ainfinit_sdk.exceptions import (
    AinfinitError,
    AinfinitErrorCategory,
    ApiError,
    ConfigError,
    CryptoError,
    EncodingError,
    NetworkError,
    StatusError,
    UnknownStatusError,
    ValidationError,
)

# HTTP Client
from ainfinit_sdk.client import (
    HttpClient,
    HttpMethod,
    HttpRequestOptions,
    HttpResponse,
    HttpAuditEntry,
    NetworkErrorCode,
)

# Configuration
from ainfinit_sdk.config import (
    AinfinitConfig,
    ConfigLoader,
    ConfigValidator,
    DEFAULT_BASE_URL,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

# Signing
from ainfinit_sdk.crypto import (
    Credentials,
    EncryptUtil,
    SignatureGenerator,
    generate_signature,
)

# Endpoints, status codes and callbacks
from ainfinit_sdk.endpoints import ENDPOINTS, Endpoint
from ainfinit_sdk.status_codes import (
    StatusCode,
    is_success_status,
    to_status_error,
)
from ainfinit_sdk.callbacks import CallbackAck, CallbackType, parse_callback

# Services
from ainfinit_sdk.services import (
    AdvertisementService,
    DeviceService,
    OperationService,
    ProductService,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "AinfinitClient",
    # HTTP Client
    "HttpClient",
    "HttpMethod",
    "HttpRequestOptions",
    "HttpResponse",
    "HttpAuditEntry",
    "NetworkErrorCode",
    # Exceptions
    "AinfinitError",
    "AinfinitErrorCategory",
    "ApiError",
    "ConfigError",
    "CryptoError",
    "EncodingError",
    "NetworkError",
    "StatusError",
    "UnknownStatusError",
    "ValidationError",
    # Configuration
    "AinfinitConfig",
    "ConfigLoader",
    "ConfigValidator",
    "DEFAULT_BASE_URL",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    # Signing
    "Credentials",
    "EncryptUtil",
    "SignatureGenerator",
    "generate_signature",
    # Endpoints, status codes and callbacks
    "ENDPOINTS",
    "Endpoint",
    "StatusCode",
    "is_success_status",
    "to_status_error",
    "CallbackAck",
    "CallbackType",
    "parse_callback",
    # Services
    "AdvertisementService",
    "DeviceService",
    "OperationService",
    "ProductService",
]
