"""
HTTP Client module for the Ainfinit SDK
"""

from ainfinit_sdk.client.ainfinit_client import AinfinitClient
from ainfinit_sdk.client.http_client import (
    HttpClient,
    HttpRequestOptions,
    HttpResponse,
    HttpAuditEntry,
    MultipartPart,
    NetworkErrorCode,
    RequestInterceptor,
    ResponseInterceptor,
)
from ainfinit_sdk.endpoints import HttpMethod

__all__ = [
    "AinfinitClient",
    "HttpClient",
    "HttpMethod",
    "HttpRequestOptions",
    "HttpResponse",
    "HttpAuditEntry",
    "MultipartPart",
    "NetworkErrorCode",
    "RequestInterceptor",
    "ResponseInterceptor",
]
