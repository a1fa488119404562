"""
Ainfinit API client

Holds the merchant credentials and the HTTP transport, signs every request
and exposes the device, product, advertisement and operation services.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Type, TypeVar, Union

import pydantic

from ainfinit_sdk.client.http_client import HttpClient, HttpRequestOptions, MultipartPart
from ainfinit_sdk.config.ainfinit_config import AinfinitConfig
from ainfinit_sdk.config.config_loader import ConfigLoader
from ainfinit_sdk.crypto.signature import Clock, Credentials, SignatureGenerator
from ainfinit_sdk.endpoints import ENDPOINTS
from ainfinit_sdk.exceptions import NetworkError
from ainfinit_sdk.models.common import ApiResponse
from ainfinit_sdk.services.advertisement import AdvertisementService
from ainfinit_sdk.services.device import DeviceService
from ainfinit_sdk.services.operation import OperationService
from ainfinit_sdk.services.product import ProductService
from ainfinit_sdk.status_codes import StatusTable, is_success_status, to_status_error
from ainfinit_sdk.utils.logger import enable_debug_logging

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ApiResponse)


class AinfinitClient:
    """
    Entry point of the SDK

    Example:
        >>> client = AinfinitClient.from_credentials("merchant", "4UafmbIJroNY2lXX")
        >>> machines = client.devices.list()
        >>> for machine in machines.data.rows:
        ...     print(machine.name)
        >>> client.close()
    """

    def __init__(
        self,
        config: AinfinitConfig,
        http_client: Optional[HttpClient] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Create a client

        Args:
            config: Resolved configuration
            http_client: Transport to use instead of one built from ``config``
            clock: Millisecond clock used for signatures
        """
        self.config = config
        self.credentials = Credentials(config.merchant_code, config.secret_key)
        self._signer = SignatureGenerator(self.credentials, clock=clock)
        self._http = http_client or HttpClient(config)

        if config.debug:
            enable_debug_logging()

        self.devices = DeviceService(self)
        self.products = ProductService(self)
        self.advertisements = AdvertisementService(self)
        self.operations = OperationService(self)

    @classmethod
    def from_credentials(
        cls,
        merchant_code: str,
        secret_key: str,
        base_url: Optional[str] = None,
        **options: Any,
    ) -> "AinfinitClient":
        """Build a client from credentials plus optional config fields"""
        config = ConfigLoader().load(
            env=False,
            config={
                "merchant_code": merchant_code,
                "secret_key": secret_key,
                "base_url": base_url,
                **options,
            },
        )
        return cls(config)

    @classmethod
    def load(
        cls,
        file: Optional[Union[str, Path]] = None,
        env: bool = True,
        config: Optional[Dict[str, Any]] = None,
    ) -> "AinfinitClient":
        """Build a client from a config file, AINFINIT_* variables and overrides"""
        return cls(ConfigLoader().load(file=file, env=env, config=config))

    @property
    def http(self) -> HttpClient:
        return self._http

    def get_signature(self, timestamp_ms: Optional[int] = None) -> str:
        """Authorization value for ``timestamp_ms``, or for now when omitted"""
        return self._signer.generate(timestamp_ms)

    def call(
        self,
        operation: str,
        response_model: Type[R],
        *,
        path_params: Optional[Dict[str, Union[str, int]]] = None,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
        files: Optional[Sequence[MultipartPart]] = None,
        status_table: Optional[StatusTable] = None,
    ) -> R:
        """
        Send one signed request and parse its envelope

        Args:
            operation: Key in :data:`~ainfinit_sdk.endpoints.ENDPOINTS`
            response_model: Envelope model to parse the body into
            path_params: Values for the endpoint path placeholders
            params: Query parameters; None values are dropped
            body: JSON body
            files: Multipart parts, sent instead of a JSON body
            status_table: Status table used to describe a failing status

        Returns:
            Parsed response envelope

        Raises:
            NetworkError: On transport failure or an unparsable body
            ApiError: On a non-2xx HTTP status
            StatusError: If the envelope status is not 2xx
        """
        endpoint = ENDPOINTS[operation]
        group = operation.split(".", 1)[0]
        url = endpoint.format(**(path_params or {}))

        query = {k: v for k, v in (params or {}).items() if v is not None}
        options = HttpRequestOptions(
            headers={"Authorization": self.get_signature()},
            params=query or None,
            files=files,
            metadata={"operation": operation},
        )

        response = self._http.request(endpoint.method, url, body, options)

        if not isinstance(response.data, dict):
            raise NetworkError.malformed_response(
                f"{operation}: expected a JSON object, got {type(response.data).__name__}"
            )

        try:
            result = response_model.model_validate(response.data)
        except pydantic.ValidationError as e:
            raise NetworkError.malformed_response(
                f"{operation}: response does not match {response_model.__name__}",
                cause=e,
            ) from e

        if not is_success_status(result.status):
            logger.debug(
                f"{operation} failed with status {result.status}: {result.message}"
            )
            raise to_status_error(
                result.status, result.message, table=status_table, group=group
            )

        return result

    def close(self) -> None:
        """Release the underlying HTTP session"""
        self._http.close()

    def __enter__(self) -> "AinfinitClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
