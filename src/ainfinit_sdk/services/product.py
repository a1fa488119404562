"""
Product service
Catalog queries and new product applications
"""

import logging
from typing import Any, Mapping, Optional, Union

from ainfinit_sdk.models.common import coerce_request
from ainfinit_sdk.models.product import (
    LastInfoResponse,
    ListProductApplicationRequest,
    ListProductApplicationResponse,
    MutualExclusionRequest,
    MutualExclusionResponse,
    NewProductApplication,
    NewProductApplicationResponse,
    ProductApplicationDetailResponse,
    ProductDetailResponse,
    ProductListRequest,
    ProductListResponse,
    UpdateProductApplication,
    UpdateProductApplicationResponse,
)
from ainfinit_sdk.services.base import BaseService

logger = logging.getLogger(__name__)

RequestLike = Union[Any, Mapping[str, Any]]


class ProductService(BaseService):
    """Product catalog and product applications"""

    def latest_info(self) -> LastInfoResponse:
        """Product count and time of the last catalog change"""
        logger.debug("Getting latest product info")
        result = self._client.call("product.latest_info", LastInfoResponse)
        logger.debug(f"Catalog has {result.data.count} products")
        return result

    def list(self, request: Optional[RequestLike] = None) -> ProductListResponse:
        """List catalog products, optionally filtered by name, barcode or update time"""
        req = coerce_request(ProductListRequest, request, allow_none=True)
        params = req.to_wire() if req is not None else {}

        logger.debug(f"Listing products {params}")
        result = self._client.call("product.list", ProductListResponse, params=params)
        logger.debug(f"Listed {len(result.data.rows)} of {result.data.total} products")
        return result

    def detail(self, item_code: str) -> ProductDetailResponse:
        self._require(item_code, "item_code")

        logger.debug(f"Getting product {item_code}")
        result = self._client.call(
            "product.detail",
            ProductDetailResponse,
            path_params={"item_code": item_code},
        )
        logger.debug(f"Got product {item_code}")
        return result

    def mutual_exclusion(self, request: RequestLike) -> MutualExclusionResponse:
        """Item codes that cannot be sold in the same machine as the given ones"""
        req = coerce_request(MutualExclusionRequest, request)

        logger.debug(f"Getting mutual exclusion for {req.item_codes}")
        result = self._client.call(
            "product.mutual_exclusion", MutualExclusionResponse, body=req.to_wire()
        )
        logger.debug(f"Got {result.data.total} mutually exclusive products")
        return result

    def create_application(
        self, request: RequestLike
    ) -> NewProductApplicationResponse:
        """
        Submit a new product for review

        The product fields are sent as the JSON ``item`` part of a multipart
        request, followed by the product images (``file``), the physical
        photos (``files``) and the weight picture (``weightFile``).

        Args:
            request: Product to submit; ``name`` must be non-empty and
                ``price`` positive

        Returns:
            Envelope whose ``data`` is the new application ID

        Raises:
            ValidationError: If the application is invalid
        """
        req = coerce_request(NewProductApplication, request)

        logger.debug(f"Creating product application {req.name}")
        result = self._client.call(
            "product.application_create",
            NewProductApplicationResponse,
            files=req.multipart_parts(),
        )
        logger.debug(f"Created product application {result.data}")
        return result

    def list_applications(
        self, request: Optional[RequestLike] = None
    ) -> ListProductApplicationResponse:
        req = coerce_request(ListProductApplicationRequest, request, allow_none=True)
        params = req.to_wire() if req is not None else {}

        logger.debug(f"Listing product applications {params}")
        result = self._client.call(
            "product.application_list", ListProductApplicationResponse, params=params
        )
        logger.debug(
            f"Listed {len(result.data.rows)} of {result.data.total} product applications"
        )
        return result

    def application_detail(self, item_code: str) -> ProductApplicationDetailResponse:
        self._require(item_code, "item_code")

        logger.debug(f"Getting product application {item_code}")
        result = self._client.call(
            "product.application_detail",
            ProductApplicationDetailResponse,
            path_params={"item_code": item_code},
        )
        logger.debug(f"Got product application {item_code}")
        return result

    def update_application(
        self, request: RequestLike
    ) -> UpdateProductApplicationResponse:
        """
        Change a pending product application

        Raises:
            ValidationError: If ``id`` is zero
        """
        req = coerce_request(UpdateProductApplication, request)

        logger.debug(f"Updating product application {req.id}")
        result = self._client.call(
            "product.application_update",
            UpdateProductApplicationResponse,
            files=req.multipart_parts(),
        )
        logger.debug(f"Product application {req.id} updated")
        return result
