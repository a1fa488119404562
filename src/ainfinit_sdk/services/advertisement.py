"""
Advertisement service
Source material uploads and ad campaigns shown on machine screens
"""

import logging
from typing import Any, Mapping, Optional, Union

from ainfinit_sdk.models.advertisement import (
    AdAdditionRequest,
    AdAdditionResponse,
    AdAssociatedToVmRequest,
    AdAssociatedToVmResponse,
    AdControlStatusResponse,
    AdDeleteResponse,
    AdDetailResponse,
    AdPageRequest,
    AdPageResponse,
    AdStatus,
    AdUpdateRequest,
    AdUpdateResponse,
    SourceMaterialApplyRequest,
    SourceMaterialApplyResponse,
    SourceMaterialDeleteResponse,
    SourceMaterialDetailResponse,
    SourceMaterialPageRequest,
    SourceMaterialPageResponse,
    VmPromotionResponse,
)
from ainfinit_sdk.models.common import coerce_request
from ainfinit_sdk.exceptions import ValidationError
from ainfinit_sdk.services.base import BaseService
from ainfinit_sdk.status_codes import (
    AdDetailStatus,
    AdvertisementStatus,
    SourceMaterialStatus,
)

logger = logging.getLogger(__name__)

RequestLike = Union[Any, Mapping[str, Any]]


class AdvertisementService(BaseService):
    """Advertisement materials and ads"""

    # --- source materials --------------------------------------------------

    def apply_materials(self, request: RequestLike) -> SourceMaterialApplyResponse:
        """Submit uploaded files as advertisement materials for review"""
        req = coerce_request(SourceMaterialApplyRequest, request)

        logger.debug(f"Applying {len(req.source_material_list)} materials")
        result = self._client.call(
            "advertisement.material_apply",
            SourceMaterialApplyResponse,
            body=req.to_wire(),
            status_table=SourceMaterialStatus,
        )
        logger.debug(f"Applied materials {[r.id for r in result.result]}")
        return result

    def list_materials(
        self, request: Optional[RequestLike] = None
    ) -> SourceMaterialPageResponse:
        req = coerce_request(SourceMaterialPageRequest, request, allow_none=True)
        params = req.to_wire() if req is not None else {}

        logger.debug(f"Listing materials {params}")
        result = self._client.call(
            "advertisement.material_list",
            SourceMaterialPageResponse,
            params=params,
            status_table=SourceMaterialStatus,
        )
        logger.debug(f"Listed {len(result.data.rows)} of {result.data.total} materials")
        return result

    def material_detail(self, material_id: Union[int, str]) -> SourceMaterialDetailResponse:
        self._require(material_id, "material_id")

        logger.debug(f"Getting material {material_id}")
        result = self._client.call(
            "advertisement.material_detail",
            SourceMaterialDetailResponse,
            path_params={"material_id": material_id},
            status_table=SourceMaterialStatus,
        )
        logger.debug(f"Got material {material_id}")
        return result

    def delete_material(self, material_id: Union[int, str]) -> SourceMaterialDeleteResponse:
        self._require(material_id, "material_id")

        logger.debug(f"Deleting material {material_id}")
        result = self._client.call(
            "advertisement.material_delete",
            SourceMaterialDeleteResponse,
            path_params={"material_id": material_id},
            status_table=SourceMaterialStatus,
        )
        logger.debug(f"Deleted material {material_id}")
        return result

    # --- ads -----------------------------------------------------------------

    def create_ad(self, request: RequestLike) -> AdAdditionResponse:
        """Create an ad from approved materials"""
        req = coerce_request(AdAdditionRequest, request)

        logger.debug(f"Creating ad {req.name}")
        result = self._client.call(
            "advertisement.create",
            AdAdditionResponse,
            body=req.to_wire(),
            status_table=AdvertisementStatus,
        )
        logger.debug(f"Created ad {result.data.id}")
        return result

    def list_ads(self, request: Optional[RequestLike] = None) -> AdPageResponse:
        req = coerce_request(AdPageRequest, request, allow_none=True)
        params = req.to_wire() if req is not None else {}

        logger.debug(f"Listing ads {params}")
        result = self._client.call(
            "advertisement.list",
            AdPageResponse,
            params=params,
            status_table=AdvertisementStatus,
        )
        logger.debug(f"Listed {len(result.data.rows)} of {result.data.total} ads")
        return result

    def ad_detail(self, ad_id: Union[int, str]) -> AdDetailResponse:
        self._require(ad_id, "ad_id")

        logger.debug(f"Getting ad {ad_id}")
        result = self._client.call(
            "advertisement.detail",
            AdDetailResponse,
            path_params={"ad_id": ad_id},
            status_table=AdDetailStatus,
        )
        logger.debug(f"Got ad {ad_id}")
        return result

    def ad_detail_by_vm(self, vm_code: str) -> AdDetailResponse:
        """Ad currently bound to a machine"""
        self._require(vm_code, "vm_code")

        logger.debug(f"Getting ad of machine {vm_code}")
        result = self._client.call(
            "advertisement.detail_by_vm",
            AdDetailResponse,
            params={"code": vm_code},
            status_table=AdDetailStatus,
        )
        logger.debug(f"Got ad of machine {vm_code}")
        return result

    def update_ad(self, request: RequestLike) -> AdUpdateResponse:
        """
        Change an existing ad

        Args:
            request: ``{"ad": {...}}`` with the ad ``id`` and the fields to change

        Raises:
            ValidationError: If the ad id is missing
        """
        req = coerce_request(AdUpdateRequest, request)

        logger.debug(f"Updating ad {req.ad.id}")
        result = self._client.call(
            "advertisement.update",
            AdUpdateResponse,
            body=req.to_wire(),
            status_table=AdvertisementStatus,
        )
        logger.debug(f"Ad {req.ad.id} updated")
        return result

    def delete_ad(self, ad_id: Union[int, str]) -> AdDeleteResponse:
        self._require(ad_id, "ad_id")

        logger.debug(f"Deleting ad {ad_id}")
        result = self._client.call(
            "advertisement.delete",
            AdDeleteResponse,
            path_params={"ad_id": ad_id},
            status_table=AdvertisementStatus,
        )
        logger.debug(f"Deleted ad {ad_id}")
        return result

    def bind_to_vms(
        self, ad_id: Union[int, str], request: RequestLike
    ) -> AdAssociatedToVmResponse:
        """Show an ad on the given machines"""
        self._require(ad_id, "ad_id")
        req = coerce_request(AdAssociatedToVmRequest, request)

        logger.debug(f"Binding ad {ad_id} to {len(req.vm_list)} machines")
        result = self._client.call(
            "advertisement.bind",
            AdAssociatedToVmResponse,
            path_params={"ad_id": ad_id},
            body=req.to_wire(),
            status_table=AdvertisementStatus,
        )
        logger.debug(f"Ad {ad_id} bound")
        return result

    def set_promotion_status(
        self, promotion_id: Union[int, str], status: Union[AdStatus, int]
    ) -> AdControlStatusResponse:
        """Enable or disable an ad"""
        self._require(promotion_id, "promotion_id")
        try:
            status = AdStatus(status)
        except ValueError as e:
            raise ValidationError(
                f"Invalid ad status: {status}", field="status"
            ) from e

        logger.debug(f"Setting ad {promotion_id} status to {status.name}")
        result = self._client.call(
            "advertisement.promotion_status",
            AdControlStatusResponse,
            path_params={"promotion_id": promotion_id, "status": int(status)},
            status_table=AdvertisementStatus,
        )
        logger.debug(f"Ad {promotion_id} is now {status.name}")
        return result

    def vm_promotion(self, vm_code: str) -> VmPromotionResponse:
        """Ad currently playing on a machine"""
        self._require(vm_code, "vm_code")

        logger.debug(f"Getting promotion of machine {vm_code}")
        result = self._client.call(
            "advertisement.vm_promotion",
            VmPromotionResponse,
            params={"code": vm_code},
            status_table=AdDetailStatus,
        )
        logger.debug(f"Got promotion of machine {vm_code}")
        return result
