"""Advertisement material and ad campaign models"""

from enum import IntEnum
from typing import List, Optional

from pydantic import Field

from ainfinit_sdk.models.common import AinfinitModel, ApiResponse, IdName, IdResult, Page


class MaterialReviewStatus(IntEnum):
    UNDER_REVIEW = 1
    APPROVED = 2
    REJECTED = 3


class FileType(IntEnum):
    IMAGE = 1
    VIDEO = 2


class BusinessType(IntEnum):
    PUBLIC_SERVICE = 1
    COMMERCIAL = 2


class AdStatus(IntEnum):
    ENABLED = 1
    DISABLED = 2


# ---------------------------------------------------------------- entities


class SourceMaterial(AinfinitModel):
    """An uploaded image or video that ads are built from"""

    id: Optional[int] = None
    file_url: Optional[str] = None
    file_type: Optional[FileType] = None
    name: Optional[str] = None
    status: Optional[int] = None
    create_time: Optional[str] = None


class ImgRel(AinfinitModel):
    """Placement of a material inside an ad"""

    id: int = 0
    priority: int = Field(0, description="1-100, smallest plays first")
    promotion_id: int = 0
    file_type: int = 0
    file_url: str = ""
    source_materials_id: int = 0


class Vm(AinfinitModel):
    code: str = ""
    name: str = ""


class Ad(AinfinitModel):
    id: int = 0
    name: str = ""
    business_type: int = 0
    duration: int = 0
    status: int = 0
    create_time: str = ""
    update_time: str = ""
    img_rel_list: List[ImgRel] = Field(default_factory=list)
    vm_list: List[Vm] = Field(default_factory=list)


# ---------------------------------------------------------------- requests


class SourceMaterialApplyRequest(AinfinitModel):
    source_material_list: List[SourceMaterial] = Field(
        ..., min_length=1, alias="source_material_list"
    )


class SourceMaterialPageRequest(AinfinitModel):
    page: Optional[int] = Field(None, ge=1)
    page_size: Optional[int] = Field(None, ge=1, alias="page_size")


class AdPageRequest(AinfinitModel):
    page: Optional[int] = Field(None, ge=1)
    page_size: Optional[int] = Field(None, ge=1, alias="page_size")


class ImgRelRef(AinfinitModel):
    priority: Optional[int] = Field(None, ge=1, le=100)
    source_materials_id: int


class AdAdditionRequest(AinfinitModel):
    name: str = Field(..., min_length=1)
    business_type: Optional[BusinessType] = None
    duration: Optional[int] = Field(None, ge=0)
    img_rel_list: Optional[List[ImgRelRef]] = None


class AdChanges(AinfinitModel):
    """Fields of an existing ad to change"""

    id: int = Field(..., gt=0)
    name: Optional[str] = None
    business_type: Optional[BusinessType] = None
    duration: Optional[int] = Field(None, ge=0)
    img_rel_list: Optional[List[ImgRel]] = None
    vm_list: Optional[List[Vm]] = None


class AdUpdateRequest(AinfinitModel):
    ad: AdChanges


class AdAssociatedToVmRequest(AinfinitModel):
    vm_list: List[str] = Field(..., min_length=1, description="Machine codes")


# ---------------------------------------------------------------- responses


class SourceMaterialApplyResponse(ApiResponse):
    result: List[IdResult] = Field(default_factory=list)
    count: int = 0


class SourceMaterialPageResponse(ApiResponse):
    data: Page[SourceMaterial] = Field(default_factory=Page[SourceMaterial])
    count: int = 0


class SourceMaterialDetailResponse(ApiResponse):
    data: Optional[SourceMaterial] = None


class SourceMaterialDeleteResponse(ApiResponse):
    pass


class AdAdditionResponse(ApiResponse):
    data: IdName = Field(default_factory=IdName)


class AdPageResponse(ApiResponse):
    data: Page[Ad] = Field(default_factory=Page[Ad])


class AdDetailResponse(ApiResponse):
    data: Optional[Ad] = None


class AdUpdateResponse(ApiResponse):
    data: IdName = Field(default_factory=IdName)


class AdDeleteResponse(ApiResponse):
    pass


class AdAssociatedToVmResponse(ApiResponse):
    pass


class AdControlStatusResponse(ApiResponse):
    pass


class VmPromotionResponse(ApiResponse):
    data: Optional[Ad] = None
