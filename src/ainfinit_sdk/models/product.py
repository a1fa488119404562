"""Product catalog and product application models"""

import json
from enum import IntEnum
from typing import List, Optional, Tuple, Union

from pydantic import Field, field_validator

from ainfinit_sdk.models.common import AinfinitModel, ApiResponse, Page


class CollType(IntEnum):
    SINGLE = 1
    MULTIPLE = 2


class ApplyStatus(IntEnum):
    REVIEW = 1
    PASSED = 2
    REJECTED = 3


class UploadFile(AinfinitModel):
    """A file attached to a multipart product application"""

    filename: str = Field(..., min_length=1)
    content: bytes
    content_type: str = "application/octet-stream"

    def as_part(self, field_name: str) -> Tuple[str, Tuple[str, bytes, str]]:
        return field_name, (self.filename, self.content, self.content_type)


class Product(AinfinitModel):
    """Catalog product, also used for application details"""

    id: int = 0
    name: str = ""
    price: int = Field(0, description="Price in the smallest currency unit")
    weight: int = 0
    weight_variance: int = 0
    img_url: str = ""
    item_code: str = ""
    coll_type: int = 0
    update_time: str = ""
    create_time: str = ""
    status: int = 0
    qr_codes: str = ""
    item_codes: List[str] = Field(default_factory=list)
    actual_imgs: List[str] = Field(default_factory=list)
    weight_file: str = ""


class LastInfo(AinfinitModel):
    count: int = 0
    last_update_time: int = 0


# ---------------------------------------------------------------- requests


class ProductListRequest(AinfinitModel):
    page: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1)
    updated_time: Optional[str] = None
    goods_name: Optional[str] = None
    qr_codes: Optional[str] = None


class MutualExclusionRequest(AinfinitModel):
    item_codes: List[str] = Field(..., min_length=1, alias="item_codes")


class NewProductApplication(AinfinitModel):
    """
    New product submitted for review

    The JSON fields travel in the ``item`` part of a multipart request. Image
    uploads go in ``file`` parts, physical photos (at least two, with the
    barcode clearly visible) in ``files`` parts and the weight picture in a
    ``weightFile`` part.
    """

    name: str = Field(..., min_length=1)
    price: int = Field(..., gt=0)
    weight: int = 0
    qr_codes: str = ""

    img_files: List[UploadFile] = Field(default_factory=list, exclude=True)
    physical_img_files: List[UploadFile] = Field(default_factory=list, exclude=True)
    weight_file: Optional[UploadFile] = Field(None, exclude=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    def item_json(self) -> str:
        return json.dumps(self.to_wire(), separators=(",", ":"), ensure_ascii=False)

    def multipart_parts(self) -> List[Tuple[str, Tuple[Optional[str], Union[bytes, str], str]]]:
        parts: List[Tuple[str, Tuple[Optional[str], Union[bytes, str], str]]] = [
            ("item", (None, self.item_json(), "application/json")),
        ]
        parts.extend(f.as_part("file") for f in self.img_files)
        parts.extend(f.as_part("files") for f in self.physical_img_files)
        if self.weight_file is not None:
            parts.append(self.weight_file.as_part("weightFile"))
        return parts


class UpdateProductApplication(AinfinitModel):
    """Changes to a pending product application, identified by ``id``"""

    id: int
    name: Optional[str] = None
    price: Optional[int] = Field(None, gt=0)
    weight: Optional[int] = None
    qr_codes: Optional[str] = None
    item_code: Optional[str] = None

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: int) -> int:
        if v == 0:
            raise ValueError("id must be non-zero")
        return v

    def item_json(self) -> str:
        return json.dumps(self.to_wire(), separators=(",", ":"), ensure_ascii=False)

    def multipart_parts(self) -> List[Tuple[str, Tuple[Optional[str], Union[bytes, str], str]]]:
        return [("item", (None, self.item_json(), "application/json"))]


class ListProductApplicationRequest(AinfinitModel):
    page: Optional[int] = Field(None, ge=1)
    page_size: Optional[int] = Field(None, ge=1, alias="pageSize")
    apply_status: Optional[ApplyStatus] = None
    goods_name: Optional[str] = None
    qr_codes: Optional[str] = None


# ---------------------------------------------------------------- responses


class LastInfoResponse(ApiResponse):
    data: LastInfo = Field(default_factory=LastInfo)


class ProductListResponse(ApiResponse):
    data: Page[Product] = Field(default_factory=Page[Product])


class ProductDetailResponse(ApiResponse):
    data: Optional[Product] = None


class MutualExclusionResponse(ApiResponse):
    data: Page[str] = Field(default_factory=Page[str])


class NewProductApplicationResponse(ApiResponse):
    data: int = Field(0, description="ID of the created application")


class ListProductApplicationResponse(ApiResponse):
    data: Page[Product] = Field(default_factory=Page[Product])


class ProductApplicationDetailResponse(ApiResponse):
    data: Optional[Product] = None


class UpdateProductApplicationResponse(ApiResponse):
    pass
