"""Door, order and machine goods models"""

from enum import IntEnum
from typing import List, Optional

from pydantic import Field, field_validator

from ainfinit_sdk.models.common import AinfinitModel, ApiResponse, Page
from ainfinit_sdk.status_codes import DoorOpenCloseStatus


class OpenDoorType(IntEnum):
    SHOPPING = 1
    REPLENISHMENT = 2


class VideoStatus(IntEnum):
    PENDING_UPLOAD = -1
    UPLOAD_COMPLETE = 0
    VIDEO_DOES_NOT_EXIST = 1
    NETWORK_ERROR = 2
    UPLOAD_IN_PROGRESS = 3


# ---------------------------------------------------------------- entities


class Goods(AinfinitModel):
    """An item sold by a machine with its prices"""

    item_code: str = ""
    actual_price: int = 0
    original_price: int = 0


class OrderGoods(AinfinitModel):
    item_code: str = ""
    item_name: str = ""
    item_price: int = 0
    actual_price: int = 0
    original_price: int = 0
    count: int = 0


class Order(AinfinitModel):
    trade_request_id: str = ""
    order_code: str = ""
    vm_code: str = ""
    machine_id: int = 0
    user_code: str = ""
    handle_status: int = 0
    shop_move: int = 0
    total_fee: int = 0
    open_door_time: int = 0
    close_door_time: int = 0
    open_door_weight: int = 0
    close_door_weight: int = 0
    order_goods_list: List[OrderGoods] = Field(default_factory=list)


class SearchOpenDoorData(Order):
    scan_code: str = ""


class OpenDoorResult(AinfinitModel):
    order_code: str = ""


class OrderVideo(AinfinitModel):
    order_code: str = ""
    video_url: str = ""
    video_urls: List[str] = Field(default_factory=list)
    video_status: Optional[VideoStatus] = None


# ---------------------------------------------------------------- requests


def _require_item_codes(cls, items: List[Goods]) -> List[Goods]:
    if any(not goods.item_code for goods in items):
        raise ValueError("every item needs an item code")
    return items


class OpenDoorRequest(AinfinitModel):
    """
    Door-open command

    ``request_id`` is chosen by the caller and later identifies the door
    session in :class:`OpenDoorDetailRequest` and :class:`GetOrderVideoRequest`.
    """

    type: OpenDoorType
    request_id: str = Field(..., min_length=1)
    user_code: Optional[str] = None
    local_timestamp: Optional[int] = None


class OpenDoorDetailRequest(AinfinitModel):
    type: OpenDoorType
    request_id: str = Field(..., min_length=1)


class ListOrderRequest(AinfinitModel):
    begin_time: Optional[int] = None
    end_time: Optional[int] = None
    page: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1, le=50)


class GetOrderVideoRequest(AinfinitModel):
    request_id: str = Field(..., min_length=1)
    type: OpenDoorType


class AddGoodsRequest(AinfinitModel):
    items: List[Goods] = Field(..., min_length=1)

    check_item_codes = field_validator("items")(_require_item_codes)


class UpdateGoodsRequest(AinfinitModel):
    """Full goods list replacing what the machine sells"""

    items: List[Goods] = Field(..., min_length=1)

    check_item_codes = field_validator("items")(_require_item_codes)


class DeleteGoodsRequest(AinfinitModel):
    item_codes: List[str] = Field(..., min_length=1)

    @field_validator("item_codes")
    @classmethod
    def validate_item_codes(cls, v: List[str]) -> List[str]:
        if any(not code for code in v):
            raise ValueError("item codes must not be empty")
        return v


class UpdateGoodsPriceRequest(AinfinitModel):
    vm_codes: List[str] = Field(default_factory=list)
    items: List[Goods] = Field(..., min_length=1)

    check_item_codes = field_validator("items")(_require_item_codes)


# ---------------------------------------------------------------- responses


class OpenDoorResponse(ApiResponse):
    data: OpenDoorResult = Field(default_factory=OpenDoorResult)


class OpenDoorDetailResponse(ApiResponse):
    data: Optional[SearchOpenDoorData] = None

    @property
    def door_status(self) -> Optional[DoorOpenCloseStatus]:
        """Door open/close result named by the envelope status, if documented"""
        return DoorOpenCloseStatus.lookup(self.status)


class ListOrderResponse(ApiResponse):
    data: Page[Order] = Field(default_factory=Page[Order])


class GetOrderVideoResponse(ApiResponse):
    data: OrderVideo = Field(default_factory=OrderVideo)


class GetMachineGoodsResponse(ApiResponse):
    result: List[Goods] = Field(default_factory=list)
    count: int = 0


class AddGoodsResponse(ApiResponse):
    pass


class UpdateGoodsResponse(ApiResponse):
    pass


class DeleteGoodsResponse(ApiResponse):
    pass


class UpdateGoodsPriceResponse(ApiResponse):
    pass
