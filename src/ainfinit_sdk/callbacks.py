"""
Webhook notification payloads

The platform calls merchant endpoints to report alarms, review results,
product and advertisement changes, order settlement and door events. This
module turns those request bodies into typed models; receiving the HTTP
request is left to the merchant's web framework.

Example:
    >>> from ainfinit_sdk.callbacks import CallbackType, parse_callback
    >>> event = parse_callback(
    ...     CallbackType.AD_ONLINE, '{"id": 7, "name": "Summer", "status": 1}'
    ... )
    >>> event.status
    <AdOnlineStatus.ONLINE: 1>
"""

import json
import logging
from enum import Enum, IntEnum
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from pydantic import Field

from ainfinit_sdk.exceptions import ValidationError
from ainfinit_sdk.models.common import AinfinitModel, coerce_request
from ainfinit_sdk.models.operation import OrderGoods

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------- alarms


class AlarmAction(str, Enum):
    """``action`` query value of an alarm notification"""
    CLIENT_WARNING = "client_warning"
    OPERATING_EXCEPTION = "operating_exception"


class MaintenanceExceptionStatus(IntEnum):
    TRIGGERED = 0
    RECOVERED = 1


class MaintenanceExceptionCode(IntEnum):
    CAMERA_ISSUE = 1
    UPS_POWER = 2
    HEAVY_SENSOR = 128


class OperationalExceptionType(IntEnum):
    WEIGHT_ANOMALY = 1
    DOOR_LOCK_ANOMALY = 2
    UPS_POWER = 3
    SHOPPING_LOCK_TIMEOUT = 4
    RESTOCK_LOCK_TIMEOUT = 5
    SHOPPING_TIMEOUT = 6
    FOREIGN_INTRUSION = 7
    INVENTORY_MISMATCH = 8
    UNAUTHORIZED_DOOR = 9


class AlarmVideoStatus(IntEnum):
    NOT_UPLOADED = -1
    SUCCESS = 0
    NOT_FOUND = 1
    UPLOAD_FAILED = 2


class MaintenanceException(AinfinitModel):
    """
    Maintenance alarm (``client_warning``)

    ``ex_code`` is kept as a plain integer because the platform reports
    codes beyond those in :class:`MaintenanceExceptionCode`.
    """

    ex_code: int = 0
    notify_time: int = 0
    status: MaintenanceExceptionStatus
    vm_code: str = ""
    vm_name: str = ""
    scan_code: Optional[str] = None

    @property
    def recovered(self) -> bool:
        return self.status == MaintenanceExceptionStatus.RECOVERED


class OperationalException(AinfinitModel):
    """
    Operational alarm (``operating_exception``)

    A weight anomaly is reported twice under the same ``ex_id``: once when
    it happens and once when its video has been uploaded.
    """

    vm_name: str = ""
    vm_code: str = ""
    request_id: Optional[str] = None
    ex_id: str = ""
    ex_type: OperationalExceptionType
    ex_detail: str = ""
    send_time: int = 0
    video_url: Optional[str] = None
    video_status: Optional[AlarmVideoStatus] = None
    video_send_time: Optional[int] = None
    scan_code: Optional[str] = None


# ---------------------------------------------------------------- reviews


class ReviewStatus(IntEnum):
    APPROVED = 2
    REJECTED = 3


class RejectType(str, Enum):
    NAME_NON_COMPLIANT = "1"
    BARCODE_NON_COMPLIANT = "2"
    IMAGE_UNCLEAR = "3"
    OTHER = "4"


class ProductApplicationReview(AinfinitModel):
    """Review result of a new product application"""

    id: int
    status: ReviewStatus
    item_code: Optional[str] = Field(None, description="Present when approved")
    reject_type: Optional[RejectType] = None
    reject_reason: Optional[str] = None


class MaterialReviewSource(AinfinitModel):
    id: int


class MaterialReview(AinfinitModel):
    source_materials_list: List[MaterialReviewSource] = Field(default_factory=list)
    status: ReviewStatus
    reject_reason: Optional[str] = None


# ---------------------------------------------------------------- catalog and ads


class AdOnlineStatus(IntEnum):
    ONLINE = 1
    OFFLINE = 2


class AdvertisementOnline(AinfinitModel):
    id: int
    name: str = ""
    status: AdOnlineStatus


class ProductChangeAction(str, Enum):
    """``action`` query value of a product change notification"""
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"


class ProductStatus(IntEnum):
    LISTED = 1
    UNLISTED = 2


class ProductChange(AinfinitModel):
    code: str = ""
    coll_type: int = 1
    image_url: str = ""
    item_codes: List[str] = Field(default_factory=list)
    name: str = ""
    price: int = Field(0, description="Price in cents")
    status: Optional[ProductStatus] = None
    weight: int = Field(0, description="Weight in grams")


# ---------------------------------------------------------------- orders and doors


class HandleStatus(IntEnum):
    """How the goods taken in a shopping session were recognized"""
    LOCAL_SUCCESS = 1
    LOCAL_FAILURE = 2
    CLOUD_SUCCESS = 3
    CLOUD_FAILURE = 4

    @property
    def is_success(self) -> bool:
        return self in (HandleStatus.LOCAL_SUCCESS, HandleStatus.CLOUD_SUCCESS)

    @property
    def is_failure(self) -> bool:
        return self in (HandleStatus.LOCAL_FAILURE, HandleStatus.CLOUD_FAILURE)

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


_ABNORMAL_REASON_DESCRIPTIONS = {
    "CAMERA_EX": "Camera anomaly",
    "GRAVITY_EX": "Weight sensor anomaly",
    "FOREIGN_INVASION": "Invasion of foreign objects",
    "UNKNOWN_ITEM": "Unknown products",
    "OTHER": "Other",
    "UNFRIENDLY": "Non-friendly operation",
    "VIDEO_ERROR": "Video anomalies",
    "HARDWARE_EX": "Failed algorithmic recognition",
}


class AbnormalReason(str, Enum):
    """Why an order needed manual handling"""
    CAMERA_EX = "CAMERA_EX"
    GRAVITY_EX = "GRAVITY_EX"
    FOREIGN_INVASION = "FOREIGN_INVASION"
    UNKNOWN_ITEM = "UNKNOWN_ITEM"
    OTHER = "OTHER"
    UNFRIENDLY = "UNFRIENDLY"
    VIDEO_ERROR = "VIDEO_ERROR"
    HARDWARE_EX = "HARDWARE_EX"

    @property
    def description(self) -> str:
        return _ABNORMAL_REASON_DESCRIPTIONS[self.value]


class HardwareException(str, Enum):
    CAMERA = "Camera"
    GRAVITY = "GRAVITY"
    FOREIGN_INVASION = "FOREIGN_INVASION"
    NETWORK = "Network anomalies"
    CRASH = "CRASH"


class ShopMove(IntEnum):
    DOOR_NOT_OPEN = 1
    DOOR_OPEN_NO_MOVE = 2
    DOOR_OPEN_WITH_MOVE = 3


class OrderSettlement(AinfinitModel):
    """Final result of a shopping session, sent after the door closes"""

    trade_request_id: str = ""
    order_code: str = ""
    user_code: Optional[str] = None
    vm_code: str = ""
    handle_status: HandleStatus
    abnormal_reasons: List[AbnormalReason] = Field(default_factory=list)
    open_door_time: int = 0
    open_door_weight: int = 0
    close_door_time: int = 0
    close_door_weight: int = 0
    hardware_ex: Optional[HardwareException] = None
    shop_move: Optional[ShopMove] = None
    video_url: Optional[str] = None
    video_urls: List[str] = Field(default_factory=list)
    order_goods_list: List[OrderGoods] = Field(default_factory=list)
    candidates: List[OrderGoods] = Field(default_factory=list)

    @property
    def total_price(self) -> int:
        return sum(g.item_price * g.count for g in self.order_goods_list)


class DoorOpenCloseAction(str, Enum):
    """``action`` query value of a door notification"""
    TRADE_OPEN = "trade_open"
    TRADE_CLOSE = "trade_close"
    REPLENISH_OPEN = "replenish_open"
    REPLENISH_CLOSE = "replenish_close"


class DoorOpenClose(AinfinitModel):
    """
    Asynchronous door open/close result

    ``status`` uses the codes of
    :class:`~ainfinit_sdk.status_codes.DoorOpenCloseStatus`; ``order_code``
    is only present for shopping sessions.
    """

    order_code: Optional[str] = None
    open_type: int = 1
    request_id: str = ""
    status: int = 0
    vm_code: str = ""


# ---------------------------------------------------------------- parsing


class CallbackType(str, Enum):
    """Kinds of notification the platform sends"""
    MAINTENANCE_EXCEPTION = "client_warning"
    OPERATIONAL_EXCEPTION = "operating_exception"
    PRODUCT_APPLICATION_REVIEW = "product_application_review"
    AD_ONLINE = "advertisement_online"
    MATERIAL_REVIEW = "material_review"
    PRODUCT_CHANGE = "product_change"
    ORDER_SETTLEMENT = "order_settlement"
    DOOR_OPEN_CLOSE = "door_open_close"


CallbackPayload = Union[
    MaintenanceException,
    OperationalException,
    ProductApplicationReview,
    AdvertisementOnline,
    MaterialReview,
    ProductChange,
    OrderSettlement,
    DoorOpenClose,
]

CALLBACK_MODELS: Dict[CallbackType, Type[AinfinitModel]] = {
    CallbackType.MAINTENANCE_EXCEPTION: MaintenanceException,
    CallbackType.OPERATIONAL_EXCEPTION: OperationalException,
    CallbackType.PRODUCT_APPLICATION_REVIEW: ProductApplicationReview,
    CallbackType.AD_ONLINE: AdvertisementOnline,
    CallbackType.MATERIAL_REVIEW: MaterialReview,
    CallbackType.PRODUCT_CHANGE: ProductChange,
    CallbackType.ORDER_SETTLEMENT: OrderSettlement,
    CallbackType.DOOR_OPEN_CLOSE: DoorOpenClose,
}


class CallbackAck(AinfinitModel):
    """Body the merchant endpoint answers a notification with"""

    status: int = 200
    message: str = "success"

    @classmethod
    def success(cls, message: str = "success") -> "CallbackAck":
        return cls(status=200, message=message)

    @classmethod
    def failure(cls, message: str, status: int = 500) -> "CallbackAck":
        return cls(status=status, message=message)


def _decode_body(body: Union[str, bytes, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(body, Mapping):
        return body

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError(
                "Callback body is not valid UTF-8", field="body"
            ) from e

    try:
        decoded = json.loads(body)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Callback body is not valid JSON: {e}", field="body") from e

    if not isinstance(decoded, dict):
        raise ValidationError(
            f"Callback body must be a JSON object, got {type(decoded).__name__}",
            field="body",
        )
    return decoded


def parse_callback(
    callback_type: Union[CallbackType, str],
    body: Union[str, bytes, Mapping[str, Any]],
) -> CallbackPayload:
    """
    Parse a notification body into its typed model

    Args:
        callback_type: Kind of notification, or its string value (alarm
            notifications may pass their ``action`` query value directly)
        body: Raw request body or an already decoded JSON object

    Returns:
        The notification model for ``callback_type``

    Raises:
        ValidationError: If the type is unknown or the body does not match
    """
    try:
        kind = CallbackType(callback_type)
    except ValueError as e:
        raise ValidationError(
            f"Unknown callback type: {callback_type}", field="callback_type"
        ) from e

    payload = _decode_body(body)
    model = CALLBACK_MODELS[kind]
    logger.debug(f"Parsing {kind.value} callback")
    return coerce_request(model, payload)
