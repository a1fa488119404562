"""
Vendor status-code tables

Each documented operation has a closed enumeration of the ``status`` values
the platform can put in a response envelope, with a human-readable
description per member. Codes outside a table map to
:class:`~ainfinit_sdk.exceptions.UnknownStatusError`.
"""

from enum import IntEnum
from typing import Dict, List, Optional, Type

from ainfinit_sdk.exceptions import StatusError, UnknownStatusError


class StatusCode(IntEnum):
    """Integer status code carrying a description"""

    def __new__(cls, value: int, description: str = "") -> "StatusCode":
        member = int.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member

    @classmethod
    def lookup(cls, code: int) -> Optional["StatusCode"]:
        """Member for ``code``, or None when the table does not document it"""
        return cls._value2member_map_.get(code)

    @classmethod
    def describe(cls, code: int) -> str:
        member = cls.lookup(code)
        if member is None:
            return f"Unknown status code: {code}"
        return member.description


# --- operation group ---------------------------------------------------------


class OpenDoorStatus(StatusCode):
    """Results of a door-open request"""
    SUCCESS = (200, "Open door success")
    FAILED = (400, "Open door failed")
    TIMEOUT = (503, "Open door timeout")
    UNUSUAL_MACHINE_PACKAGE = (3501, "Unusual machine package")
    OFFLINE_EQUIPMENT = (10416, "Offline equipment")
    SELF_DEALER_NOT_IN_OPERATION = (40525, "Self dealer not in operation")
    TOO_MANY_ORDERS_NOT_COMPLETED = (40526, "Too many orders not completed")
    NON_BUSINESS_SELF_SELLER_MACHINE = (40531, "Non-business self seller machine")


class DoorOpenCloseStatus(StatusCode):
    """Door open/close results reported for a door-open request ID"""
    OPENED = (201, "Door opened successfully")
    CLOSED = (202, "Door closed successfully")

    SHOPPING_NOT_FINISHED = (2031, "Failed to open - previous shopping not finished")
    RESTOCKING_NOT_FINISHED = (2032, "Failed to open - previous restocking not finished")

    POWER_OFF = (2033, "Failed to open - device power off, running on UPS")
    MAINTENANCE_MODE = (2034, "Failed to open - device in maintenance mode")
    BACKGROUND_PROCESS = (204, "Failed to open - device background process active")

    TIMEOUT = (503, "Failed to open - device response timeout (20s)")
    NO_RESULT = (504, "Failed to open - no result reported within 5 minutes")
    UNKNOWN_ERROR = (505, "Failed to open - unknown error")
    CALIBRATION = (506, "Failed to open - calibration error")

    PRODUCT_VERIFICATION = (5050, "Failed to open - product verification failed")
    SERIAL_PORT_FAULT = (5051, "Failed to open - serial port fault")
    WEIGHT_SENSOR_FAULT = (5052, "Failed to open - weight sensor fault")
    CAMERAS_OFFLINE = (5053, "Failed to open - all cameras offline")
    ALGORITHM_ERROR = (5054, "Failed to open - local recognition algorithm error")
    DOOR_LOCK_ERROR = (5055, "Failed to open - door lock error")
    POWER_STATUS_ERROR = (5056, "Failed to open - device power status error")

    DOOR_OPEN_LOCK_OPEN = (5057, "Door lock error - door open + lock open")
    DOOR_CLOSED_LOCK_OPEN = (5058, "Door lock error - door closed + lock open")
    DOOR_OPEN_LOCK_CLOSED = (5059, "Door lock error - door open + lock closed")
    DOOR_CLOSED_LOCK_CLOSED = (5060, "Door lock error - door closed + lock closed")

    NO_RESULT_YET = (404, "No result reported by device yet")
    REQUEST_NOT_FOUND = (42404, "Request ID does not exist")
    INVALID_TYPE = (40005, "Invalid parameter: type")
    TOO_MANY_ORDERS = (40526, "Too many shopping orders in progress")
    NO_PERMISSION = (42403, "No permission to query")

    @property
    def is_failure(self) -> bool:
        return self not in (DoorOpenCloseStatus.OPENED, DoorOpenCloseStatus.CLOSED)


class OrderVideoStatus(StatusCode):
    """Results of an order video lookup"""
    SUCCESS = (200, "Success")
    NO_RECORDS = (404, "No order or replenishment records found")
    REQUEST_NOT_FOUND = (42404, "The opening request does not exist")


class SoldGoodsStatus(StatusCode):
    """Results of listing the goods sold by a machine"""
    SELF_DEALER_NOT_EXIST = (40506, "Self dealer does not exist")
    SELF_DEALER_NOT_BELONG_TO_MERCHANT = (40531, "Self dealer not belong to merchant")


class ReplenishStatus(StatusCode):
    """Results of adding or updating the goods sold by a machine"""
    TOO_MANY_GOODS = (10004, "Too many goods")
    DUPLICATE_GOODS = (40502, "Duplicate goods")
    MUTUALLY_EXCLUSIVE_GOODS = (40503, "Mutually exclusive goods")
    DOWNLOADED_GOODS = (40504, "Downloaded goods")
    SELF_DEALER_NOT_EXIST = (40506, "Self dealer does not exist")
    UNKNOWN_GOODS = (40507, "Unknown goods")
    NO_OPERATING_PERMISSIONS = (40531, "No operating permissions")


class DeleteGoodsStatus(StatusCode):
    """Results of removing goods from a machine"""
    SELF_DEALER_NOT_EXIST = (40506, "Self dealer does not exist")
    UNKNOWN_GOODS = (40507, "Unknown goods")
    NO_OPERATING_PERMISSIONS = (40531, "No operating permissions")


class PriceUpdateStatus(StatusCode):
    """Results of replacing machine item prices"""
    TARGET_GOODS_MISSING = (3501, "Vending machine does not exist target goods")
    DUPLICATE_PRODUCTS = (40502, "There are duplicate products")
    DOWNLOADED_GOODS = (40504, "There are downloaded goods")
    SELF_DEALER_NOT_EXIST = (40506, "The self dealer does not exist")
    UNKNOWN_PRODUCTS = (40507, "There are unknown products")
    NO_OPERATING_PERMISSIONS = (40531, "No operating permissions")


# --- advertisement group -----------------------------------------------------


class SourceMaterialStatus(StatusCode):
    """Results of advertisement material operations"""
    NOT_FOUND = (4440, "Source material not found")
    NOT_ALLOWED = (4441, "Source material not allowed")
    DOES_NOT_EXIST = (4448, "Source material does not exist")


class AdvertisementStatus(StatusCode):
    """Results of advertisement operations"""
    NOT_FOUND = (4450, "Advertisement not found")
    NOT_ALLOWED = (4451, "Advertisement not allowed")
    INVALID_INPUT = (4452, "Advertisement invalid input")
    REMOVE_NOT_ALLOWED = (4446, "Ad remove not allowed")


class AdDetailStatus(StatusCode):
    """Results of advertisement detail lookups"""
    NOT_FOUND = (4440, "Ad detail not found")
    NOT_ALLOWED = (4441, "Ad detail not allowed")


StatusTable = Type[StatusCode]

# Device and product operations have no documented codes
RESOURCE_GROUP_TABLES: Dict[str, List[StatusTable]] = {
    "device": [],
    "product": [],
    "operation": [
        OpenDoorStatus,
        DoorOpenCloseStatus,
        OrderVideoStatus,
        SoldGoodsStatus,
        ReplenishStatus,
        DeleteGoodsStatus,
        PriceUpdateStatus,
    ],
    "advertisement": [
        SourceMaterialStatus,
        AdvertisementStatus,
        AdDetailStatus,
    ],
}


def is_success_status(status: int) -> bool:
    """Envelope status counts as success when it lies in [200, 300)"""
    return 200 <= status < 300


def to_status_error(
    status: int,
    message: str = "",
    table: Optional[StatusTable] = None,
    group: Optional[str] = None,
) -> StatusError:
    """
    Build the error for a failing envelope status

    Args:
        status: Envelope ``status`` value
        message: Envelope ``message`` value
        table: Status table of the operation that failed
        group: Resource group name, kept on the error for diagnostics

    Returns:
        StatusError naming the documented code, or UnknownStatusError
    """
    member = table.lookup(status) if table is not None else None
    if member is None:
        return UnknownStatusError(status, remote_message=message, group=group)
    return StatusError(
        status,
        member.description,
        remote_message=message,
        name=member.name,
        group=group,
    )
