"""Services module initialization"""

from ainfinit_sdk.services.device import DeviceService
from ainfinit_sdk.services.product import ProductService
from ainfinit_sdk.services.advertisement import AdvertisementService
from ainfinit_sdk.services.operation import OperationService

__all__ = [
    "DeviceService",
    "ProductService",
    "AdvertisementService",
    "OperationService",
]
