"""
Ainfinit API models
Request and response models for every resource group
"""

from .common import (
    AinfinitModel,
    ApiResponse,
    IdName,
    IdResult,
    Page,
    coerce_request,
)
from .device import (
    CardInfo,
    Device,
    DeviceActivationRequest,
    DeviceActivationResponse,
    DeviceControlRequest,
    DeviceControlResponse,
    DeviceInfoData,
    DeviceInfoResponse,
    DevicePeopleFlowRequest,
    DevicePeopleFlowResponse,
    DeviceUpdateRequest,
    DeviceUpdateResponse,
    ListMachineRequest,
    ListMachineResponse,
    MachineDetailResponse,
    NetworkInfo,
    PeopleFlow,
    RefrigerationControlRequest,
    RefrigerationControlResponse,
    SettingRequest,
    SettingResponse,
    TempMode,
    VendingMachine,
)
from .product import (
    ApplyStatus,
    CollType,
    LastInfo,
    LastInfoResponse,
    ListProductApplicationRequest,
    ListProductApplicationResponse,
    MutualExclusionRequest,
    MutualExclusionResponse,
    NewProductApplication,
    NewProductApplicationResponse,
    Product,
    ProductApplicationDetailResponse,
    ProductDetailResponse,
    ProductListRequest,
    ProductListResponse,
    UpdateProductApplication,
    UpdateProductApplicationResponse,
    UploadFile,
)
from .operation import (
    AddGoodsRequest,
    AddGoodsResponse,
    DeleteGoodsRequest,
    DeleteGoodsResponse,
    GetMachineGoodsResponse,
    GetOrderVideoRequest,
    GetOrderVideoResponse,
    Goods,
    ListOrderRequest,
    ListOrderResponse,
    OpenDoorDetailRequest,
    OpenDoorDetailResponse,
    OpenDoorRequest,
    OpenDoorResponse,
    OpenDoorResult,
    OpenDoorType,
    Order,
    OrderGoods,
    OrderVideo,
    SearchOpenDoorData,
    UpdateGoodsPriceRequest,
    UpdateGoodsPriceResponse,
    UpdateGoodsRequest,
    UpdateGoodsResponse,
    VideoStatus,
)
from .advertisement import (
    Ad,
    AdAdditionRequest,
    AdAdditionResponse,
    AdAssociatedToVmRequest,
    AdAssociatedToVmResponse,
    AdChanges,
    AdControlStatusResponse,
    AdDeleteResponse,
    AdDetailResponse,
    AdPageRequest,
    AdPageResponse,
    AdStatus,
    AdUpdateRequest,
    AdUpdateResponse,
    BusinessType,
    FileType,
    ImgRel,
    ImgRelRef,
    MaterialReviewStatus,
    SourceMaterial,
    SourceMaterialApplyRequest,
    SourceMaterialApplyResponse,
    SourceMaterialDeleteResponse,
    SourceMaterialDetailResponse,
    SourceMaterialPageRequest,
    SourceMaterialPageResponse,
    Vm,
    VmPromotionResponse,
)

__all__ = [
    # Common
    "AinfinitModel",
    "ApiResponse",
    "IdName",
    "IdResult",
    "Page",
    "coerce_request",
    # Device
    "CardInfo",
    "Device",
    "DeviceActivationRequest",
    "DeviceActivationResponse",
    "DeviceControlRequest",
    "DeviceControlResponse",
    "DeviceInfoData",
    "DeviceInfoResponse",
    "DevicePeopleFlowRequest",
    "DevicePeopleFlowResponse",
    "DeviceUpdateRequest",
    "DeviceUpdateResponse",
    "ListMachineRequest",
    "ListMachineResponse",
    "MachineDetailResponse",
    "NetworkInfo",
    "PeopleFlow",
    "RefrigerationControlRequest",
    "RefrigerationControlResponse",
    "SettingRequest",
    "SettingResponse",
    "TempMode",
    "VendingMachine",
    # Product
    "ApplyStatus",
    "CollType",
    "LastInfo",
    "LastInfoResponse",
    "ListProductApplicationRequest",
    "ListProductApplicationResponse",
    "MutualExclusionRequest",
    "MutualExclusionResponse",
    "NewProductApplication",
    "NewProductApplicationResponse",
    "Product",
    "ProductApplicationDetailResponse",
    "ProductDetailResponse",
    "ProductListRequest",
    "ProductListResponse",
    "UpdateProductApplication",
    "UpdateProductApplicationResponse",
    "UploadFile",
    # Operation
    "AddGoodsRequest",
    "AddGoodsResponse",
    "DeleteGoodsRequest",
    "DeleteGoodsResponse",
    "GetMachineGoodsResponse",
    "GetOrderVideoRequest",
    "GetOrderVideoResponse",
    "Goods",
    "ListOrderRequest",
    "ListOrderResponse",
    "OpenDoorDetailRequest",
    "OpenDoorDetailResponse",
    "OpenDoorRequest",
    "OpenDoorResponse",
    "OpenDoorResult",
    "OpenDoorType",
    "Order",
    "OrderGoods",
    "OrderVideo",
    "SearchOpenDoorData",
    "UpdateGoodsPriceRequest",
    "UpdateGoodsPriceResponse",
    "UpdateGoodsRequest",
    "UpdateGoodsResponse",
    "VideoStatus",
    # Advertisement
    "Ad",
    "AdAdditionRequest",
    "AdAdditionResponse",
    "AdAssociatedToVmRequest",
    "AdAssociatedToVmResponse",
    "AdChanges",
    "AdControlStatusResponse",
    "AdDeleteResponse",
    "AdDetailResponse",
    "AdPageRequest",
    "AdPageResponse",
    "AdStatus",
    "AdUpdateRequest",
    "AdUpdateResponse",
    "BusinessType",
    "FileType",
    "ImgRel",
    "ImgRelRef",
    "MaterialReviewStatus",
    "SourceMaterial",
    "SourceMaterialApplyRequest",
    "SourceMaterialApplyResponse",
    "SourceMaterialDeleteResponse",
    "SourceMaterialDetailResponse",
    "SourceMaterialPageRequest",
    "SourceMaterialPageResponse",
    "Vm",
    "VmPromotionResponse",
]
