"""
Ainfinit platform endpoint table

Every vendor operation the SDK can call, keyed by a dotted operation name.
Paths are relative to the configured base URL and may contain ``{name}``
placeholders that :meth:`Endpoint.format` fills in.
"""

from enum import Enum
from typing import Dict, NamedTuple, Union
from urllib.parse import quote

from ainfinit_sdk.config.ainfinit_config import DEFAULT_BASE_URL


class HttpMethod(str, Enum):
    """HTTP method types supported"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class Endpoint(NamedTuple):
    """HTTP method and path of one vendor operation"""
    method: HttpMethod
    path: str

    def format(self, **path_params: Union[str, int]) -> str:
        """Fill path placeholders, URL-quoting each value"""
        if not path_params:
            return self.path
        return self.path.format(
            **{k: quote(str(v), safe="") for k, v in path_params.items()}
        )


_VENDING_MACHINE = "/facade/open/vending_machine"
_GOODS = "/facade/open/goods"
_GOODS_APPLY = "/facade/open/goodsApply"
_REPLENISH = "/facade/open/replenish"
_MATERIALS = "/facade/open/materials"


ENDPOINTS: Dict[str, Endpoint] = {
    # Device management
    "device.activate": Endpoint(HttpMethod.POST, f"{_VENDING_MACHINE}/bind"),
    "device.list": Endpoint(HttpMethod.GET, f"{_VENDING_MACHINE}/infoPage"),
    "device.info": Endpoint(HttpMethod.GET, f"{_VENDING_MACHINE}/info"),
    "device.update": Endpoint(HttpMethod.PUT, f"{_VENDING_MACHINE}/info"),
    "device.detail": Endpoint(HttpMethod.GET, f"{_VENDING_MACHINE}/deviceInfo"),
    "device.people_flow": Endpoint(HttpMethod.POST, f"{_VENDING_MACHINE}/peopleFlow"),
    "device.control": Endpoint(HttpMethod.PUT, f"{_VENDING_MACHINE}/control"),
    "device.setting": Endpoint(HttpMethod.PUT, f"{_VENDING_MACHINE}/setting"),
    "device.refrigeration": Endpoint(
        HttpMethod.PUT, f"{_VENDING_MACHINE}/deviceCoolingCommand"
    ),

    # Product catalog and product applications
    "product.latest_info": Endpoint(HttpMethod.GET, f"{_GOODS}/latestInfo"),
    "product.list": Endpoint(HttpMethod.GET, f"{_GOODS}/page"),
    "product.detail": Endpoint(HttpMethod.GET, f"{_GOODS}/{{item_code}}"),
    "product.mutual_exclusion": Endpoint(
        HttpMethod.POST, f"{_GOODS}/getGoodsExclusionInfo"
    ),
    "product.application_create": Endpoint(HttpMethod.POST, _GOODS_APPLY),
    "product.application_list": Endpoint(HttpMethod.GET, f"{_GOODS_APPLY}/page"),
    "product.application_detail": Endpoint(
        HttpMethod.GET, f"{_GOODS_APPLY}/{{item_code}}"
    ),
    "product.application_update": Endpoint(HttpMethod.PUT, _GOODS_APPLY),

    # Operations: doors, orders, sold goods
    "operation.open_door": Endpoint(
        HttpMethod.PUT, "/open/operation/vending_machine/open"
    ),
    "operation.open_door_detail": Endpoint(HttpMethod.GET, _VENDING_MACHINE),
    "operation.list_orders": Endpoint(HttpMethod.GET, "/facade/open/order/page"),
    "operation.order_video": Endpoint(HttpMethod.GET, "/facade/open/order/video"),
    "operation.list_goods": Endpoint(HttpMethod.GET, f"{_REPLENISH}/items"),
    "operation.add_goods": Endpoint(HttpMethod.PUT, f"{_REPLENISH}/items"),
    "operation.update_goods": Endpoint(HttpMethod.POST, f"{_REPLENISH}/items"),
    "operation.delete_goods": Endpoint(HttpMethod.DELETE, f"{_REPLENISH}/items"),
    "operation.update_prices": Endpoint(
        HttpMethod.POST, f"{_REPLENISH}/replaceVmItemsPrice"
    ),

    # Advertisement materials and ads
    "advertisement.material_apply": Endpoint(
        HttpMethod.POST, f"{_MATERIALS}/sourceMaterialsApply"
    ),
    "advertisement.material_list": Endpoint(
        HttpMethod.GET, f"{_MATERIALS}/sourceMaterialsPage"
    ),
    "advertisement.material_detail": Endpoint(
        HttpMethod.GET, f"{_MATERIALS}/sourceMaterialsDetail/{{material_id}}"
    ),
    "advertisement.material_delete": Endpoint(
        HttpMethod.DELETE, f"{_MATERIALS}/sourceMaterialsDelete/{{material_id}}"
    ),
    "advertisement.create": Endpoint(HttpMethod.POST, _MATERIALS),
    "advertisement.list": Endpoint(HttpMethod.GET, f"{_MATERIALS}/page"),
    "advertisement.detail": Endpoint(HttpMethod.GET, f"{_MATERIALS}/detail/{{ad_id}}"),
    "advertisement.detail_by_vm": Endpoint(HttpMethod.GET, f"{_MATERIALS}/detail"),
    "advertisement.update": Endpoint(HttpMethod.PUT, _MATERIALS),
    "advertisement.delete": Endpoint(HttpMethod.DELETE, f"{_MATERIALS}/{{ad_id}}"),
    "advertisement.bind": Endpoint(HttpMethod.PUT, f"{_MATERIALS}/bind/{{ad_id}}"),
    "advertisement.promotion_status": Endpoint(
        HttpMethod.PUT,
        f"{_MATERIALS}/updatePromotionStatus/{{promotion_id}}/{{status}}",
    ),
    "advertisement.vm_promotion": Endpoint(
        HttpMethod.GET, f"{_MATERIALS}/getVmPromotion"
    ),
}


__all__ = ["DEFAULT_BASE_URL", "ENDPOINTS", "Endpoint", "HttpMethod"]
