"""
Operation service
Door control, orders and the goods each machine sells
"""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from ainfinit_sdk.models.common import coerce_request
from ainfinit_sdk.models.operation import (
    AddGoodsRequest,
    AddGoodsResponse,
    DeleteGoodsRequest,
    DeleteGoodsResponse,
    GetMachineGoodsResponse,
    GetOrderVideoRequest,
    GetOrderVideoResponse,
    ListOrderRequest,
    ListOrderResponse,
    OpenDoorDetailRequest,
    OpenDoorDetailResponse,
    OpenDoorRequest,
    OpenDoorResponse,
    UpdateGoodsPriceRequest,
    UpdateGoodsPriceResponse,
    UpdateGoodsRequest,
    UpdateGoodsResponse,
)
from ainfinit_sdk.services.base import BaseService
from ainfinit_sdk.status_codes import (
    DeleteGoodsStatus,
    DoorOpenCloseStatus,
    OpenDoorStatus,
    OrderVideoStatus,
    PriceUpdateStatus,
    ReplenishStatus,
    SoldGoodsStatus,
)

logger = logging.getLogger(__name__)

RequestLike = Union[Any, Mapping[str, Any]]


def _goods_request(request: Union[RequestLike, Sequence[Any]]) -> RequestLike:
    # a bare goods list is accepted in place of {"items": [...]}
    if isinstance(request, (list, tuple)):
        return {"items": list(request)}
    return request


class OperationService(BaseService):
    """
    Door, order and machine goods operations

    Every call targets one machine, passed as ``machine_code`` and sent as
    the ``code`` query parameter.
    """

    def open_door(self, machine_code: str, request: RequestLike) -> OpenDoorResponse:
        """
        Open a machine's door for shopping or restocking

        Args:
            machine_code: Code of the machine
            request: Door type and caller-chosen request ID, plus optional
                user code and local timestamp

        Returns:
            Envelope carrying the order code of the session

        Raises:
            ValidationError: If type or request ID is missing
            StatusError: With an :class:`OpenDoorStatus` description on failure
        """
        self._require(machine_code, "machine_code")
        req = coerce_request(OpenDoorRequest, request)

        logger.debug(f"Opening door of machine {machine_code} ({req.request_id})")
        result = self._client.call(
            "operation.open_door",
            OpenDoorResponse,
            params={"code": machine_code, **req.to_wire()},
            status_table=OpenDoorStatus,
        )
        logger.debug(f"Door of machine {machine_code} opened, order {result.data.order_code}")
        return result

    def open_door_detail(
        self, machine_code: str, request: RequestLike
    ) -> OpenDoorDetailResponse:
        """
        Door open/close result of a door-open request

        A successful envelope still carries the door outcome in its status;
        see :attr:`OpenDoorDetailResponse.door_status`.
        """
        self._require(machine_code, "machine_code")
        req = coerce_request(OpenDoorDetailRequest, request)

        logger.debug(f"Getting door result {req.request_id} of machine {machine_code}")
        result = self._client.call(
            "operation.open_door_detail",
            OpenDoorDetailResponse,
            params={"code": machine_code, **req.to_wire()},
            status_table=DoorOpenCloseStatus,
        )
        logger.debug(f"Got door result {req.request_id}: {result.status}")
        return result

    def list_orders(
        self, machine_code: str, request: Optional[RequestLike] = None
    ) -> ListOrderResponse:
        self._require(machine_code, "machine_code")
        req = coerce_request(ListOrderRequest, request, allow_none=True)
        params = req.to_wire() if req is not None else {}

        logger.debug(f"Listing orders of machine {machine_code} {params}")
        result = self._client.call(
            "operation.list_orders",
            ListOrderResponse,
            params={"code": machine_code, **params},
        )
        logger.debug(f"Listed {len(result.data.rows)} of {result.data.total} orders")
        return result

    def order_video(
        self, machine_code: str, request: RequestLike
    ) -> GetOrderVideoResponse:
        """Shopping or restocking video of a door session"""
        self._require(machine_code, "machine_code")
        req = coerce_request(GetOrderVideoRequest, request)

        logger.debug(f"Getting video {req.request_id} of machine {machine_code}")
        result = self._client.call(
            "operation.order_video",
            GetOrderVideoResponse,
            params={"code": machine_code, **req.to_wire()},
            status_table=OrderVideoStatus,
        )
        logger.debug(f"Got video {req.request_id}")
        return result

    def list_goods(self, machine_code: str) -> GetMachineGoodsResponse:
        """Goods a machine currently sells"""
        self._require(machine_code, "machine_code")

        logger.debug(f"Listing goods of machine {machine_code}")
        result = self._client.call(
            "operation.list_goods",
            GetMachineGoodsResponse,
            params={"code": machine_code},
            status_table=SoldGoodsStatus,
        )
        logger.debug(f"Machine {machine_code} sells {result.count} goods")
        return result

    def add_goods(
        self, machine_code: str, request: Union[RequestLike, Sequence[Any]]
    ) -> AddGoodsResponse:
        """Add goods to what a machine sells; the body is the bare goods list"""
        self._require(machine_code, "machine_code")
        req = coerce_request(AddGoodsRequest, _goods_request(request))

        logger.debug(f"Adding {len(req.items)} goods to machine {machine_code}")
        result = self._client.call(
            "operation.add_goods",
            AddGoodsResponse,
            params={"code": machine_code},
            body=req.to_wire()["items"],
            status_table=ReplenishStatus,
        )
        logger.debug(f"Added goods to machine {machine_code}")
        return result

    def update_goods(
        self, machine_code: str, request: Union[RequestLike, Sequence[Any]]
    ) -> UpdateGoodsResponse:
        """Replace the goods a machine sells; the body is the bare goods list"""
        self._require(machine_code, "machine_code")
        req = coerce_request(UpdateGoodsRequest, _goods_request(request))

        logger.debug(f"Updating goods of machine {machine_code}")
        result = self._client.call(
            "operation.update_goods",
            UpdateGoodsResponse,
            params={"code": machine_code},
            body=req.to_wire()["items"],
            status_table=ReplenishStatus,
        )
        logger.debug(f"Updated goods of machine {machine_code}")
        return result

    def delete_goods(
        self, machine_code: str, request: RequestLike
    ) -> DeleteGoodsResponse:
        """Stop selling goods on a machine; item codes travel in a DELETE body"""
        self._require(machine_code, "machine_code")
        req = coerce_request(DeleteGoodsRequest, request)

        logger.debug(f"Deleting goods {req.item_codes} from machine {machine_code}")
        result = self._client.call(
            "operation.delete_goods",
            DeleteGoodsResponse,
            params={"code": machine_code},
            body=req.to_wire(),
            status_table=DeleteGoodsStatus,
        )
        logger.debug(f"Deleted goods from machine {machine_code}")
        return result

    def update_prices(
        self, machine_code: str, request: RequestLike
    ) -> UpdateGoodsPriceResponse:
        """Replace item prices on one or more machines"""
        self._require(machine_code, "machine_code")
        req = coerce_request(UpdateGoodsPriceRequest, request)

        logger.debug(f"Updating {len(req.items)} prices on machine {machine_code}")
        result = self._client.call(
            "operation.update_prices",
            UpdateGoodsPriceResponse,
            params={"code": machine_code},
            body=req.to_wire(),
            status_table=PriceUpdateStatus,
        )
        logger.debug(f"Updated prices on machine {machine_code}")
        return result
