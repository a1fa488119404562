"""
Device management service
Activation, listing, details, control and settings of vending machines
"""

import logging
from typing import Any, Mapping, Optional, Union

from ainfinit_sdk.exceptions import ValidationError
from ainfinit_sdk.models.common import coerce_request
from ainfinit_sdk.models.device import (
    DeviceActivationRequest,
    DeviceActivationResponse,
    DeviceControlRequest,
    DeviceControlResponse,
    DeviceInfoResponse,
    DevicePeopleFlowRequest,
    DevicePeopleFlowResponse,
    DeviceUpdateRequest,
    DeviceUpdateResponse,
    ListMachineRequest,
    ListMachineResponse,
    MachineDetailResponse,
    RefrigerationControlRequest,
    RefrigerationControlResponse,
    SettingRequest,
    SettingResponse,
)
from ainfinit_sdk.services.base import BaseService

logger = logging.getLogger(__name__)

RequestLike = Union[Any, Mapping[str, Any]]


class DeviceService(BaseService):
    """
    Vending machine management

    Machines are addressed by their machine code, which is sent as the
    ``code`` query parameter.
    """

    def activate(
        self, machine_code: str, request: RequestLike
    ) -> DeviceActivationResponse:
        """
        Bind a machine to the merchant

        Args:
            machine_code: Code of the machine to activate
            request: Name, location, scan code and contact number

        Returns:
            Activation envelope

        Raises:
            ValidationError: If the machine code or request is invalid
            StatusError: If the platform rejects the activation
        """
        self._require(machine_code, "machine_code")
        req = coerce_request(DeviceActivationRequest, request)

        logger.debug(f"Activating machine {machine_code}")
        result = self._client.call(
            "device.activate",
            DeviceActivationResponse,
            params={"code": machine_code},
            body=req.to_wire(),
        )
        logger.debug(f"Machine {machine_code} activated")
        return result

    def list(self, request: Optional[RequestLike] = None) -> ListMachineResponse:
        """List the merchant's machines, one page at a time"""
        req = coerce_request(ListMachineRequest, request, allow_none=True)
        params = req.to_wire() if req is not None else {}

        logger.debug(f"Listing machines {params}")
        result = self._client.call(
            "device.list", ListMachineResponse, params=params
        )
        logger.debug(f"Listed {len(result.data.rows)} of {result.data.total} machines")
        return result

    def info(self, machine_code: str) -> DeviceInfoResponse:
        """Registration details of a machine, including its device serial number"""
        self._require(machine_code, "machine_code")

        logger.debug(f"Getting info of machine {machine_code}")
        result = self._client.call(
            "device.info", DeviceInfoResponse, params={"code": machine_code}
        )
        logger.debug(f"Got info of machine {machine_code}")
        return result

    def update(self, machine_code: str, request: RequestLike) -> DeviceUpdateResponse:
        """
        Change a machine's attributes

        Raises:
            ValidationError: If ``name`` is missing from the request
        """
        self._require(machine_code, "machine_code")
        req = coerce_request(DeviceUpdateRequest, request)

        logger.debug(f"Updating machine {machine_code}")
        result = self._client.call(
            "device.update",
            DeviceUpdateResponse,
            params={"code": machine_code},
            body=req.to_wire(),
        )
        logger.debug(f"Machine {machine_code} updated")
        return result

    def detail(self, machine_code: str) -> MachineDetailResponse:
        """Hardware state of a machine: disk, cameras, network, temperature"""
        self._require(machine_code, "machine_code")

        logger.debug(f"Getting detail of machine {machine_code}")
        result = self._client.call(
            "device.detail", MachineDetailResponse, params={"code": machine_code}
        )
        logger.debug(f"Got detail of machine {machine_code}")
        return result

    def people_flow(self, request: RequestLike) -> DevicePeopleFlowResponse:
        """Visitor counts for a set of machines over a time range"""
        req = coerce_request(DevicePeopleFlowRequest, request)

        logger.debug("Getting people flow")
        result = self._client.call(
            "device.people_flow", DevicePeopleFlowResponse, body=req.to_wire()
        )
        logger.debug(f"Got {result.count} people flow records")
        return result

    def control(
        self, machine_code: str, request: RequestLike
    ) -> DeviceControlResponse:
        """Set volume, advertisement volume, target temperature or engine state"""
        self._require(machine_code, "machine_code")
        req = coerce_request(DeviceControlRequest, request)

        logger.debug(f"Sending control command to machine {machine_code}")
        result = self._client.call(
            "device.control",
            DeviceControlResponse,
            params={"code": machine_code},
            body=req.to_wire(),
        )
        logger.debug(f"Control command accepted by machine {machine_code}")
        return result

    def setting(self, machine_code: str, request: RequestLike) -> SettingResponse:
        """
        Change machine settings

        The setting endpoint addresses machines by scan code and device
        serial number, so the serial number is looked up with :meth:`info`
        first.

        Args:
            machine_code: Code of the machine, sent as ``scanCode``
            request: Settings to apply

        Returns:
            Setting envelope

        Raises:
            ValidationError: If the machine has no device serial number
        """
        self._require(machine_code, "machine_code")
        req = coerce_request(SettingRequest, request)

        info = self.info(machine_code)
        device_sn = info.data.device_sn if info.data is not None else None
        if not device_sn:
            raise ValidationError(
                f"Machine {machine_code} reported no device serial number",
                field="device_sn",
            )

        logger.debug(f"Applying settings to machine {machine_code} ({device_sn})")
        result = self._client.call(
            "device.setting",
            SettingResponse,
            params={"scanCode": machine_code, "deviseSn": device_sn},
            body=req.to_wire(),
        )
        logger.debug(f"Settings applied to machine {machine_code}")
        return result

    def refrigeration_control(
        self, request: RequestLike
    ) -> RefrigerationControlResponse:
        """Switch the thermostat and set its target temperature and mode"""
        req = coerce_request(RefrigerationControlRequest, request)

        logger.debug(f"Sending cooling command to machine {req.vm_code}")
        result = self._client.call(
            "device.refrigeration",
            RefrigerationControlResponse,
            params=req.to_wire(),
        )
        logger.debug(f"Cooling command accepted by machine {req.vm_code}")
        return result
