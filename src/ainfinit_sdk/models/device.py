"""Device management models"""

from enum import IntEnum
from typing import List, Optional

from pydantic import Field

from ainfinit_sdk.models.common import AinfinitModel, ApiResponse, Page


class TempMode(IntEnum):
    """Thermostat modes accepted by the cooling command"""
    NORMAL = 0
    REFRIGERATION = 10
    REFRIGERATION_ENERGY_SAVING = 11
    HEATING = 20
    HEATING_ENERGY_SAVING = 21


# ---------------------------------------------------------------- entities


class NetworkInfo(AinfinitModel):
    mobile: int = 0
    wifi: int = 0
    ethernet: int = 0
    signal_wifi: int = 0
    signal_mobile: int = 0


class CardInfo(AinfinitModel):
    iccid: str = ""
    carrier: str = ""
    imsi: str = ""


class Device(AinfinitModel):
    """Hardware state reported by a vending machine"""

    code: str = Field("", description="Machine code")
    bytes_total: int = Field(0, description="Disk size in bytes")
    bytes_free: int = Field(0, description="Free disk space in bytes")
    client_version: str = ""
    camera_count: int = 0
    gravity_count: int = 0
    light: int = 0
    detector: int = 0
    gravity_sensor: int = 0
    serial_port: int = 0
    serial_port_data_format: int = 0
    network_info: NetworkInfo = Field(default_factory=NetworkInfo)
    card_info: CardInfo = Field(default_factory=CardInfo)
    ccid: str = ""
    power_status: int = 0
    device_update_timestamp: int = 0
    online_status: int = 0
    temperature: int = 0
    target_temp: int = 0
    volume: int = 0
    engine_on: int = 0


class VendingMachine(AinfinitModel):
    """Row of the machine listing"""

    device_sn: str = ""
    scan_code: str = ""
    name: str = ""
    location: str = ""
    update_time: str = ""


class DeviceInfoData(AinfinitModel):
    """Registration details of a machine"""

    code: str = ""
    name: str = ""
    scan_code: str = ""
    device_sn: str = ""
    contact_number: str = ""
    location: str = ""
    update_time: str = ""


class PeopleFlow(AinfinitModel):
    code: str = ""
    visitor_count: int = 0
    aggregate_time: str = ""


# ---------------------------------------------------------------- requests


class DeviceActivationRequest(AinfinitModel):
    """Bind a new machine to the merchant"""

    name: str = ""
    location: str = ""
    scan_code: str = ""
    contact_number: str = ""


class ListMachineRequest(AinfinitModel):
    page: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1)
    name_of: Optional[str] = Field(None, description="Filter by machine name")


class DevicePeopleFlowRequest(AinfinitModel):
    field: Optional[str] = None
    start_timestamp: Optional[int] = None
    end_timestamp: Optional[int] = None
    codes: Optional[List[str]] = None


class DeviceUpdateRequest(AinfinitModel):
    """Machine attributes to change; ``name`` is mandatory"""

    name: str = Field(..., min_length=1)
    code: Optional[str] = None
    scan_code: Optional[str] = None
    contact_number: Optional[str] = None
    location: Optional[str] = None
    volume: Optional[int] = None
    ad_volume: Optional[int] = None
    temp: Optional[int] = None
    engine_on: Optional[int] = None


class DeviceControlRequest(AinfinitModel):
    volume: Optional[int] = Field(None, ge=0, le=100)
    ad_volume: Optional[int] = Field(None, ge=0, le=100)
    temp: Optional[int] = Field(None, ge=-30, le=20)
    engine_on: Optional[int] = Field(None, ge=0, le=1)


class SettingRequest(AinfinitModel):
    repl_video_upload_flag: int = Field(
        0, ge=0, le=1, description="Upload restocking videos: 0 = no, 1 = yes"
    )


class RefrigerationControlRequest(AinfinitModel):
    """Thermostat command sent as query parameters"""

    vm_code: str = Field(..., min_length=1)
    compr_enable: int = Field(..., ge=0, le=1, description="Thermostat switch")
    temp: int = Field(..., description="Refrigeration -28..-18, heating 30..50")
    temp_mode: TempMode = TempMode.NORMAL


# ---------------------------------------------------------------- responses


class DeviceActivationResponse(ApiResponse):
    pass


class ListMachineResponse(ApiResponse):
    data: Page[VendingMachine] = Field(default_factory=Page[VendingMachine])


class DeviceInfoResponse(ApiResponse):
    data: Optional[DeviceInfoData] = None


class MachineDetailResponse(ApiResponse):
    data: Optional[Device] = None


class DevicePeopleFlowResponse(ApiResponse):
    result: List[PeopleFlow] = Field(default_factory=list)
    count: int = 0


class DeviceUpdateResponse(ApiResponse):
    pass


class DeviceControlResponse(ApiResponse):
    pass


class SettingResponse(ApiResponse):
    pass


class RefrigerationControlResponse(ApiResponse):
    pass
