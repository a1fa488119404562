"""Shared plumbing for resource services"""

from typing import TYPE_CHECKING, Union

from ainfinit_sdk.exceptions import ValidationError

if TYPE_CHECKING:
    from ainfinit_sdk.client.ainfinit_client import AinfinitClient


class BaseService:
    """Resource service bound to a client"""

    def __init__(self, client: "AinfinitClient") -> None:
        self._client = client

    @staticmethod
    def _require(value: Union[str, int, None], field: str) -> Union[str, int]:
        """Reject empty identifiers before anything is sent"""
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{field} is required", field=field)
        return value
