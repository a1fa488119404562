"""Shared model base, response envelope and request coercion"""

from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

import pydantic
from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from ainfinit_sdk.exceptions import ValidationError


class AinfinitModel(BaseModel):
    """
    Base for every wire model

    Field names are snake_case in Python and camelCase on the wire. Unknown
    response fields are ignored so vendor additions do not break parsing.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "revalidate_instances": "always",
    }

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        # JSON null falls back to the field default, as a missing key would
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_wire(self) -> Dict[str, Any]:
        """Serialize by wire alias, dropping unset optional fields"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ApiResponse(AinfinitModel):
    """Envelope common to every platform response"""

    status: int = Field(0, description="Vendor status code, 2xx on success")
    message: str = Field("", description="Vendor status message")
    ok: Optional[bool] = Field(None, description="Success flag some endpoints add")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300


T = TypeVar("T")


class Page(AinfinitModel, Generic[T]):
    """One page of a paginated listing"""

    total: int = 0
    rows: List[T] = Field(default_factory=list)


class IdResult(AinfinitModel):
    id: int = 0


class IdName(AinfinitModel):
    id: int = 0
    name: str = ""


M = TypeVar("M", bound=BaseModel)


def _first_error_field(error: pydantic.ValidationError) -> Optional[str]:
    errors = error.errors()
    if not errors or not errors[0].get("loc"):
        return None
    return ".".join(str(part) for part in errors[0]["loc"])


def coerce_request(
    model: Type[M],
    value: Union[M, Mapping[str, Any], None],
    allow_none: bool = False,
) -> Optional[M]:
    """
    Validate a request given as a model instance or plain mapping

    Model instances are validated again, so instances built with
    ``model_construct`` or mutated after construction are checked too.

    Raises:
        ValidationError: If the request is missing or fails validation
    """
    if value is None:
        if allow_none:
            return None
        raise ValidationError(f"{model.__name__} is required", field="request")

    try:
        return model.model_validate(value)
    except pydantic.ValidationError as e:
        raise ValidationError(
            f"Invalid {model.__name__}: {e.errors()[0].get('msg', str(e))}",
            field=_first_error_field(e),
            details={"errors": e.errors(include_url=False)},
        ) from e
