"""Device Schemas — transfer objects for the /api/devices resource.

Invariants:
    - DeviceWrite is shared by POST and PUT (full overwrite on PUT)
    - additional_properties accepts any JSON value, including null, but never
      NaN or Infinity: the stored text must stay strict JSON
    - No validation beyond shape: existence of the device type is checked by the route

Design Decisions:
    - Explicit Field aliases over an alias generator: the wire names are few and fixed
    - populate_by_name=True so handlers and tests can build models with snake_case
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devicehub.core import additional_properties as props_codec
from devicehub.core.domain_types import AdditionalProperties


class DeviceSummary(BaseModel):
    """List item — identifier and name only."""
    id: int
    name: str


class DeviceWrite(BaseModel):
    """Create/update payload."""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: str
    device_type_name: str = Field(alias="deviceTypeName")
    is_enabled: bool = Field(False, alias="isEnabled")
    additional_properties: AdditionalProperties = Field(
        None, alias="additionalProperties",
    )

    @field_validator("additional_properties")
    @classmethod
    def must_be_storable(cls, v: AdditionalProperties) -> AdditionalProperties:
        """Reject values (NaN, Infinity) that would not serialize to strict JSON."""
        props_codec.serialize(v)
        return v


class DeviceCreated(BaseModel):
    """POST response body."""
    id: int


class DeviceEmployeeRef(BaseModel):
    """Current employee embedded in a device detail."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    full_name: str = Field(alias="fullName")


class DeviceDetail(BaseModel):
    """GET /api/devices/{id} response body."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    device_type_name: str | None = Field(alias="deviceTypeName")
    is_enabled: bool = Field(alias="isEnabled")
    additional_properties: AdditionalProperties = Field(
        alias="additionalProperties",
    )
    current_employee: DeviceEmployeeRef | None = Field(alias="currentEmployee")
