"""Devices Resource — list, detail, create, update and delete device records.

Invariants:
    - Device type is resolved by exact name on every write; unknown name → 400,
      nothing persisted
    - Each write is a single commit on the request's session
    - PUT overwrites name, type, enabled flag and additional properties together
    - Detail embeds the current employee using the verbatim name concatenation

Design Decisions:
    - Missing device on PUT/DELETE → 404. With legacy_missing_device_errors the
      old behavior is kept: an unhandled error that surfaces as a generic 500
    - get_device_or_404 / get_device_type_or_400 exported as query helpers
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from devicehub.config import Settings, get_settings
from devicehub.core import additional_properties
from devicehub.core.current_assignment import current_employee
from devicehub.core.errors import (
    InvalidDeviceTypeError, MissingDeviceError, ResourceNotFoundError,
)
from devicehub.core.full_name import concat_full_name
from devicehub.infrastructure.database import get_db
from devicehub.models.device import Device
from devicehub.models.device_employee import DeviceEmployee
from devicehub.models.device_type import DeviceType
from devicehub.models.employee import Employee
from devicehub.schemas.device import (
    DeviceCreated, DeviceDetail, DeviceEmployeeRef, DeviceSummary, DeviceWrite,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/devices", tags=["devices"])


async def get_device_type_or_400(name: str, db: AsyncSession) -> DeviceType:
    """Resolve a device type by exact name or raise InvalidDeviceTypeError."""
    result = await db.execute(
        select(DeviceType).where(DeviceType.name == name),
    )
    device_type = result.scalars().first()
    if device_type is None:
        raise InvalidDeviceTypeError(name)
    return device_type


async def get_device_or_404(device_id: int, db: AsyncSession) -> Device:
    """Get device with type and assignment history, or raise 404."""
    result = await db.execute(
        select(Device)
        .options(
            selectinload(Device.device_type),
            selectinload(Device.assignments)
            .selectinload(DeviceEmployee.employee)
            .selectinload(Employee.person),
        )
        .where(Device.id == device_id),
    )
    device = result.scalar_one_or_none()
    if device is None:
        raise ResourceNotFoundError("Device", str(device_id))
    return device


async def _get_device_for_write(
    device_id: int, db: AsyncSession, settings: Settings,
) -> Device:
    result = await db.execute(select(Device).where(Device.id == device_id))
    device = result.scalar_one_or_none()
    if device is None:
        if settings.legacy_missing_device_errors:
            raise MissingDeviceError(device_id)
        raise ResourceNotFoundError("Device", str(device_id))
    return device


def _apply(device: Device, body: DeviceWrite, device_type: DeviceType) -> None:
    device.name = body.name
    device.device_type_id = device_type.id
    device.is_enabled = body.is_enabled
    device.additional_properties = additional_properties.serialize(
        body.additional_properties,
    )


@router.get("", response_model=list[DeviceSummary])
async def list_devices(db: AsyncSession = Depends(get_db)):
    """List every device's id and name in store order."""
    result = await db.execute(select(Device.id, Device.name))
    return [
        DeviceSummary(id=device_id, name=name) for device_id, name in result
    ]


@router.get("/{device_id}", response_model=DeviceDetail)
async def get_device(device_id: int, db: AsyncSession = Depends(get_db)):
    """Get device details, including its current employee."""
    device = await get_device_or_404(device_id, db)
    employee = current_employee(device.assignments)
    return DeviceDetail(
        name=device.name,
        device_type_name=(
            device.device_type.name if device.device_type else None
        ),
        is_enabled=device.is_enabled,
        additional_properties=additional_properties.deserialize(
            device.additional_properties,
        ),
        current_employee=(
            DeviceEmployeeRef(
                id=employee.id, full_name=concat_full_name(employee.person),
            )
            if employee is not None else None
        ),
    )


@router.post(
    "", response_model=DeviceCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_device(
    body: DeviceWrite, response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Create a device of an existing type."""
    device_type = await get_device_type_or_400(body.device_type_name, db)
    device = Device()
    _apply(device, body, device_type)
    db.add(device)
    await db.commit()

    response.headers["Location"] = f"/api/devices/{device.id}"
    logger.info("Device created", extra={"device_id": device.id})
    return DeviceCreated(id=device.id)


@router.put(
    "/{device_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def update_device(
    device_id: int,
    body: DeviceWrite,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Overwrite a device's name, type, enabled flag and additional properties."""
    device = await _get_device_for_write(device_id, db, settings)
    device_type = await get_device_type_or_400(body.device_type_name, db)
    _apply(device, body, device_type)
    await db.commit()
    logger.info("Device updated", extra={"device_id": device_id})


@router.delete(
    "/{device_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_device(
    device_id: int,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Delete a device together with its assignment history."""
    device = await _get_device_for_write(device_id, db, settings)
    await db.delete(device)
    await db.commit()
    logger.info("Device deleted", extra={"device_id": device_id})
