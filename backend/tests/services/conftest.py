"""Service test fixtures — seeded parent rows and an open unit of work.

Invariants:
    - `work` is an open read-write unit of work, rolled back after the test
    - Seed fixtures commit through the real services, so ids are generated
"""

import pytest
from datetime import date

from inventory.schemas.catalog import DeviceTypeRecord
from inventory.schemas.device import DeviceRecord
from inventory.schemas.owner import OwnerRecord
from inventory.services.crud_service import build_service
from inventory.services.entities import DEVICE_TYPES, DEVICES, OWNERS


@pytest.fixture
async def work(db):
    async with db.unit_of_work() as session:
        yield session


@pytest.fixture
async def seed_owner(db):
    owner = OwnerRecord(
        first_name="John", last_name="Doe", email="john.doe@example.com",
    )
    await build_service(OWNERS, db).create(owner)
    return owner


@pytest.fixture
async def seed_type(db):
    device_type = DeviceTypeRecord(
        name="Test Type", description="This is a test type",
    )
    await build_service(DEVICE_TYPES, db).create(device_type)
    return device_type


@pytest.fixture
async def seed_device(db, seed_owner, seed_type):
    device = DeviceRecord(
        serial_number="SN123456",
        name="Test Device",
        type_id=seed_type.id,
        owner_id=seed_owner.id,
        purchase_date=date(2023, 1, 1),
        status="active",
    )
    await build_service(DEVICES, db).create(device)
    return device
