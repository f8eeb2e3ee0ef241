"""Unit tests for InMemoryVehicleRepository."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.adapters.outbound.vehicle.in_memory_vehicle_repository import InMemoryVehicleRepository
from app.application.ports.vehicle_repository import DuplicateKeyError
from app.domain.entities.vehicle import Vehicle

START = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _vehicle(plate: str, chassis_code: str, created_at: datetime = START) -> Vehicle:
    return Vehicle(
        name="Onix",
        plate=plate,
        chassis_code=chassis_code,
        year=2022,
        odometer_km=15000,
        price=Decimal("72000.00"),
        images=["https://x.com/onix.jpg"],
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def repository() -> InMemoryVehicleRepository:
    """Fresh in-memory repository."""
    return InMemoryVehicleRepository()


@pytest.mark.asyncio
async def test_insert_assigns_id(repository: InMemoryVehicleRepository) -> None:
    """Test the store assigns the id."""
    stored = await repository.insert(_vehicle("AAA0001", "CHASSIS0000000001"))

    assert stored.id is not None
    assert await repository.find_by_id(stored.id) == stored


@pytest.mark.asyncio
async def test_insert_duplicate_plate(repository: InMemoryVehicleRepository) -> None:
    """Test plate uniqueness."""
    await repository.insert(_vehicle("AAA0001", "CHASSIS0000000001"))

    with pytest.raises(DuplicateKeyError) as exc_info:
        await repository.insert(_vehicle("AAA0001", "CHASSIS0000000002"))

    assert exc_info.value.key == "plate"
    assert len(await repository.find_all()) == 1


@pytest.mark.asyncio
async def test_insert_duplicate_chassis_code(repository: InMemoryVehicleRepository) -> None:
    """Test chassis code uniqueness."""
    await repository.insert(_vehicle("AAA0001", "CHASSIS0000000001"))

    with pytest.raises(DuplicateKeyError) as exc_info:
        await repository.insert(_vehicle("AAA0002", "CHASSIS0000000001"))

    assert exc_info.value.key == "chassis_code"


@pytest.mark.asyncio
async def test_returned_copies_are_isolated(repository: InMemoryVehicleRepository) -> None:
    """Test mutating a returned entity does not change the store."""
    stored = await repository.insert(_vehicle("AAA0001", "CHASSIS0000000001"))
    stored.name = "Changed"
    stored.images.append("https://x.com/other.png")

    fetched = await repository.find_by_id(stored.id)

    assert fetched.name == "Onix"
    assert fetched.images == ["https://x.com/onix.jpg"]


@pytest.mark.asyncio
async def test_find_all_newest_first(repository: InMemoryVehicleRepository) -> None:
    """Test ordering by created_at descending, independent of insertion order."""
    middle = await repository.insert(
        _vehicle("AAA0002", "CHASSIS0000000002", START + timedelta(hours=1))
    )
    newest = await repository.insert(
        _vehicle("AAA0003", "CHASSIS0000000003", START + timedelta(hours=2))
    )
    oldest = await repository.insert(_vehicle("AAA0001", "CHASSIS0000000001", START))

    vehicles = await repository.find_all()

    assert [v.id for v in vehicles] == [newest.id, middle.id, oldest.id]


@pytest.mark.asyncio
async def test_update(repository: InMemoryVehicleRepository) -> None:
    """Test update replaces fields and rejects conflicts."""
    first = await repository.insert(_vehicle("AAA0001", "CHASSIS0000000001"))
    second = await repository.insert(_vehicle("AAA0002", "CHASSIS0000000002"))

    first.odometer_km = 20000
    updated = await repository.update(first)
    assert updated.odometer_km == 20000

    second.chassis_code = "CHASSIS0000000001"
    with pytest.raises(DuplicateKeyError):
        await repository.update(second)
    assert (await repository.find_by_id(second.id)).chassis_code == "CHASSIS0000000002"


@pytest.mark.asyncio
async def test_update_unknown_returns_none(repository: InMemoryVehicleRepository) -> None:
    """Test update of an id the store never assigned."""
    vehicle = _vehicle("AAA0001", "CHASSIS0000000001")
    vehicle.id = "missing"

    assert await repository.update(vehicle) is None


@pytest.mark.asyncio
async def test_delete(repository: InMemoryVehicleRepository) -> None:
    """Test delete reports whether something was removed."""
    stored = await repository.insert(_vehicle("AAA0001", "CHASSIS0000000001"))

    assert await repository.delete(stored.id) is True
    assert await repository.delete(stored.id) is False
    assert await repository.find_by_id(stored.id) is None
