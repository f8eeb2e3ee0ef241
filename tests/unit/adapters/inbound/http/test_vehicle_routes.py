"""Unit tests for vehicle HTTP routes."""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from app.adapters.inbound.http.routes import router
from app.adapters.outbound.vehicle.in_memory_vehicle_repository import InMemoryVehicleRepository
from app.application.use_cases.validate_vehicle_payload import ValidateVehiclePayload
from app.application.use_cases.vehicle_service import VehicleService
from app.domain.errors import PersistenceError
from app.infrastructure.wiring.dependencies import get_vehicle_service

MISSING_ID = "00000000-0000-0000-0000-000000000000"


def _payload(**overrides):
    payload = {
        "name": "Civic",
        "plate": "abc1234",
        "chassisCode": "9bwzzz377vt004251",
        "specification": "2.0 EX AT",
        "year": 2020,
        "odometerKm": "50.000",
        "price": "85.000,50",
        "images": ["https://example.com/civic.jpg"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def service():
    """Vehicle service over an in-memory store."""
    return VehicleService(InMemoryVehicleRepository(), ValidateVehiclePayload())


@pytest.fixture
def app(service):
    """Create FastAPI app with router and the test service."""
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_vehicle_service] = lambda: service
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_create_vehicle(client):
    """Test create returns 201 with normalized camelCase fields."""
    response = client.post("/vehicles", json=_payload())

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["id"]
    assert data["plate"] == "ABC1234"
    assert data["chassisCode"] == "9BWZZZ377VT004251"
    assert data["odometerKm"] == 50000
    assert data["price"] == 85000.5
    assert data["images"] == ["https://example.com/civic.jpg"]
    assert data["createdAt"] == data["updatedAt"]


def test_create_vehicle_validation_error(client):
    """Test the first invalid field is reported with 400."""
    response = client.post("/vehicles", json=_payload(name="  ", year=1800))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Name is required.", "field": "name"}


def test_create_vehicle_values_too_large(client):
    """Test oversized numbers and text are a 400 naming the field."""
    oversized = [
        ("odometerKm", 10**20),
        ("price", "1.000.000.000.000"),
        ("plate", "A" * 21),
    ]
    for field, value in oversized:
        response = client.post("/vehicles", json=_payload(**{field: value}))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["field"] == field


def test_create_vehicle_bad_image_url(client):
    """Test a non-image link is rejected on the images field."""
    response = client.post("/vehicles", json=_payload(images=["https://example.com/page"]))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "images"


def test_create_vehicle_duplicate_chassis_code(client):
    """Test duplicate chassis code is a 400 on chassisCode."""
    client.post("/vehicles", json=_payload())

    response = client.post("/vehicles", json=_payload(plate="XYZ9876"))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["field"] == "chassisCode"
    assert "already registered" in body["error"]
    assert len(client.get("/vehicles").json()) == 1


def test_create_vehicle_invalid_json(client):
    """Test a body that is not JSON is a 400."""
    response = client.post(
        "/vehicles", content="{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "body"


def test_create_vehicle_non_object_body(client):
    """Test a JSON array body is a 400."""
    response = client.post("/vehicles", json=[_payload()])

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "body"


def test_list_vehicles(client):
    """Test listing returns every vehicle, newest first."""
    assert client.get("/vehicles").json() == []

    first = client.post("/vehicles", json=_payload()).json()
    second = client.post(
        "/vehicles", json=_payload(plate="XYZ9876", chassisCode="9BWZZZ377VT004252")
    ).json()

    response = client.get("/vehicles")

    assert response.status_code == status.HTTP_200_OK
    assert [v["id"] for v in response.json()] == [second["id"], first["id"]]


def test_get_vehicle(client):
    """Test fetching one vehicle by id."""
    created = client.post("/vehicles", json=_payload()).json()

    response = client.get(f"/vehicles/{created['id']}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == created


def test_get_vehicle_not_found(client):
    """Test unknown id is a 404."""
    response = client.get(f"/vehicles/{MISSING_ID}")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "not found"}


def test_get_vehicle_uppercase_id(client):
    """Test an uppercase id finds the stored vehicle."""
    created = client.post("/vehicles", json=_payload()).json()

    response = client.get(f"/vehicles/{created['id'].upper()}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == created["id"]


def test_get_vehicle_malformed_id(client):
    """Test malformed id is a 400, not a 404."""
    response = client.get("/vehicles/not-an-id")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "invalid id"}


def test_update_vehicle_partial(client):
    """Test update keeps omitted fields and advances updatedAt."""
    created = client.post("/vehicles", json=_payload()).json()

    response = client.put(f"/vehicles/{created['id']}", json={"odometerKm": "61.250"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["odometerKm"] == 61250
    assert data["plate"] == created["plate"]
    assert data["createdAt"] == created["createdAt"]
    assert data["updatedAt"] != created["updatedAt"]


def test_update_vehicle_validation_error(client):
    """Test invalid update is rejected and leaves the vehicle unchanged."""
    created = client.post("/vehicles", json=_payload()).json()

    response = client.put(f"/vehicles/{created['id']}", json={"price": "abc"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "price"
    assert client.get(f"/vehicles/{created['id']}").json() == created


def test_update_vehicle_duplicate_plate(client):
    """Test update into a plate held by another vehicle."""
    client.post("/vehicles", json=_payload())
    other = client.post(
        "/vehicles", json=_payload(plate="XYZ9876", chassisCode="9BWZZZ377VT004252")
    ).json()

    response = client.put(f"/vehicles/{other['id']}", json={"plate": "ABC1234"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "plate"


def test_update_vehicle_not_found(client):
    """Test update of unknown id is a 404."""
    response = client.put(f"/vehicles/{MISSING_ID}", json={"name": "Fit"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_vehicle(client):
    """Test delete confirms removal and a second delete is a 404."""
    created = client.post("/vehicles", json=_payload()).json()

    response = client.delete(f"/vehicles/{created['id']}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "removed"}
    assert client.get(f"/vehicles/{created['id']}").status_code == status.HTTP_404_NOT_FOUND
    assert client.delete(f"/vehicles/{created['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_delete_vehicle_malformed_id(client):
    """Test delete with malformed id is a 400."""
    response = client.delete("/vehicles/123")

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_validate_vehicle_does_not_save(client):
    """Test dry-run validation returns the normalized payload without storing it."""
    response = client.post("/vehicles/validate", json=_payload())

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["valid"] is True
    assert data["vehicle"]["plate"] == "ABC1234"
    assert data["vehicle"]["price"] == 85000.5
    assert client.get("/vehicles").json() == []


def test_validate_vehicle_reports_field(client):
    """Test dry-run validation reports the failing field."""
    response = client.post("/vehicles/validate", json=_payload(chassisCode="SHORT"))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "chassisCode"


def test_store_failure_is_internal_error(app, client):
    """Test unexpected store failures are a generic 500."""
    failing = AsyncMock(spec=VehicleService)
    failing.list.side_effect = PersistenceError("could not list vehicles")
    app.dependency_overrides[get_vehicle_service] = lambda: failing

    response = client.get("/vehicles")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"error": "internal error"}
