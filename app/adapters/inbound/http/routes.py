"""HTTP routes."""

from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.adapters.inbound.http.schemas import ErrorResponse, MessageResponse, ValidationResponse
from app.application.dtos.vehicle import VehicleResponse
from app.application.use_cases.vehicle_service import VehicleService
from app.domain.errors import (
    DuplicateFieldError,
    InvalidVehicleIdError,
    VehicleInventoryError,
    VehicleNotFoundError,
    VehicleValidationError,
)
from app.infrastructure.wiring.dependencies import get_vehicle_service

router = APIRouter()

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}
_ID_ERROR_RESPONSES = {
    **_ERROR_RESPONSES,
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def error_response(error: VehicleInventoryError) -> JSONResponse:
    """
    Map a domain error to its HTTP status and JSON body.

    Args:
        error: Domain error raised by the service

    Returns:
        JSON response with an 'error' message (and 'field' when relevant)
    """
    if isinstance(error, (VehicleValidationError, DuplicateFieldError)):
        body = ErrorResponse(error=error.message, field=error.field)
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, InvalidVehicleIdError):
        body = ErrorResponse(error="invalid id")
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, VehicleNotFoundError):
        body = ErrorResponse(error="not found")
        code = status.HTTP_404_NOT_FOUND
    else:
        # PersistenceError and anything unexpected: details stay in the logs
        body = ErrorResponse(error="internal error")
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=code, content=body.model_dump(exclude_none=True))


async def _read_payload(request: Request) -> dict[str, Any]:
    """
    Parse the request body as a JSON object.

    Raises:
        VehicleValidationError: If the body is not valid JSON or not an object
    """
    try:
        payload = await request.json()
    except ValueError as err:
        raise VehicleValidationError("body", "Request body must be valid JSON.") from err
    if not isinstance(payload, dict):
        raise VehicleValidationError("body", "Request body must be a JSON object.")
    return payload


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get(
    "/vehicles",
    status_code=status.HTTP_200_OK,
    response_model=list[VehicleResponse],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def list_vehicles(service: VehicleService = Depends(get_vehicle_service)):
    """
    List all vehicles, newest first.

    Returns:
        List of vehicles
    """
    try:
        vehicles = await service.list()
    except VehicleInventoryError as e:
        return error_response(e)
    return [VehicleResponse.from_entity(vehicle) for vehicle in vehicles]


@router.post(
    "/vehicles",
    status_code=status.HTTP_201_CREATED,
    response_model=VehicleResponse,
    responses=_ERROR_RESPONSES,
)
async def create_vehicle(request: Request, service: VehicleService = Depends(get_vehicle_service)):
    """
    Register a new vehicle.

    Args:
        request: Request whose JSON body holds the vehicle fields

    Returns:
        Created vehicle with id and timestamps
    """
    try:
        payload = await _read_payload(request)
        vehicle = await service.create(payload)
    except VehicleInventoryError as e:
        return error_response(e)
    return VehicleResponse.from_entity(vehicle)


@router.post(
    "/vehicles/validate",
    status_code=status.HTTP_200_OK,
    response_model=ValidationResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def validate_vehicle(
    request: Request, service: VehicleService = Depends(get_vehicle_service)
):
    """
    Validate a vehicle payload with the same rules as create, without saving it.

    Lets interactive forms show server-side field errors as the user types.

    Returns:
        Normalized vehicle payload
    """
    try:
        payload = await _read_payload(request)
        normalized = service.validate(payload)
    except VehicleInventoryError as e:
        return error_response(e)
    return ValidationResponse(valid=True, vehicle=normalized.model_dump(by_alias=True, mode="json"))


@router.get(
    "/vehicles/{vehicle_id}",
    status_code=status.HTTP_200_OK,
    response_model=VehicleResponse,
    responses=_ID_ERROR_RESPONSES,
)
async def get_vehicle(vehicle_id: str, service: VehicleService = Depends(get_vehicle_service)):
    """
    Get one vehicle.

    Args:
        vehicle_id: Vehicle identifier

    Returns:
        Vehicle
    """
    try:
        vehicle = await service.get(vehicle_id)
    except VehicleInventoryError as e:
        return error_response(e)
    return VehicleResponse.from_entity(vehicle)


@router.put(
    "/vehicles/{vehicle_id}",
    status_code=status.HTTP_200_OK,
    response_model=VehicleResponse,
    responses=_ID_ERROR_RESPONSES,
)
async def update_vehicle(
    vehicle_id: str,
    request: Request,
    service: VehicleService = Depends(get_vehicle_service),
):
    """
    Update a vehicle; omitted fields keep their current values.

    Args:
        vehicle_id: Vehicle identifier
        request: Request whose JSON body holds the fields to change

    Returns:
        Updated vehicle
    """
    try:
        payload = await _read_payload(request)
        vehicle = await service.update(vehicle_id, payload)
    except VehicleInventoryError as e:
        return error_response(e)
    return VehicleResponse.from_entity(vehicle)


@router.delete(
    "/vehicles/{vehicle_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses=_ID_ERROR_RESPONSES,
)
async def delete_vehicle(vehicle_id: str, service: VehicleService = Depends(get_vehicle_service)):
    """
    Remove a vehicle permanently.

    Args:
        vehicle_id: Vehicle identifier

    Returns:
        Confirmation message
    """
    try:
        await service.delete(vehicle_id)
    except VehicleInventoryError as e:
        return error_response(e)
    return MessageResponse(message="removed")
