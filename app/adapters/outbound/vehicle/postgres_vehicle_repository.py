"""Postgres-backed vehicle repository adapter."""

from datetime import timezone
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.ports.vehicle_repository import (
    DuplicateKeyError,
    RecordStoreError,
    VehicleRepository,
)
from app.domain.entities.vehicle import Vehicle
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import UNIQUE_CONSTRAINT_KEYS, VehicleModel

# sqlite3 raises OverflowError for out-of-range integers without wrapping it
_STORE_ERRORS = (SQLAlchemyError, OverflowError)


def _duplicate_key(error: IntegrityError) -> Optional[str]:
    """
    Work out which unique key an IntegrityError refers to.

    Postgres drivers expose the constraint name; SQLite only names the column
    in its message ("UNIQUE constraint failed: vehicles.plate").

    Returns:
        'plate', 'chassis_code', or None if it is not a uniqueness violation
    """
    diag = getattr(error.orig, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None)
    if constraint_name in UNIQUE_CONSTRAINT_KEYS:
        return UNIQUE_CONSTRAINT_KEYS[constraint_name]

    message = str(error.orig).lower()
    if "unique" not in message and "duplicate" not in message:
        return None
    # chassis_code first: constraint names contain the column name
    for key in ("chassis_code", "plate"):
        if key in message:
            return key
    return None


class PostgresVehicleRepository(VehicleRepository):
    """Postgres implementation of vehicle repository."""

    def __init__(self) -> None:
        """Initialize Postgres repository."""
        pass

    def _model_to_entity(self, model: VehicleModel) -> Vehicle:
        """
        Convert VehicleModel to Vehicle entity.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Vehicle entity
        """
        # Ensure timestamps are timezone-aware (SQLite returns naive datetimes)
        created_at = model.created_at
        if created_at and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        updated_at = model.updated_at
        if updated_at and updated_at.tzinfo is None:
            updated_at = updated_at.replace(tzinfo=timezone.utc)

        return Vehicle(
            id=model.id,
            name=model.name,
            plate=model.plate,
            chassis_code=model.chassis_code,
            specification=model.specification,
            year=model.year,
            odometer_km=model.odometer_km,
            price=Decimal(model.price) if model.price is not None else None,
            images=list(model.images or []),
            created_at=created_at,
            updated_at=updated_at,
        )

    def _apply_entity(self, vehicle: Vehicle, model: VehicleModel) -> VehicleModel:
        """
        Copy entity fields onto a model instance.

        Args:
            vehicle: Vehicle entity
            model: Model instance to fill

        Returns:
            The same model instance
        """
        model.name = vehicle.name
        model.plate = vehicle.plate
        model.chassis_code = vehicle.chassis_code
        model.specification = vehicle.specification
        model.year = vehicle.year
        model.odometer_km = vehicle.odometer_km
        model.price = vehicle.price
        model.images = list(vehicle.images)
        model.created_at = vehicle.created_at
        model.updated_at = vehicle.updated_at
        return model

    def _commit_write(self, db: Session, action: str) -> None:
        """Commit, translating uniqueness violations into DuplicateKeyError."""
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            key = _duplicate_key(e)
            if key is None:
                logger.error(f"Integrity error while trying to {action} vehicle: {str(e)}")
                raise RecordStoreError(f"integrity error during {action}") from e
            raise DuplicateKeyError(key) from e

    async def insert(self, vehicle: Vehicle) -> Vehicle:
        """
        Insert a new vehicle with a freshly generated id.

        Args:
            vehicle: Vehicle entity without id

        Returns:
            Stored vehicle
        """
        db: Session = get_db_session()
        try:
            model = self._apply_entity(vehicle, VehicleModel(id=str(uuid4())))
            db.add(model)
            self._commit_write(db, "insert")
            return self._model_to_entity(model)
        except _STORE_ERRORS as e:
            db.rollback()
            logger.error(f"Database error while inserting vehicle: {str(e)}")
            raise RecordStoreError("insert failed") from e
        finally:
            db.close()

    async def find_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        """
        Get a vehicle by id.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            Vehicle entity, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.query(VehicleModel).filter(VehicleModel.id == vehicle_id).first()
            if model is None:
                return None
            return self._model_to_entity(model)
        except _STORE_ERRORS as e:
            logger.error(f"Database error while getting vehicle {vehicle_id}: {str(e)}")
            raise RecordStoreError("lookup failed") from e
        finally:
            db.close()

    async def find_all(self) -> list[Vehicle]:
        """
        List all vehicles.

        Returns:
            Vehicles, newest first
        """
        db: Session = get_db_session()
        try:
            models = db.query(VehicleModel).order_by(VehicleModel.created_at.desc()).all()
            return [self._model_to_entity(model) for model in models]
        except _STORE_ERRORS as e:
            logger.error(f"Database error while listing vehicles: {str(e)}")
            raise RecordStoreError("listing failed") from e
        finally:
            db.close()

    async def update(self, vehicle: Vehicle) -> Optional[Vehicle]:
        """
        Replace the stored fields of an existing vehicle.

        Args:
            vehicle: Vehicle entity carrying its id

        Returns:
            Updated vehicle, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.query(VehicleModel).filter(VehicleModel.id == vehicle.id).first()
            if model is None:
                return None
            self._apply_entity(vehicle, model)
            self._commit_write(db, "update")
            return self._model_to_entity(model)
        except _STORE_ERRORS as e:
            db.rollback()
            logger.error(f"Database error while updating vehicle {vehicle.id}: {str(e)}")
            raise RecordStoreError("update failed") from e
        finally:
            db.close()

    async def delete(self, vehicle_id: str) -> bool:
        """
        Hard-delete a vehicle.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            True if removed, False if not found
        """
        db: Session = get_db_session()
        try:
            deleted = db.query(VehicleModel).filter(VehicleModel.id == vehicle_id).delete()
            db.commit()
            return deleted > 0
        except _STORE_ERRORS as e:
            db.rollback()
            logger.error(f"Database error while deleting vehicle {vehicle_id}: {str(e)}")
            raise RecordStoreError("delete failed") from e
        finally:
            db.close()
