"""
Base repository class providing common database operations.

Repositories only decide *what* happens to rows (insert, update, delete); they
flush but never commit. The transaction boundary belongs to the service layer,
which can batch several repository calls into one commit.

There are no business rules here: `delete_by_id` on an absent id is a silent
no-op and "not found" semantics are enforced by the services.
"""
from bazaar.exceptions.base import unclassified
from bazaar.exceptions.mapper import db_error_handler

import time
from typing import TypeVar, Generic, Type, Any
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from sqlalchemy.exc import SQLAlchemyError
import logging

from bazaar.database.base import Base

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)

# Setup logging
logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing save / find / delete by identifier.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages. It must
        expose an `id` primary key column.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class (not an instance), used to build queries.
            db: The async database session, owned by the caller.
        """
        self.model = model
        self.db = db

    # =================================================================================================================
    # Write Operations
    # =================================================================================================================

    async def save(self, entity: ModelType) -> ModelType:
        """
        Persist a new or already-loaded entity.

        New entities are inserted and get their identifier during the flush;
        entities loaded through this session are updated in place.

        Logging:
        - DEBUG: start event with model name and whether the entity is new.
        - INFO: success event with id and duration_ms.

        Raises:
            AppError: BAD_REQUEST on NOT NULL violations, UNCLASSIFIED on other DB failures.
        """
        is_new = getattr(entity, "id", None) is None
        logger.debug(
            "repo.save.start",
            extra={"model": self.model.__name__, "operation": "save", "is_new": is_new},
        )

        start = time.perf_counter()

        async with db_error_handler(self.db, self.model.__name__):
            self.db.add(entity)
            # flush sends the INSERT/UPDATE so the id is assigned; commit happens upstream
            await self.db.flush()
            await self.db.refresh(entity)

        duration_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            "repo.save.success",
            extra={
                "model": self.model.__name__,
                "operation": "insert" if is_new else "update",
                "id": str(entity.id),
                "duration_ms": duration_ms,
            },
        )
        return entity

    async def delete_by_id(self, entity_id: UUID) -> None:
        """
        Delete an entity by its ID. Deleting an absent id is not an error.

        Raises:
            AppError: UNCLASSIFIED for database errors
        """
        async with db_error_handler(self.db, self.model.__name__):
            result = await self.db.execute(
                delete(self.model).where(self.model.id == entity_id)
            )

        if result.rowcount:
            logger.debug(f"Deleted {self.model.__name__} with ID: {entity_id}")
        else:
            logger.debug(f"{self.model.__name__} with ID {entity_id} not present; nothing deleted")

    # =================================================================================================================
    # Read Operations
    # =================================================================================================================

    async def find_by_id(self, entity_id: UUID) -> ModelType | None:
        """
        Get an entity by its ID.

        Returns:
            The entity if found, otherwise None

        Raises:
            AppError: UNCLASSIFIED if the query fails.
        """
        try:
            # session.get() serves rows already in the identity map without a round-trip
            entity = await self.db.get(self.model, entity_id)
            logger.debug(f"Retrieved {self.model.__name__} by ID: {entity_id} (found={entity is not None})")
            return entity

        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model.__name__} by ID {entity_id}: {e}")
            raise unclassified(f"Failed to retrieve {self.model.__name__}") from e

    async def find_all(self, order_by: str | None = None) -> list[ModelType]:
        """
        Get every entity, optionally ordered by a model attribute.

        Args:
            order_by: Field name to order results by. Unknown fields are ignored
                      (with a warning) and storage order is used.
        """
        try:
            query = select(self.model)

            if order_by:
                if hasattr(self.model, order_by):
                    query = query.order_by(getattr(self.model, order_by))
                    logger.debug(f"Ordering {self.model.__name__} by field: '{order_by}'")
                else:
                    logger.warning(
                        f"Ignored invalid 'order_by' field: '{order_by}' does not exist on {self.model.__name__}")

            result = await self.db.execute(query)
            entities = list(result.scalars().all())

            logger.debug(f"Retrieved {len(entities)} {self.model.__name__} entities")
            return entities

        except SQLAlchemyError as e:
            logger.error(f"Error retrieving all {self.model.__name__}: {e}")
            raise unclassified(f"Failed to retrieve {self.model.__name__} entities") from e

    async def exists_by_id(self, entity_id: UUID) -> bool:
        """
        Check if an entity exists by its ID without loading it.
        """
        try:
            result = await self.db.execute(
                select(self.model.id).where(self.model.id == entity_id)
            )
            return result.scalar() is not None

        except SQLAlchemyError as e:
            logger.error(f"Error checking existence of {self.model.__name__} {entity_id}: {e}")
            raise unclassified(f"Failed to check {self.model.__name__} existence") from e

    async def count(self, **filters: Any) -> int:
        """
        Count entities with optional equality filters (e.g., email="a@x.com").

        Raises:
            AppError: UNCLASSIFIED if a filter names an unknown field or the query fails.
        """
        unknown = [field for field in filters if not hasattr(self.model, field)]
        if unknown:
            raise unclassified(f"{self.model.__name__} has no field(s): {', '.join(unknown)}")

        try:
            query = select(func.count(self.model.id))
            for field, value in filters.items():
                query = query.where(getattr(self.model, field) == value)

            result = await self.db.execute(query)
            return result.scalar() or 0

        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model.__name__}: {e}")
            raise unclassified(f"Failed to count {self.model.__name__} entities") from e


__all__ = ["BaseRepository"]
