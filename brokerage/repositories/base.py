"""
Generic async repository shared by listings, media, inquiries, team members and admins.
Each write commits on success and rolls back before re-raising on failure.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from brokerage.database import Base
from typing import TypeVar, Generic, Optional, Dict, Any, Type
import uuid
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Id-keyed CRUD for one model class.
    Subclasses add the catalog, gallery and roster queries.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        self.model = model
        self.db = db

    @property
    def name(self) -> str:
        return self.model.__name__

    async def _rollback(self, action: str, error: Exception) -> None:
        await self.db.rollback()
        logger.error(f"Failed to {action} {self.name}: {error}")

    async def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """
        Insert a row built from column values.

        Args:
            obj_in: Column values; model validators run on assignment

        Returns:
            The refreshed instance with server defaults populated
        """
        try:
            db_obj = self.model(**obj_in)
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)
        except Exception as e:
            await self._rollback("create", e)
            raise

        logger.debug(f"Created {self.name} {db_obj.id}")
        return db_obj

    async def get_by_id(self, id: uuid.UUID) -> Optional[ModelType]:
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        obj = result.scalar_one_or_none()
        if obj is None:
            logger.debug(f"{self.name} {id} not found")
        return obj

    async def update(self, id: uuid.UUID, obj_in: Dict[str, Any]) -> Optional[ModelType]:
        """
        Apply a partial update.

        Unknown keys are ignored, and None is only written to nullable columns,
        so a PATCH body can be passed through as-is.

        Returns:
            The refreshed instance, or None when the id doesn't exist
        """
        db_obj = await self.get_by_id(id)
        if db_obj is None:
            return None

        columns = self.model.__mapper__.columns
        changes = {
            key: value for key, value in obj_in.items()
            if key in columns and (value is not None or columns[key].nullable)
        }
        if not changes:
            logger.debug(f"Nothing to update on {self.name} {id}")
            return db_obj

        try:
            for field, value in changes.items():
                setattr(db_obj, field, value)
            await self.db.commit()
            await self.db.refresh(db_obj)
        except Exception as e:
            await self._rollback("update", e)
            raise

        logger.debug(f"Updated {self.name} {id}: {sorted(changes)}")
        return db_obj

    async def delete(self, id: uuid.UUID) -> bool:
        """
        Delete by id.

        Returns:
            True if a row was removed
        """
        try:
            result = await self.db.execute(delete(self.model).where(self.model.id == id))
            await self.db.commit()
        except Exception as e:
            await self._rollback("delete", e)
            raise

        deleted = result.rowcount > 0
        logger.debug(f"Delete {self.name} {id}: {'done' if deleted else 'not found'}")
        return deleted

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        Count rows matching equality filters on model attributes.

        Args:
            filters: Attribute name to required value; unknown names are skipped
        """
        query = select(func.count(self.model.id))
        for field, value in (filters or {}).items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        result = await self.db.execute(query)
        return result.scalar() or 0

    async def exists(self, id: uuid.UUID) -> bool:
        result = await self.db.execute(
            select(func.count(self.model.id)).where(self.model.id == id)
        )
        return (result.scalar() or 0) > 0
