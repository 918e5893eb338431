"""Base repository: create and update with lifecycle hooks (mutation logging)."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base
from app.shared.context import get_current_actor_id
from app.shared.utils.datetime import utc_now


class BaseRepository[ModelType: Base]:
    """Base repository with create, update and post-write hooks.

    Subclasses override _on_after_create and _on_after_update to log or
    react to mutations. Rows carrying created_by/updated_by are stamped
    from the request actor context.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record, stamp the actor, and run _on_after_create hook."""
        actor_id = get_current_actor_id()
        if hasattr(obj, "created_by") and getattr(obj, "created_by") is None:
            setattr(obj, "created_by", actor_id)
        if hasattr(obj, "updated_by") and getattr(obj, "updated_by") is None:
            setattr(obj, "updated_by", actor_id)
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_create(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached record and run _on_after_update hook.

        updated_at is always bumped (even when only the actor changed) and
        updated_by is set from the request actor context.
        """
        if hasattr(obj, "updated_at"):
            setattr(obj, "updated_at", utc_now())
        if hasattr(obj, "updated_by"):
            setattr(obj, "updated_by", get_current_actor_id())
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_update(obj)
        return obj

    async def _on_after_create(self, obj: ModelType) -> None:
        """Override in subclasses to log or emit events."""

    async def _on_after_update(self, obj: ModelType) -> None:
        """Override in subclasses to log or emit events."""
