"""UserRoleMapping ORM model (many-to-many user-role with soft delete)."""

from sqlalchemy import ForeignKey, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import DirectoryModel


class UserRoleMapping(DirectoryModel, Base):
    """Many-to-many user-role. Table: user_role_mapping.

    At most one live mapping per (user_id, role_id); soft-deleted mappings
    do not block re-assignment. Hard-deleting the user or role cascades.
    """

    __tablename__ = "user_role_mapping"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    role_id: Mapped[str] = mapped_column(
        String, ForeignKey("role.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index(
            "uq_user_role_mapping_live",
            "user_id",
            "role_id",
            unique=True,
            postgresql_where=text("NOT is_deleted"),
            sqlite_where=text("NOT is_deleted"),
        ),
        Index("ix_user_role_mapping_role_id", "role_id"),
    )
