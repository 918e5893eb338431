"""Role ORM model. Global roles (e.g. Admin, Editor) assigned to users."""

from sqlalchemy import Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import DirectoryModel


class Role(DirectoryModel, Base):
    """Role. Table: role. name unique among live rows."""

    __tablename__ = "role"

    name: Mapped[str] = mapped_column(String(50), nullable=False)

    __table_args__ = (
        Index(
            "uq_role_name_live",
            "name",
            unique=True,
            postgresql_where=text("NOT is_deleted"),
            sqlite_where=text("NOT is_deleted"),
        ),
    )
