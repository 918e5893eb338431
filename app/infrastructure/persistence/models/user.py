"""User ORM model for authentication and the user directory."""

from datetime import date

from sqlalchemy import Date, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import DirectoryModel

_LIVE = text("NOT is_deleted")


class User(DirectoryModel, Base):
    """User model. Table: app_user.

    username and email are unique among live (non-deleted) rows only; the
    partial indexes are the authoritative guard.
    """

    __tablename__ = "app_user"

    username: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (
        Index(
            "uq_app_user_username_live",
            "username",
            unique=True,
            postgresql_where=_LIVE,
            sqlite_where=_LIVE,
        ),
        Index(
            "uq_app_user_email_live",
            "email",
            unique=True,
            postgresql_where=_LIVE,
            sqlite_where=_LIVE,
        ),
    )
