"""SQLAlchemy mixins for common model patterns (DRY).

Provides: CuidMixin, TimestampMixin, SoftDeleteMixin, ActiveFlagMixin,
UserAuditMixin, and the combined DirectoryModel used by every entity here.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware).

    Python-side defaults give microsecond precision; server defaults cover
    rows written outside the ORM.
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            nullable=False,
            index=True,
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            onupdate=utc_now,
            nullable=False,
        )


class SoftDeleteMixin:
    """Mixin for soft delete (is_deleted flag). False means live."""

    @declared_attr
    def is_deleted(cls) -> Mapped[bool]:
        return mapped_column(
            Boolean,
            nullable=False,
            default=False,
            server_default=text("false"),
            index=True,
        )


class ActiveFlagMixin:
    """Mixin for the is_active flag (independent of is_deleted)."""

    @declared_attr
    def is_active(cls) -> Mapped[bool]:
        return mapped_column(
            Boolean,
            nullable=False,
            default=True,
            server_default=text("true"),
            index=True,
        )


class UserAuditMixin:
    """Mixin for user audit: created_by, updated_by (actor user id, plain column without FK)."""

    @declared_attr
    def created_by(cls) -> Mapped[str | None]:
        return mapped_column(String, nullable=True)

    @declared_attr
    def updated_by(cls) -> Mapped[str | None]:
        return mapped_column(String, nullable=True)


class DirectoryModel(
    CuidMixin, TimestampMixin, SoftDeleteMixin, ActiveFlagMixin, UserAuditMixin
):
    """Combined mixin: CUID + timestamps + is_deleted/is_active + created_by/updated_by."""

    __abstract__ = True
