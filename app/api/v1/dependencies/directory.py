"""User, role, assignment and auth service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import (
    AssignmentService,
    AuthService,
    RoleService,
    UserService,
)
from app.core.config import get_settings
from app.infrastructure.persistence.repositories import (
    RoleRepository,
    UserRepository,
    UserRoleRepository,
)
from app.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer

from .auth import get_password_hasher, get_token_issuer
from .db import ReadSession, WriteSession


def _user_repo(db: AsyncSession) -> UserRepository:
    return UserRepository(
        db, search_case_sensitive=get_settings().search_case_sensitive
    )


def _role_repo(db: AsyncSession) -> RoleRepository:
    return RoleRepository(
        db, search_case_sensitive=get_settings().search_case_sensitive
    )


def _user_service(db: AsyncSession, hasher: BcryptPasswordHasher) -> UserService:
    return UserService(
        _user_repo(db), hasher, max_page_size=get_settings().max_page_size
    )


async def get_user_service(
    db: ReadSession,
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    """User service for read operations."""
    return _user_service(db, hasher)


async def get_user_service_for_write(
    db: WriteSession,
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    """User service for writes (transactional)."""
    return _user_service(db, hasher)


async def get_role_service(db: ReadSession) -> RoleService:
    """Role service for read operations (list, get by id)."""
    return RoleService(_role_repo(db), max_page_size=get_settings().max_page_size)


async def get_role_service_for_write(db: WriteSession) -> RoleService:
    """Role service for create/update/delete."""
    return RoleService(_role_repo(db), max_page_size=get_settings().max_page_size)


async def get_assignment_service(db: ReadSession) -> AssignmentService:
    """Assignment service for listing user/role mappings."""
    return AssignmentService(_user_repo(db), _role_repo(db), UserRoleRepository(db))


async def get_assignment_service_for_write(db: WriteSession) -> AssignmentService:
    """Assignment service for assign/unassign/status (transactional)."""
    return AssignmentService(_user_repo(db), _role_repo(db), UserRoleRepository(db))


def _auth_service(
    db: AsyncSession, hasher: BcryptPasswordHasher, tokens: JwtTokenIssuer
) -> AuthService:
    return AuthService(_user_service(db, hasher), _user_repo(db), hasher, tokens)


async def get_auth_service(
    db: ReadSession,
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[JwtTokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    """Auth service for login and /me (no writes)."""
    return _auth_service(db, hasher, tokens)


async def get_auth_service_for_write(
    db: WriteSession,
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[JwtTokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    """Auth service for registration (transactional)."""
    return _auth_service(db, hasher, tokens)
