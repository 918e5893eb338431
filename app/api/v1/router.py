"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Directory
and auth routes bind the optional bearer-token caller as the request actor.
"""

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_current_user_id_optional
from app.api.v1.endpoints import auth, health, roles, user_roles, users

api_router = APIRouter()

_bind_actor = [Depends(get_current_user_id_optional)]

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(
    user_roles.router, tags=["user-roles"], dependencies=_bind_actor
)
api_router.include_router(
    users.router, prefix="/users", tags=["users"], dependencies=_bind_actor
)
api_router.include_router(
    roles.router, prefix="/roles", tags=["roles"], dependencies=_bind_actor
)
