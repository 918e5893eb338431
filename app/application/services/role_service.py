"""Role application service: directory operations on roles."""

from __future__ import annotations

from app.application.dtos.role import RoleResult
from app.application.interfaces.repositories import IDirectoryRepository
from app.application.services.directory_service import DirectoryService


class RoleService(DirectoryService[RoleResult]):
    """Role directory. Name is unique among live roles."""

    def __init__(self, role_repo: IDirectoryRepository, *, max_page_size: int = 100) -> None:
        super().__init__(role_repo, max_page_size=max_page_size)
