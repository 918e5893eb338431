"""Create a user in the configured database, optionally granting existing roles.

Usage:
    uv run python -m scripts.create_test_user <username> <first_name> [password] [--role NAME ...]
If password is omitted, a random one is printed. Roles are looked up by live name.
All imports use app.*.
"""

import asyncio
import secrets
import sys

from app.application.dtos.common import ListQuery
from app.application.services import AssignmentService, UserService
from app.core.config import get_settings
from app.domain.exceptions import DirectoryException
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import (
    RoleRepository,
    UserRepository,
    UserRoleRepository,
)
from app.infrastructure.security import BcryptPasswordHasher


def _parse_args(argv: list[str]) -> tuple[list[str], list[str]]:
    positional: list[str] = []
    roles: list[str] = []
    it = iter(argv)
    for arg in it:
        if arg == "--role":
            roles.append(next(it, ""))
        else:
            positional.append(arg)
    return positional, [r for r in roles if r]


async def main() -> None:
    """Create the user and assign the named roles in one transaction."""
    positional, role_names = _parse_args(sys.argv[1:])
    if len(positional) < 2:
        print(
            "Usage: uv run python -m scripts.create_test_user <username> <first_name> "
            "[password] [--role NAME ...]",
            file=sys.stderr,
        )
        sys.exit(1)
    username, first_name = positional[0], positional[1]
    password = positional[2] if len(positional) > 2 else secrets.token_urlsafe(12)

    settings = get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        sys.exit(1)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            role_repo = RoleRepository(session)
            users = UserService(
                user_repo, BcryptPasswordHasher(), max_page_size=settings.max_page_size
            )
            assignments = AssignmentService(
                user_repo, role_repo, UserRoleRepository(session)
            )
            try:
                user = await users.create(
                    {
                        "username": username,
                        "email": f"{username}@example.com",
                        "password": password,
                        "first_name": first_name,
                    }
                )
                role_ids = []
                for name in role_names:
                    rows, _ = await role_repo.search(ListQuery(search=name, limit=100))
                    match = next((r for r in rows if r.name == name), None)
                    if match is None:
                        print(f"Role not found: {name}", file=sys.stderr)
                        sys.exit(1)
                    role_ids.append(match.id)
                if role_ids:
                    await assignments.bulk_assign(user.id, role_ids)
            except DirectoryException as e:
                print(f"{e.error_code}: {e.message}", file=sys.stderr)
                sys.exit(1)
            print(f"Created user: {user.id} ({username})")
            if role_names:
                print(f"Roles: {', '.join(role_names)}")
            print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
