from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

from ...dbmodels import Users
from ...errors import NotFoundError
from ...logging import get_logger
from ...repository import collection
from ...validation import UserCreate, validate_payload
from . import get_database, get_loaders

if TYPE_CHECKING:
    from ..types.user import User

logger = get_logger(__name__)


def user_to_type(user: Users) -> User:
    from ..types.user import User as UserType

    return UserType(id=user.id, username=user.username, created_at=user.created_at)


async def resolve_user_by_id(info: strawberry.Info, id: UUID) -> User | None:
    async with get_database(info).session() as session:
        user = await collection.get_user(session, id)
        if user is None:
            logger.info("User not found", user_id=str(id))
            return None
        return user_to_type(user)


async def resolve_user_by_id_loader(info: strawberry.Info, id: UUID) -> User:
    """Batched lookup used by relation fields; the foreign key guarantees presence."""
    user = await get_loaders(info).user_loader.load(id)
    if user is None:
        raise NotFoundError("User", id)
    return user_to_type(user)


async def resolve_users(info: strawberry.Info) -> list[User]:
    async with get_database(info).session() as session:
        users = await collection.list_users(session)
        return [user_to_type(user) for user in users]


async def create_user(info: strawberry.Info, username: str) -> User:
    data = validate_payload(UserCreate, {"username": username})
    async with get_database(info).session() as session:
        user = await collection.create_user(session, data.username)
        logger.info("User created", user_id=str(user.id))
        return user_to_type(user)
