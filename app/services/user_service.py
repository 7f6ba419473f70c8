"""
User service - CRUD operations for the User collection.

A user's posts are not stored on the user document; ``find_posts`` fetches
them with a separate query on the posts' embedded author id.  Deleting a
user leaves their posts (and the author snapshots inside them) untouched.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app import repository
from app.exceptions import ObjectNotFoundError
from app.models import Post, User
from app.schemas import UserDTO

logger = logging.getLogger(__name__)


async def find_all(db: AsyncSession) -> list[User]:
    return await repository.find_all(db, User)


async def find_by_id(db: AsyncSession, user_id: str) -> User:
    """Return the user with *user_id* or raise ``ObjectNotFoundError``."""
    user = await repository.find_by_id(db, User, user_id)
    if user is None:
        logger.debug("User %s not found", user_id)
        raise ObjectNotFoundError(user_id)
    return user


async def insert(db: AsyncSession, user: User) -> User:
    """Store *user* as a new document, discarding any caller-supplied id."""
    user.id = None
    user = await repository.save(db, user)
    logger.info("Created user %s", user.id)
    return user


async def update(db: AsyncSession, user_id: str, user: User) -> User:
    """
    Copy the editable fields (name, email) of *user* onto the stored user
    *user_id* and persist it.  The stored id is kept whatever *user* carries.
    """
    entity = await find_by_id(db, user_id)
    _update_data(entity, user)
    entity = await repository.save(db, entity)
    logger.info("Updated user %s", user_id)
    return entity


async def delete(db: AsyncSession, user_id: str) -> None:
    await find_by_id(db, user_id)
    await repository.delete_by_id(db, User, user_id)
    logger.info("Deleted user %s", user_id)


async def find_posts(db: AsyncSession, user_id: str) -> list[Post]:
    """Return the posts authored by *user_id*, newest first."""
    await find_by_id(db, user_id)
    return await repository.find_posts_by_author(db, user_id)


def from_dto(dto: UserDTO) -> User:
    return User(id=dto.id, name=dto.name, email=dto.email)


def _update_data(entity: User, user: User) -> None:
    entity.name = user.name
    entity.email = user.email
