"""
Generic document access for the ``users`` and ``posts`` collections.

Every function takes the caller's ``AsyncSession`` and, where the operation
is not tied to an instance, the entity class it works on::

    await repository.find_by_id(db, User, user_id)
    await repository.save(db, post)

Functions flush but never commit; the transaction boundary is owned by the
``get_db`` dependency in the router layer.
"""
from typing import TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Post

EntityT = TypeVar("EntityT")


# ---------------------------------------------------------------------------
# CRUD shared by every collection
# ---------------------------------------------------------------------------

async def find_all(db: AsyncSession, model: type[EntityT]) -> list[EntityT]:
    result = await db.execute(select(model))
    return list(result.scalars().all())


async def find_by_id(db: AsyncSession, model: type[EntityT], id: str) -> EntityT | None:
    return await db.get(model, id)


async def save(db: AsyncSession, entity: EntityT) -> EntityT:
    """
    Persist *entity* and return the stored instance.

    An entity without an id is inserted and receives a store-generated one.
    An entity carrying an id replaces the stored document with that id
    (or is inserted under it when none exists).
    """
    if entity.id is None:
        db.add(entity)
    else:
        entity = await db.merge(entity)
    await db.flush()
    return entity


async def delete_by_id(db: AsyncSession, model: type, id: str) -> None:
    entity = await db.get(model, id)
    if entity is not None:
        await db.delete(entity)
        await db.flush()


async def delete_all(db: AsyncSession, model: type) -> None:
    await db.execute(delete(model))


# ---------------------------------------------------------------------------
# Post queries
# ---------------------------------------------------------------------------

async def find_posts_by_author(db: AsyncSession, author_id: str) -> list[Post]:
    """Return the posts whose embedded author snapshot has *author_id*, newest first."""
    q = (
        select(Post)
        .where(Post.author["id"].as_string() == author_id)
        .order_by(Post.date.desc())
    )
    result = await db.execute(q)
    return list(result.scalars().all())


async def search_posts_by_title(db: AsyncSession, text: str) -> list[Post]:
    """Return the posts whose title contains *text*, ignoring case."""
    q = select(Post).where(Post.title.icontains(text, autoescape=True))
    result = await db.execute(q)
    return list(result.scalars().all())
