"""
Post service - CRUD and title search for the Post collection.

Design notes
------------
- The author of a post is an embedded ``{id, name}`` snapshot.  Whatever
  author the caller sends, only its id is trusted: the snapshot is rebuilt
  from the stored user on insert and on update, and an unknown author id
  raises ``ObjectNotFoundError`` like any other missing document.
- Comments are never taken from the request; ``update`` keeps the stored
  list and new comments go through ``comment_service.add_comment``.
"""
import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app import repository
from app.exceptions import ObjectNotFoundError
from app.models import Post
from app.schemas import AuthorDTO, PostDTO
from app.services import user_service

logger = logging.getLogger(__name__)


async def find_all(db: AsyncSession) -> list[Post]:
    return await repository.find_all(db, Post)


async def find_by_id(db: AsyncSession, post_id: str) -> Post:
    """Return the post with *post_id* or raise ``ObjectNotFoundError``."""
    post = await repository.find_by_id(db, Post, post_id)
    if post is None:
        logger.debug("Post %s not found", post_id)
        raise ObjectNotFoundError(post_id)
    return post


async def search_title(db: AsyncSession, text: str | None) -> list[Post]:
    """Return the posts whose title contains *text* (case-insensitive)."""
    return await repository.search_posts_by_title(db, text or "")


async def insert(db: AsyncSession, post: Post) -> Post:
    """
    Store *post* as a new document.

    Any caller-supplied id is discarded, the author snapshot is taken from
    the stored user and the date defaults to now.
    """
    post.id = None
    post.author = await _author_snapshot(db, post.author)
    if post.date is None:
        post.date = datetime.now(timezone.utc)
    if post.comments is None:
        post.comments = []
    post = await repository.save(db, post)
    logger.info("Created post %s by user %s", post.id, post.author["id"])
    return post


async def update(db: AsyncSession, post_id: str, post: Post) -> Post:
    """
    Copy title, date, body and author of *post* onto the stored post
    *post_id* and persist it.  The stored id and comments are kept; a
    missing date keeps the stored one.
    """
    entity = await find_by_id(db, post_id)
    await _update_data(db, entity, post)
    entity = await repository.save(db, entity)
    logger.info("Updated post %s", post_id)
    return entity


async def delete(db: AsyncSession, post_id: str) -> None:
    await find_by_id(db, post_id)
    await repository.delete_by_id(db, Post, post_id)
    logger.info("Deleted post %s", post_id)


def from_dto(dto: PostDTO) -> Post:
    return Post(
        id=dto.id,
        date=dto.date,
        title=dto.title,
        body=dto.body,
        author=dto.author.model_dump(),
        comments=[],
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _author_snapshot(db: AsyncSession, author: dict) -> dict:
    user = await user_service.find_by_id(db, author["id"])
    return AuthorDTO.from_user(user).model_dump()


async def _update_data(db: AsyncSession, entity: Post, post: Post) -> None:
    # Resolve the author first so an unknown author leaves *entity* untouched.
    author = await _author_snapshot(db, post.author)
    entity.title = post.title
    if post.date is not None:
        entity.date = post.date
    entity.body = post.body
    entity.author = author
