"""
Comment service - append-only comments embedded in a Post.

Comments cannot be edited or deleted.  Each one carries a snapshot of its
author taken from the stored user when the comment is written.
"""
import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app import repository
from app.schemas import AuthorDTO, CommentCreate, CommentDTO
from app.services import post_service, user_service

logger = logging.getLogger(__name__)


async def add_comment(
    db: AsyncSession,
    post_id: str,
    data: CommentCreate,
) -> CommentDTO:
    """
    Append a new comment to the post identified by *post_id*.

    Raises ``ObjectNotFoundError`` when either the post or the comment
    author does not exist.
    """
    post = await post_service.find_by_id(db, post_id)
    author = await user_service.find_by_id(db, data.author_id)

    comment = CommentDTO(
        text=data.text,
        date=data.date or datetime.now(timezone.utc),
        author=AuthorDTO.from_user(author),
    )
    # Reassign rather than append so the JSON column is flagged as dirty.
    post.comments = [*post.comments, comment.model_dump(mode="json")]
    await repository.save(db, post)

    logger.info("Added comment by user %s to post %s", author.id, post_id)
    return comment
