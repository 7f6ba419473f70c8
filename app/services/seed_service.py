"""
Sample data loader.

Wipes both collections and writes three users and two posts, one of them
with a comment.  Used by ``scripts/seed.py`` and, when ``SEED_ON_STARTUP``
is set, by the application lifespan.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app import repository
from app.models import Post, User
from app.schemas import CommentCreate
from app.services import comment_service, post_service, user_service

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    users: list[User]
    posts: list[Post]


async def seed(db: AsyncSession) -> SeedResult:
    await repository.delete_all(db, User)
    await repository.delete_all(db, Post)

    willian = await user_service.insert(db, User(name="Willian", email="willian@example.com"))
    maria = await user_service.insert(db, User(name="Maria", email="maria@example.com"))
    joao = await user_service.insert(db, User(name="João", email="joao@example.com"))

    now = datetime.now(timezone.utc)
    trip = await post_service.insert(db, Post(
        date=now,
        title="Partiu Viagem!",
        body="Vou viajar para São Paulo, Abraços",
        author={"id": willian.id},
    ))
    morning = await post_service.insert(db, Post(
        date=now - timedelta(days=1),
        title="Bom dia!",
        body="Acordei hoje feliz, cheio de energia!",
        author={"id": maria.id},
    ))

    await comment_service.add_comment(
        db, trip.id, CommentCreate(text="Boa viagem!!", author_id=joao.id, date=now)
    )

    logger.info("Seeded 3 users and 2 posts")
    return SeedResult(users=[willian, maria, joao], posts=[trip, morning])
