"""
Repository tests - the generic CRUD functions shared by both collections
and the two post queries.
"""
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app import repository
from app.models import Post, User


def _post(title: str, author_id: str, date: datetime | None = None) -> Post:
    return Post(
        title=title,
        body="...",
        date=date or datetime.now(timezone.utc),
        author={"id": author_id, "name": "Willian"},
        comments=[],
    )


@pytest.mark.asyncio
async def test_save_inserts_without_id(db_session: AsyncSession):
    user = await repository.save(db_session, User(name="Willian", email="willian@example.com"))
    assert user.id is not None
    assert len(user.id) == 32
    assert await repository.find_by_id(db_session, User, user.id) is user


@pytest.mark.asyncio
async def test_save_replaces_existing_document(db_session: AsyncSession):
    user = await repository.save(db_session, User(name="Willian", email="willian@example.com"))
    await db_session.commit()
    db_session.expunge_all()

    replaced = await repository.save(db_session, User(id=user.id, name="Will", email="will@example.com"))
    assert replaced.id == user.id

    users = await repository.find_all(db_session, User)
    assert [(u.id, u.name, u.email) for u in users] == [(user.id, "Will", "will@example.com")]


@pytest.mark.asyncio
async def test_find_by_id_missing(db_session: AsyncSession):
    assert await repository.find_by_id(db_session, User, "missing") is None


@pytest.mark.asyncio
async def test_delete_by_id(db_session: AsyncSession):
    user = await repository.save(db_session, User(name="Willian", email="willian@example.com"))
    await repository.delete_by_id(db_session, User, user.id)
    assert await repository.find_by_id(db_session, User, user.id) is None


@pytest.mark.asyncio
async def test_delete_by_id_missing_is_noop(db_session: AsyncSession):
    await repository.delete_by_id(db_session, User, "missing")
    assert await repository.find_all(db_session, User) == []


@pytest.mark.asyncio
async def test_delete_all(db_session: AsyncSession):
    for name in ("Willian", "Maria", "João"):
        await repository.save(db_session, User(name=name, email=f"{name}@example.com"))
    await db_session.commit()

    await repository.delete_all(db_session, User)
    await db_session.commit()
    assert await repository.find_all(db_session, User) == []


@pytest.mark.asyncio
async def test_find_posts_by_author_newest_first(db_session: AsyncSession):
    now = datetime.now(timezone.utc)
    await repository.save(db_session, _post("Old", "u1", now - timedelta(days=2)))
    await repository.save(db_session, _post("New", "u1", now))
    await repository.save(db_session, _post("Other", "u2", now))

    posts = await repository.find_posts_by_author(db_session, "u1")
    assert [p.title for p in posts] == ["New", "Old"]


@pytest.mark.asyncio
async def test_search_posts_by_title(db_session: AsyncSession):
    await repository.save(db_session, _post("Bom dia!", "u1"))
    await repository.save(db_session, _post("Partiu Viagem!", "u1"))

    posts = await repository.search_posts_by_title(db_session, "DIA")
    assert [p.title for p in posts] == ["Bom dia!"]


def test_user_equality_by_id():
    assert User(id="a", name="Willian", email="x") == User(id="a", name="Will", email="y")
    assert User(id="a", name="Willian", email="x") != User(id="b", name="Willian", email="x")
    assert len({User(id="a", name="1", email="1"), User(id="a", name="2", email="2")}) == 1


def test_unsaved_users_equal_only_to_themselves():
    user = User(name="Willian", email="x")
    assert user == user
    assert user != User(name="Willian", email="x")
