"""Load the sample users and posts into the configured database."""
import argparse
import asyncio
import logging

from app.database import Base, async_session, create_collections, engine
from app.services import seed_service


async def seed(recreate: bool = False):
    if recreate:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    await create_collections()

    async with async_session() as session:
        result = await seed_service.seed(session)
        await session.commit()

    for user in result.users:
        print(f"  user {user.id}  {user.name} <{user.email}>")
    for post in result.posts:
        print(f"  post {post.id}  {post.title!r} by {post.author['name']}")

    await engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="Seed the workshop database")
    parser.add_argument("--recreate", action="store_true", help="Drop and recreate both tables first")
    parser.add_argument("--verbose", action="store_true", help="Log every write")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    asyncio.run(seed(recreate=args.recreate))


if __name__ == "__main__":
    main()
