"""Database seeder for local development and manual pagination checks."""
import asyncio
import argparse
import random
import time

from board.database import engine, async_session, Base
from board.models import Post

TOPICS = ["python", "fastapi", "postgresql", "sqlalchemy", "docker", "testing",
          "asyncio", "pydantic", "alembic", "performance"]


async def seed(count: int, reset: bool = False):
    print(f"Seeding: {count} posts")
    start = time.perf_counter()

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    batch_size = 500
    async with async_session() as session:
        for batch_start in range(0, count, batch_size):
            batch_end = min(batch_start + batch_size, count)
            for i in range(batch_start, batch_end):
                topic = random.choice(TOPICS)
                session.add(Post(
                    title=f"Post {i}: notes on {topic}",
                    content=f"This is the body of post {i} about {topic}. " * 10,
                ))
            await session.flush()
            print(f"  Batch {batch_start}-{batch_end}: posts created")

        await session.commit()

    await engine.dispose()
    print(f"\nSeeding complete in {time.perf_counter() - start:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Seed the board database")
    parser.add_argument("--count", type=int, default=100, help="Number of posts to create")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate tables first")
    args = parser.parse_args()
    asyncio.run(seed(args.count, reset=args.reset))


if __name__ == "__main__":
    main()
