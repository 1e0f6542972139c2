"""Create database tables from the model metadata."""
import asyncio
import logging

from db.session import engine
from models import Base

logger = logging.getLogger(__name__)


async def init_db() -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()
    logger.info("Database tables created: %s", ", ".join(sorted(Base.metadata.tables)))


def main() -> None:
    """Entry point for running table creation as a script."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(init_db())


if __name__ == "__main__":
    main()
