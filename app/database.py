"""
Database connection and session management
Using SQLModel with an async SQLAlchemy engine (asyncpg or aiosqlite)
"""
from sqlmodel import SQLModel
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from typing import AsyncGenerator
import logging
from app.config import DATABASE_URL, DEBUG, MODE

logger = logging.getLogger(__name__)

# Convert postgresql:// to postgresql+asyncpg:// for async operations
async_database_url = DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://")
is_sqlite = async_database_url.startswith("sqlite")

if is_sqlite:
    # aiosqlite connections belong to the event loop that opened them,
    # so never hand them to another loop through a pool
    async_engine = create_async_engine(
        async_database_url,
        echo=DEBUG,
        future=True,
        poolclass=NullPool,
        connect_args={"check_same_thread": False},
    )
else:
    async_engine = create_async_engine(
        async_database_url,
        echo=DEBUG,
        future=True,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,  # Recycle connections after 1 hour
        pool_timeout=30,
        pool_size=5,
        max_overflow=10,
        connect_args={
            "command_timeout": 30,
            "server_settings": {"application_name": "catering_site"},
        },
    )

logger.info(f"Database engine created (mode: {MODE}, driver: {async_engine.dialect.driver})")


def mask_database_url(url: str) -> str:
    """Hide the password part of a database URL for logging."""
    if "@" not in url or "://" not in url:
        return url
    scheme, rest = url.split("://", 1)
    credentials, host = rest.rsplit("@", 1)
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:***@{host}"


logger.info(f"Database URL: {mask_database_url(async_database_url)}")

# Create async session factory
AsyncSessionLocal = sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get async database session
    Usage: async def endpoint(session: AsyncSession = Depends(get_async_session))
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db():
    """
    Initialize database - create all tables and seed the administrator
    Call this on application startup
    """
    # Import all models here so SQLModel can create tables
    from app.apps.authentication.models import User  # noqa: F401
    from app.apps.sitedata.models import SiteData  # noqa: F401
    from app.apps.contact.models import ContactSubmission  # noqa: F401
    from app.apps.authentication.utils import seed_admin_user

    async with async_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        await seed_admin_user(session)


async def close_db():
    """
    Close database connections
    Call this on application shutdown
    """
    await async_engine.dispose()
    logger.info("Database connections closed")


async def test_db_connection():
    """
    Test database connection - useful for debugging
    """
    try:
        async with AsyncSessionLocal() as session:
            # Simple query to test connection
            from sqlalchemy import text
            result = await session.execute(text("SELECT 1"))
            value = result.scalar()
            logger.info(f"Database connection test successful: {value}")
            return True
    except Exception as e:
        logger.error(f"Database connection test failed: {e}", exc_info=True)
        return False
