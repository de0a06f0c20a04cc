from logging.config import fileConfig
from sqlalchemy import pool, create_engine

from alembic import context

# Import your models and database config
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.config import DATABASE_URL
from sqlmodel import SQLModel

# Import all models so Alembic can detect them
from app.apps.authentication.models import User  # noqa: F401
from app.apps.sitedata.models import SiteData  # noqa: F401
from app.apps.contact.models import ContactSubmission  # noqa: F401

# this is the Alembic Config object
config = context.config


def sync_database_url(url: str) -> str:
    """Alembic runs synchronously, so drop the async driver from the URL"""
    return (
        url.replace("postgresql+asyncpg://", "postgresql://")
        .replace("sqlite+aiosqlite://", "sqlite://")
    )


config.set_main_option("sqlalchemy.url", sync_database_url(DATABASE_URL))

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Add your model's MetaData object here for 'autogenerate' support
target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = create_engine(config.get_main_option("sqlalchemy.url"), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
