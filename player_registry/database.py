from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import declarative_base, sessionmaker

from player_registry.config import DATABASE_URL, SQL_ECHO


def enable_case_sensitive_like(engine):
    """Make LIKE case-sensitive on SQLite, matching PostgreSQL behaviour."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_case_sensitive_like(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA case_sensitive_like = ON")
        cursor.close()


# ✅ Use create_async_engine for async operations
engine = create_async_engine(DATABASE_URL, echo=SQL_ECHO)
enable_case_sensitive_like(engine)

# ✅ Create an async session
SessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)

# ✅ Define Base for models
Base = declarative_base()


# ✅ Dependency to get the async session
async def get_db():
    async with SessionLocal() as session:
        yield session


async_session = SessionLocal
