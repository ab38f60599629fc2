import logging
from typing import Any, AsyncGenerator, Dict, List, Optional
from urllib.parse import urlparse, quote, urlunparse

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import settings

logger = logging.getLogger(__name__)


def fix_database_url(url):
    """Fix the database URL by selecting the async driver and encoding the password"""
    # Only plain postgres URLs need a driver; anything else is used as given
    if not url.startswith("postgresql://"):
        return url

    url = url.replace("postgresql://", "postgresql+psycopg://")

    parsed = urlparse(url)

    if '@' in parsed.netloc:
        auth_part, host_part = parsed.netloc.rsplit('@', 1)
        if ':' in auth_part:
            username, password = auth_part.split(':', 1)
            # URL encode the password to handle special characters
            encoded_password = quote(password, safe='')
            new_netloc = f"{username}:{encoded_password}@{host_part}"
            parsed = parsed._replace(netloc=new_netloc)

    return urlunparse(parsed)


def build_engine(url: str, echo: bool = False):
    """Create the process-wide async engine (connection pool)"""
    url = fix_database_url(url)
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=echo, future=True)

    return create_async_engine(
        url,
        echo=echo,
        future=True,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,  # Important for cloud databases
        pool_recycle=300,  # Recycle connections after 5 minutes
        connect_args={
            "prepare_threshold": None,  # Disable prepared statements
        }
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.sql_echo)

AsyncSessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


class QueryExecutor:
    """Runs parameterized SQL text on a session and hands back plain rows.

    Values are always bound as ``:name`` parameters, never formatted into the
    statement. Data store errors are logged and re-raised untouched.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch_all(self, statement: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Run a statement that returns rows, one dict per row in result order"""
        try:
            result = await self.session.execute(text(statement), params or {})
        except SQLAlchemyError as e:
            logger.error(f"Query failed: {e}")
            raise
        return [dict(row._mapping) for row in result.fetchall()]

    async def execute(self, statement: str, params: Optional[Dict[str, Any]] = None) -> int:
        """Run a data-modifying statement and return the affected row count"""
        try:
            result = await self.session.execute(text(statement), params or {})
        except SQLAlchemyError as e:
            logger.error(f"Statement failed: {e}")
            raise
        return result.rowcount
