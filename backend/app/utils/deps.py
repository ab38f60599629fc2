from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db, QueryExecutor


async def get_executor(
    db: AsyncSession = Depends(get_db)
) -> QueryExecutor:
    """Query executor bound to the request's session"""
    return QueryExecutor(db)
