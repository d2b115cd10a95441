"""데이터베이스 연결 관리.

맞춤법 사전(spellcheck_terms)이 저장된 PostgreSQL에 연결합니다.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lyrics_spellcheck.core.config.settings import settings


def _async_database_url() -> str:
    """psycopg 비동기 드라이버용 URL로 변환합니다."""
    return str(settings.database_url).replace("postgresql://", "postgresql+psycopg://")


engine: AsyncEngine = create_async_engine(
    _async_database_url(),
    echo=settings.debug,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=5,
)

AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션 의존성.

    요청이 끝나면 세션을 닫습니다.

    Yields:
        비동기 데이터베이스 세션
    """
    async with AsyncSessionLocal() as session:
        yield session
