import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from production_service.config.settings import get_settings

logger = logging.getLogger(__name__)

_async_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def create_async_database_engine(database_url: str | None = None) -> AsyncEngine:
    """Crea el engine de base de datos asíncrono"""
    settings = get_settings()
    database_url = database_url or settings.DB_URL
    if not database_url:
        raise ValueError("Database URL is required (DB_URL)")

    # Configuración base común
    base_config = {
        "echo": settings.DB_ECHO,
        "future": True,
    }

    if database_url.startswith("sqlite"):
        # SQLite maneja su propio pool
        logger.info("Creating async database engine for SQLite")
        engine_config = base_config
    elif settings.DEBUG:
        # Para desarrollo: usar NullPool (sin pooling)
        logger.info("Creating async database engine for DEVELOPMENT (NullPool)")
        engine_config = {
            **base_config,
            "pool_pre_ping": True,
            "poolclass": NullPool,
        }
    else:
        # Para producción: usar pool completo
        logger.info("Creating async database engine for PRODUCTION (pooled)")
        engine_config = {
            **base_config,
            "pool_pre_ping": True,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_timeout": 30,
        }

    return create_async_engine(database_url, **engine_config)


def get_async_engine() -> AsyncEngine:
    """Engine compartido, creado en el primer uso"""
    global _async_engine
    if _async_engine is None:
        _async_engine = create_async_database_engine()
    return _async_engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_async_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


@asynccontextmanager
async def get_async_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager para operaciones de base de datos asíncronas
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            logger.error(f"Async database error: {e}")
            await session.rollback()
            raise


async def init_db() -> None:
    """Crea las tablas que falten"""
    from production_service.models.db import Base

    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created successfully")


async def dispose_engine() -> None:
    global _async_engine, _session_factory
    if _async_engine is not None:
        await _async_engine.dispose()
        logger.info("Database engine disposed")
    _async_engine = None
    _session_factory = None
