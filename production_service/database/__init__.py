from production_service.database.async_db import (
    dispose_engine,
    get_async_db_context,
    get_async_engine,
    get_session_factory,
    init_db,
)

__all__ = [
    "dispose_engine",
    "get_async_db_context",
    "get_async_engine",
    "get_session_factory",
    "init_db",
]
