"""
Unit tests for the order repositories.

The SQLAlchemy repository runs against an in-memory SQLite database
through aiosqlite.
"""

from datetime import UTC, datetime

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from production_service.domains.production.application.ports import IOrderRepository
from production_service.domains.production.domain.entities import OrderProduct, OrderProductList
from production_service.domains.production.domain.value_objects import PaymentStatus, Status
from production_service.domains.production.infrastructure.repositories import (
    InMemoryOrderRepository,
    SQLAlchemyOrderRepository,
)
from production_service.models.db import Base, OrderProductModel


# ============================================================================
# FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def async_engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(async_engine) -> async_sessionmaker:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


# ============================================================================
# IN-MEMORY
# ============================================================================


class TestInMemoryOrderRepository:
    """Test cases for InMemoryOrderRepository"""

    def test_satisfies_port(self):
        assert isinstance(InMemoryOrderRepository(), IOrderRepository)

    @pytest.mark.asyncio
    async def test_save_and_find(self, make_order):
        repository = InMemoryOrderRepository()
        order = make_order()

        await repository.save(order)

        assert await repository.find_by_id(order.id) is order
        assert await repository.find_by_id("missing") is None
        assert await repository.find_all() == [order]

    @pytest.mark.asyncio
    async def test_save_replaces_same_id(self, make_order):
        repository = InMemoryOrderRepository()
        await repository.save(make_order(id="x", status=Status.RECEIVED))

        await repository.save(make_order(id="x", status=Status.READY))

        assert len(repository) == 1
        assert (await repository.find_by_id("x")).status is Status.READY


# ============================================================================
# SQLALCHEMY
# ============================================================================


class TestSQLAlchemyOrderRepository:
    """Test cases for SQLAlchemyOrderRepository on SQLite"""

    @pytest.mark.asyncio
    async def test_satisfies_port(self, db_session):
        assert isinstance(SQLAlchemyOrderRepository(db_session), IOrderRepository)

    @pytest.mark.asyncio
    async def test_round_trip_keeps_fields(self, session_factory, make_order, base_time):
        order = make_order(
            product_ids=["p1", "p2", "p1"],
            status=Status.IN_PREPARATION,
            payment_status=PaymentStatus.APPROVED,
        )
        async with session_factory() as session:
            await SQLAlchemyOrderRepository(session).save(order)

        async with session_factory() as session:
            loaded = await SQLAlchemyOrderRepository(session).find_by_id(order.id)

        assert loaded == order
        assert loaded.customer_id == order.customer_id
        assert loaded.status is Status.IN_PREPARATION
        assert loaded.payment_status is PaymentStatus.APPROVED
        assert [line.product_id for line in loaded.product_lines()] == ["p1", "p2", "p1"]
        assert [line.id for line in loaded.product_lines()] == [line.id for line in order.product_lines()]
        assert loaded.created_at == base_time
        assert loaded.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_unset_statuses_stay_unset(self, db_session, make_order):
        repository = SQLAlchemyOrderRepository(db_session)
        await repository.save(make_order())

        loaded = await repository.find_by_id("order-1")

        assert loaded.status is None
        assert loaded.payment_status is None

    @pytest.mark.asyncio
    async def test_missing_order(self, db_session):
        assert await SQLAlchemyOrderRepository(db_session).find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_save_updates_and_replaces_lines(self, session_factory, make_order):
        order = make_order(product_ids=["p1", "p2"])
        async with session_factory() as session:
            await SQLAlchemyOrderRepository(session).save(order)

        order.set_payment_status(PaymentStatus.APPROVED)
        order.advance_status()
        order.replace_products(["p3"])
        async with session_factory() as session:
            await SQLAlchemyOrderRepository(session).save(order)

        async with session_factory() as session:
            loaded = await SQLAlchemyOrderRepository(session).find_by_id(order.id)
            line_count = await session.scalar(select(func.count()).select_from(OrderProductModel))

        assert loaded.status is Status.IN_PREPARATION
        assert loaded.updated_at is not None
        assert [line.product_id for line in loaded.product_lines()] == ["p3"]
        assert line_count == 1

    @pytest.mark.asyncio
    async def test_lines_reconciled_by_id_after_reload(self, session_factory, make_order):
        order = make_order(product_ids=["p1", "p2"])
        async with session_factory() as session:
            await SQLAlchemyOrderRepository(session).save(order)

        async with session_factory() as session:
            repository = SQLAlchemyOrderRepository(session)
            loaded = await repository.find_by_id(order.id)
            kept = loaded.product_lines()[1]
            added = OrderProduct.create(order_id=order.id, product_id="p3")
            loaded.products = OrderProductList([kept, added])
            assert loaded.products.get_new_items() == []
            await repository.save(loaded)

        async with session_factory() as session:
            reloaded = await SQLAlchemyOrderRepository(session).find_by_id(order.id)
            line_count = await session.scalar(select(func.count()).select_from(OrderProductModel))

        assert [line.id for line in reloaded.product_lines()] == [kept.id, added.id]
        assert [line.product_id for line in reloaded.product_lines()] == ["p2", "p3"]
        assert line_count == 2

    @pytest.mark.asyncio
    async def test_find_all_oldest_first(self, db_session, make_order):
        repository = SQLAlchemyOrderRepository(db_session)
        await repository.save(make_order(id="new", minutes_ago=1))
        await repository.save(make_order(id="old", minutes_ago=30))

        orders = await repository.find_all()

        assert [order.id for order in orders] == ["old", "new"]

    @pytest.mark.asyncio
    async def test_naive_datetimes_read_back_as_utc(self, db_session, make_order):
        order = make_order()
        order.created_at = datetime(2024, 1, 1, 8, 30)
        repository = SQLAlchemyOrderRepository(db_session)
        await repository.save(order)
        db_session.expunge_all()

        loaded = await repository.find_by_id(order.id)

        assert loaded.created_at == datetime(2024, 1, 1, 8, 30, tzinfo=UTC)
