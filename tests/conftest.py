"""Shared fixtures: in-memory database, seeded catalog and order service."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.application.dtos.order_dto import CreateOrderRequest, OrderLineRequest
from core.application.services.order_service import OrderApplicationService
from core.data.models import Base
from core.data.uow import create_uow
from core.domain.entities import Category, Product, User
from core.domain.value_objects import Money
from core.settings import OrderSettings

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest_asyncio.fixture
async def catalog(test_session_factory):
    """Two users and three products: A at 10.00, B at 5.00, C at 2.50."""
    electronics = Category(name="Electronics")
    seeded = SimpleNamespace(
        category=electronics,
        product_a=Product(name="Keyboard", price=Money(Decimal("10.00")), category=electronics),
        product_b=Product(name="Mouse", price=Money(Decimal("5.00")), category=electronics),
        product_c=Product(name="Mouse pad", price=Money(Decimal("2.50"))),
        alice=User(name="Alice", email="alice@example.com"),
        bob=User(name="Bob", email="bob@example.com"),
    )

    async with create_uow(test_session_factory) as uow:
        await uow.products.add_category(electronics)
        for product in (seeded.product_a, seeded.product_b, seeded.product_c):
            await uow.products.add(product)
        await uow.users.add(seeded.alice)
        await uow.users.add(seeded.bob)
        await uow.commit()

    return seeded


@pytest.fixture
def clock():
    """Strictly increasing timestamps, one minute apart."""
    state = {"now": datetime(2025, 1, 13, 10, 0, tzinfo=timezone.utc)}

    def tick() -> datetime:
        state["now"] += timedelta(minutes=1)
        return state["now"]

    return tick


@pytest.fixture
def order_settings():
    return OrderSettings(currency="USD", default_status="Pending", strict_status=False)


@pytest.fixture
def order_service(test_session_factory, order_settings, clock):
    """Create order service backed by the in-memory database."""
    return OrderApplicationService(
        session_factory=test_session_factory,
        settings=order_settings,
        clock=clock,
    )


@pytest.fixture
def make_order_request():
    """Build a CreateOrderRequest from (product_id, quantity) lines."""

    def _make(user_id, lines, **overrides) -> CreateOrderRequest:
        fields = dict(
            order_items=[OrderLineRequest(product=pid, quantity=qty) for pid, qty in lines],
            shipping_address1="Flowers Street, 45",
            shipping_address2="1-B",
            city="Prague",
            zip="00000",
            country="Czech Republic",
            phone="+420702241333",
            user=user_id,
        )
        fields.update(overrides)
        return CreateOrderRequest(**fields)

    return _make
