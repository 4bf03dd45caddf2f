"""FastAPI dependencies for dependency injection."""

from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.services.order_service import OrderApplicationService  # noqa: E402
from core.data.uow import UnitOfWork, create_uow  # noqa: E402
from core.infrastructure.database.config import get_session_factory as _get_session_factory  # noqa: E402
from core.settings import get_app_settings  # noqa: E402


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker instance
    """
    return _get_session_factory()


def get_uow() -> UnitOfWork:
    """Get Unit of Work instance.

    Returns:
        UnitOfWork instance
    """
    return create_uow(get_session_factory())


def get_order_service() -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    return OrderApplicationService(
        session_factory=get_session_factory(),
        settings=get_app_settings().orders,
    )
