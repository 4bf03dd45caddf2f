"""SQLAlchemy implementations of the catalog collaborators."""

from typing import Dict, Iterable, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.catalog import Category, Product, User
from core.domain.exceptions import NotFoundError
from core.domain.repositories.catalog_repository import ProductCatalog, UserDirectory
from core.domain.value_objects import Money

from ..mappers import CatalogMapper
from ..models import CategoryModel, ProductModel, UserModel
from .base import execute, flush, get


class SqlAlchemyProductCatalog(ProductCatalog):
    """Product lookups against the products table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        result = await execute(
            self._session,
            select(ProductModel)
            .options(selectinload(ProductModel.category))
            .where(ProductModel.id == product_id)
        )
        model = result.scalar_one_or_none()
        return CatalogMapper.product_to_domain(model) if model else None

    async def find_many(self, product_ids: Iterable[str]) -> Dict[str, Product]:
        """Bulk lookup in one query (avoids N+1 when validating a cart)."""
        ids = set(product_ids)
        if not ids:
            return {}
        result = await execute(
            self._session,
            select(ProductModel).where(ProductModel.id.in_(ids))
        )
        return {
            model.id: CatalogMapper.product_to_domain(model)
            for model in result.scalars().all()
        }

    async def add_category(self, category: Category) -> None:
        self._session.add(CategoryModel(id=category.id, name=category.name))
        await flush(self._session)

    async def add(self, product: Product) -> None:
        self._session.add(CatalogMapper.product_to_persistence(product))
        await flush(self._session)

    async def update_price(self, product_id: str, price: Money) -> None:
        result = await execute(
            self._session,
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(price=price.amount, currency=price.currency)
        )
        if result.rowcount == 0:
            raise NotFoundError("Product", product_id)


class SqlAlchemyUserDirectory(UserDirectory):
    """User lookups against the users table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: str) -> Optional[User]:
        model = await get(self._session, UserModel, user_id)
        return CatalogMapper.user_to_domain(model) if model else None

    async def add(self, user: User) -> None:
        self._session.add(UserModel(id=user.id, name=user.name, email=user.email))
        await flush(self._session)
