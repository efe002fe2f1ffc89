# caminho: storefront_app/infrastructure/repositories/catalog_repository.py
# Funções:
# - SqlCatalogRepository: CRUD genérico (filtro por categoria, merge parcial)
# - ProductRepositoryImpl, ITServiceRepositoryImpl, FoodItemRepositoryImpl
# - CartRepositoryImpl: itens do carrinho por cart_id
# - ContactRequestRepositoryImpl: pedidos de contato

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_app.config.constants import CATEGORY_ALL
from storefront_app.domain.catalog.entities import CartItem, ContactRequest, FoodItem, ITService, Product
from storefront_app.domain.catalog.repositories import CartRepository, ContactRequestRepository
from storefront_app.infrastructure.db.models import (
    CartItemModel,
    ContactRequestModel,
    FoodItemModel,
    ITServiceModel,
    ProductModel,
)
from storefront_app.infrastructure.db.utils import apply_changes, try_commit

EntityT = TypeVar('EntityT')


def _to_domain_product(model: ProductModel) -> Product:
    return Product(
        id=model.id,
        name=model.name,
        description=model.description,
        price=model.price,
        category=model.category,
        image=model.image,
        featured=model.featured,
        in_stock=model.in_stock,
    )


def _to_domain_it_service(model: ITServiceModel) -> ITService:
    return ITService(
        id=model.id,
        title=model.title,
        description=model.description,
        features=list(model.features or []),
        icon=model.icon,
        available=model.available,
    )


def _to_domain_food_item(model: FoodItemModel) -> FoodItem:
    return FoodItem(
        id=model.id,
        name=model.name,
        description=model.description,
        price=model.price,
        category=model.category,
        image=model.image,
        available=model.available,
    )


def _to_domain_cart_item(model: CartItemModel) -> CartItem:
    return CartItem(
        id=model.id,
        cart_id=model.cart_id,
        product_id=model.product_id,
        product_name=model.product_name,
        product_price=model.product_price,
        quantity=model.quantity,
        image=model.image,
    )


class SqlCatalogRepository(Generic[EntityT]):
    model: type = None
    to_domain: Callable[[Any], EntityT] = None
    # Atributo usado pelo filtro ?category= (None: sem filtro)
    category_field: Optional[str] = None

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _columns(self) -> frozenset[str]:
        return frozenset(column.key for column in self.model.__table__.columns if column.key != 'id')

    async def list(self, category: Optional[str] = None) -> Sequence[EntityT]:
        stmt = select(self.model)
        if self.category_field and category and category != CATEGORY_ALL:
            stmt = stmt.where(getattr(self.model, self.category_field) == category)
        result = await self._session.execute(stmt.order_by(self.model.id))
        return [type(self).to_domain(model) for model in result.scalars().all()]

    async def get(self, entity_id: str) -> Optional[EntityT]:
        model = await self._session.get(self.model, entity_id)
        return type(self).to_domain(model) if model else None

    async def add(self, data: dict[str, Any]) -> EntityT:
        model = self.model(**{key: value for key, value in data.items() if key in self._columns()})
        self._session.add(model)
        await self._session.flush()
        await try_commit(self._session)
        await self._session.refresh(model)
        return type(self).to_domain(model)

    async def update(self, entity_id: str, changes: dict[str, Any]) -> Optional[EntityT]:
        model = await self._session.get(self.model, entity_id)
        if model is None:
            return None
        if apply_changes(model, changes, allowed=self._columns()):
            await self._session.flush()
            await try_commit(self._session)
            await self._session.refresh(model)
        return type(self).to_domain(model)

    async def remove(self, entity_id: str) -> bool:
        model = await self._session.get(self.model, entity_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        await try_commit(self._session)
        return True

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())


class ProductRepositoryImpl(SqlCatalogRepository[Product]):
    model = ProductModel
    to_domain = staticmethod(_to_domain_product)
    category_field = 'category'


class ITServiceRepositoryImpl(SqlCatalogRepository[ITService]):
    model = ITServiceModel
    to_domain = staticmethod(_to_domain_it_service)


class FoodItemRepositoryImpl(SqlCatalogRepository[FoodItem]):
    model = FoodItemModel
    to_domain = staticmethod(_to_domain_food_item)
    category_field = 'category'


class CartRepositoryImpl(CartRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _get_model(self, cart_id: str, item_id: str) -> Optional[CartItemModel]:
        stmt = select(CartItemModel).where(CartItemModel.id == item_id, CartItemModel.cart_id == cart_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(self, cart_id: str) -> Sequence[CartItem]:
        stmt = select(CartItemModel).where(CartItemModel.cart_id == cart_id).order_by(CartItemModel.id)
        result = await self._session.execute(stmt)
        return [_to_domain_cart_item(model) for model in result.scalars().all()]

    async def get(self, cart_id: str, item_id: str) -> Optional[CartItem]:
        model = await self._get_model(cart_id, item_id)
        return _to_domain_cart_item(model) if model else None

    async def add(self, cart_id: str, data: dict[str, Any]) -> CartItem:
        model = CartItemModel(
            cart_id=cart_id,
            product_id=data['product_id'],
            product_name=data['product_name'],
            product_price=data['product_price'],
            quantity=data.get('quantity') or 1,
            image=data['image'],
        )
        self._session.add(model)
        await self._session.flush()
        await try_commit(self._session)
        await self._session.refresh(model)
        return _to_domain_cart_item(model)

    async def update_quantity(self, cart_id: str, item_id: str, quantity: int) -> Optional[CartItem]:
        model = await self._get_model(cart_id, item_id)
        if model is None:
            return None
        model.quantity = quantity
        await self._session.flush()
        await try_commit(self._session)
        await self._session.refresh(model)
        return _to_domain_cart_item(model)

    async def remove(self, cart_id: str, item_id: str) -> bool:
        model = await self._get_model(cart_id, item_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        await try_commit(self._session)
        return True

    async def clear(self, cart_id: str) -> int:
        stmt = delete(CartItemModel).where(CartItemModel.cart_id == cart_id).execution_options(synchronize_session=False)
        result = await self._session.execute(stmt)
        await try_commit(self._session)
        return result.rowcount or 0


class ContactRequestRepositoryImpl(ContactRequestRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, data: dict[str, Any]) -> ContactRequest:
        model = ContactRequestModel(
            name=data['name'],
            phone=data['phone'],
            message=data['message'],
            service_type=data['service_type'],
        )
        self._session.add(model)
        await self._session.flush()
        await try_commit(self._session)
        await self._session.refresh(model)
        return ContactRequest(
            id=model.id,
            name=model.name,
            phone=model.phone,
            message=model.message,
            service_type=model.service_type,
            created_at=model.created_at,
        )
