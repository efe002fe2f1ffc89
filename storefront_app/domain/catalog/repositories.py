# caminho: storefront_app/domain/catalog/repositories.py
# Funções:
# - CatalogRepository: porta genérica de CRUD para produtos, serviços TI e pratos
# - CartRepository: porta do carrinho (escopo por cart_id)
# - ContactRequestRepository: porta dos pedidos de contato

from __future__ import annotations

from typing import Any, Generic, Optional, Protocol, Sequence, TypeVar

from storefront_app.domain.catalog.entities import CartItem, ContactRequest

EntityT = TypeVar('EntityT')


class CatalogRepository(Protocol, Generic[EntityT]):
    async def list(self, category: Optional[str] = None) -> Sequence[EntityT]: ...
    async def get(self, entity_id: str) -> Optional[EntityT]: ...
    async def add(self, data: dict[str, Any]) -> EntityT: ...
    async def update(self, entity_id: str, changes: dict[str, Any]) -> Optional[EntityT]: ...
    async def remove(self, entity_id: str) -> bool: ...
    async def count(self) -> int: ...


class CartRepository(Protocol):
    async def list(self, cart_id: str) -> Sequence[CartItem]: ...
    async def get(self, cart_id: str, item_id: str) -> Optional[CartItem]: ...
    async def add(self, cart_id: str, data: dict[str, Any]) -> CartItem: ...
    async def update_quantity(self, cart_id: str, item_id: str, quantity: int) -> Optional[CartItem]: ...
    async def remove(self, cart_id: str, item_id: str) -> bool: ...
    async def clear(self, cart_id: str) -> int: ...


class ContactRequestRepository(Protocol):
    async def add(self, data: dict[str, Any]) -> ContactRequest: ...
