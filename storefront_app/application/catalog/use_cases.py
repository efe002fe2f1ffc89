# caminho: storefront_app/application/catalog/use_cases.py
# Funções:
# - CatalogService: CRUD genérico (listar com filtro, obter, criar, merge parcial, remover)
# - CartService: itens do carrinho por cart_id, validação da quantidade no PATCH
# - ContactService: registra pedidos de contato

from __future__ import annotations

from typing import Any, Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel

from storefront_app.application.catalog.dto import CartItemCreate, CartItemOutput, ContactRequestCreate, ContactRequestOutput
from storefront_app.config.constants import CART_QUANTITY_MAX
from storefront_app.domain.catalog.repositories import CartRepository, CatalogRepository, ContactRequestRepository
from storefront_app.shared.errors import ResourceNotFoundError, ValidationError
from storefront_app.shared.logging import log_info

OutputT = TypeVar('OutputT', bound=BaseModel)


class CatalogService(Generic[OutputT]):
    def __init__(
        self,
        repository: CatalogRepository,
        output_model: type[OutputT],
        *,
        entity: str,
        not_found_code: str,
    ) -> None:
        self._repository = repository
        self._output = output_model
        self._entity = entity
        self._not_found_code = not_found_code

    async def list(self, category: Optional[str] = None) -> Sequence[OutputT]:
        items = await self._repository.list(category)
        return [self._output.model_validate(item) for item in items]

    async def get(self, entity_id: str) -> OutputT:
        item = await self._repository.get(entity_id)
        if item is None:
            raise ResourceNotFoundError(self._not_found_code)
        return self._output.model_validate(item)

    async def create(self, payload: BaseModel) -> OutputT:
        item = await self._repository.add(payload.model_dump())
        log_info(f'{self._entity}_CREATED', {'id': item.id})
        return self._output.model_validate(item)

    async def update(self, entity_id: str, payload: BaseModel) -> OutputT:
        # Campos ausentes (ou null) nunca sobrescrevem o valor guardado
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            raise ValidationError('UPDATE_PAYLOAD_EMPTY')

        item = await self._repository.update(entity_id, changes)
        if item is None:
            raise ResourceNotFoundError(self._not_found_code)
        log_info(f'{self._entity}_UPDATED', {'id': entity_id, 'fields': sorted(changes)})
        return self._output.model_validate(item)

    async def delete(self, entity_id: str) -> None:
        if not await self._repository.remove(entity_id):
            raise ResourceNotFoundError(self._not_found_code)
        log_info(f'{self._entity}_DELETED', {'id': entity_id})


def parse_quantity(raw: Any) -> int:
    """Aceita apenas inteiros entre 1 e CART_QUANTITY_MAX (bool e frações são rejeitados)."""
    if isinstance(raw, bool):
        raise ValidationError('CART_QUANTITY_INVALID')
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    if not isinstance(raw, int) or not 1 <= raw <= CART_QUANTITY_MAX:
        raise ValidationError('CART_QUANTITY_INVALID')
    return raw


class CartService:
    def __init__(self, repository: CartRepository) -> None:
        self._repository = repository

    async def list(self, cart_id: str) -> Sequence[CartItemOutput]:
        items = await self._repository.list(cart_id)
        return [CartItemOutput.model_validate(item) for item in items]

    async def get(self, cart_id: str, item_id: str) -> CartItemOutput:
        item = await self._repository.get(cart_id, item_id)
        if item is None:
            raise ResourceNotFoundError('CART_ITEM_NOT_FOUND')
        return CartItemOutput.model_validate(item)

    async def add(self, cart_id: str, payload: CartItemCreate) -> CartItemOutput:
        item = await self._repository.add(cart_id, payload.model_dump())
        log_info('CART_ITEM_ADDED', {'cart_id': cart_id, 'id': item.id, 'product_id': item.product_id})
        return CartItemOutput.model_validate(item)

    async def update_quantity(self, cart_id: str, item_id: str, raw_quantity: Any) -> CartItemOutput:
        quantity = parse_quantity(raw_quantity)
        item = await self._repository.update_quantity(cart_id, item_id, quantity)
        if item is None:
            raise ResourceNotFoundError('CART_ITEM_NOT_FOUND')
        return CartItemOutput.model_validate(item)

    async def remove(self, cart_id: str, item_id: str) -> None:
        if not await self._repository.remove(cart_id, item_id):
            raise ResourceNotFoundError('CART_ITEM_NOT_FOUND')

    async def clear(self, cart_id: str) -> None:
        removed = await self._repository.clear(cart_id)
        log_info('CART_CLEARED', {'cart_id': cart_id, 'count': removed})


class ContactService:
    def __init__(self, repository: ContactRequestRepository) -> None:
        self._repository = repository

    async def submit(self, payload: ContactRequestCreate) -> ContactRequestOutput:
        request = await self._repository.add(payload.model_dump())
        log_info('CONTACT_REQUEST_CREATED', {'id': request.id, 'service_type': request.service_type})
        return ContactRequestOutput.model_validate(request)
