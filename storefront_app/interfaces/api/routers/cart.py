# caminho: storefront_app/interfaces/api/routers/cart.py
# Funções:
# - Carrinho público: listar, adicionar, alterar quantidade, remover e esvaziar

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from storefront_app.application.catalog.dto import CartItemCreate, CartItemOutput
from storefront_app.application.catalog.use_cases import CartService
from storefront_app.interfaces.api.dependencies import get_cart_id, get_cart_service

router = APIRouter(prefix='/api/cart', tags=['cart'])


@router.get('', response_model=list[CartItemOutput], summary='Listar itens do carrinho')
async def list_cart(
    cart_id: str = Depends(get_cart_id),
    service: CartService = Depends(get_cart_service),
) -> list[CartItemOutput]:
    return list(await service.list(cart_id))


@router.get('/{item_id}', response_model=CartItemOutput, summary='Detalhar item do carrinho')
async def get_cart_item(
    item_id: str,
    cart_id: str = Depends(get_cart_id),
    service: CartService = Depends(get_cart_service),
) -> CartItemOutput:
    return await service.get(cart_id, item_id)


@router.post(
    '',
    response_model=CartItemOutput,
    status_code=status.HTTP_201_CREATED,
    summary='Adicionar item ao carrinho',
    description='Cada chamada cria uma nova linha, mesmo que o `productId` já esteja no carrinho.',
)
async def add_cart_item(
    payload: CartItemCreate,
    cart_id: str = Depends(get_cart_id),
    service: CartService = Depends(get_cart_service),
) -> CartItemOutput:
    return await service.add(cart_id, payload)


@router.patch(
    '/{item_id}',
    response_model=CartItemOutput,
    summary='Alterar quantidade',
    description="""Recebe `{"quantity": n}` com `n` inteiro maior ou igual a 1.

Quantidade ausente, não inteira ou menor que 1 responde 400 e o item não é alterado.
""",
)
async def update_cart_item(
    item_id: str,
    payload: Any = Body(default=None),
    cart_id: str = Depends(get_cart_id),
    service: CartService = Depends(get_cart_service),
) -> CartItemOutput:
    quantity = payload.get('quantity') if isinstance(payload, dict) else None
    return await service.update_quantity(cart_id, item_id, quantity)


@router.delete('/{item_id}', status_code=status.HTTP_204_NO_CONTENT, summary='Remover item do carrinho')
async def remove_cart_item(
    item_id: str,
    cart_id: str = Depends(get_cart_id),
    service: CartService = Depends(get_cart_service),
) -> None:
    await service.remove(cart_id, item_id)


@router.delete('', status_code=status.HTTP_204_NO_CONTENT, summary='Esvaziar carrinho')
async def clear_cart(
    cart_id: str = Depends(get_cart_id),
    service: CartService = Depends(get_cart_service),
) -> None:
    await service.clear(cart_id)
