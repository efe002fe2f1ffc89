# caminho: storefront_app/interfaces/api/routers/contact.py
# Funções:
# - Registro público de pedidos de contato (tech / it_service / food)

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from storefront_app.application.catalog.dto import ContactRequestCreate, ContactRequestOutput
from storefront_app.application.catalog.use_cases import ContactService
from storefront_app.interfaces.api.dependencies import get_contact_service

router = APIRouter(prefix='/api/contact', tags=['contact'])


@router.post(
    '',
    response_model=ContactRequestOutput,
    status_code=status.HTTP_201_CREATED,
    summary='Enviar pedido de contato',
    description='`serviceType` aceita `tech`, `it_service` ou `food`; campos vazios respondem 400.',
)
async def submit_contact(
    payload: ContactRequestCreate,
    service: ContactService = Depends(get_contact_service),
) -> ContactRequestOutput:
    return await service.submit(payload)
