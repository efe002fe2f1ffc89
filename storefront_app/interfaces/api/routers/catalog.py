# caminho: storefront_app/interfaces/api/routers/catalog.py
# Funções:
# - CRUD de produtos (/api/products), serviços TI (/api/it-services)
#   e pratos (/api/food-items). Leitura pública; escrita exige super_admin ou editor.

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from storefront_app.application.catalog.dto import (
    FoodItemCreate,
    FoodItemOutput,
    FoodItemUpdate,
    ITServiceCreate,
    ITServiceOutput,
    ITServiceUpdate,
    ProductCreate,
    ProductOutput,
    ProductUpdate,
)
from storefront_app.application.catalog.use_cases import CatalogService
from storefront_app.interfaces.api.dependencies import (
    get_food_item_service,
    get_it_service_service,
    get_product_service,
)
from storefront_app.shared.auth_dependencies import require_catalog_editor

CATEGORY_QUERY = Query(default=None, description='Filtra por categoria; `all` desativa o filtro.')

router = APIRouter(prefix='/api', tags=['catalog'])


# -------------------------------------------------------------------------
# Produtos
# -------------------------------------------------------------------------
@router.get('/products', response_model=list[ProductOutput], summary='Listar produtos')
async def list_products(
    category: Optional[str] = CATEGORY_QUERY,
    service: CatalogService[ProductOutput] = Depends(get_product_service),
) -> list[ProductOutput]:
    return list(await service.list(category))


@router.get('/products/{product_id}', response_model=ProductOutput, summary='Detalhar produto')
async def get_product(
    product_id: str,
    service: CatalogService[ProductOutput] = Depends(get_product_service),
) -> ProductOutput:
    return await service.get(product_id)


@router.post(
    '/products',
    response_model=ProductOutput,
    status_code=status.HTTP_201_CREATED,
    summary='Criar produto',
    dependencies=[Depends(require_catalog_editor)],
)
async def create_product(
    payload: ProductCreate,
    service: CatalogService[ProductOutput] = Depends(get_product_service),
) -> ProductOutput:
    return await service.create(payload)


@router.put(
    '/products/{product_id}',
    response_model=ProductOutput,
    summary='Atualizar produto',
    description='Atualização parcial: campos ausentes mantêm o valor atual. Payload vazio responde 400.',
    dependencies=[Depends(require_catalog_editor)],
)
async def update_product(
    product_id: str,
    payload: ProductUpdate,
    service: CatalogService[ProductOutput] = Depends(get_product_service),
) -> ProductOutput:
    return await service.update(product_id, payload)


@router.delete(
    '/products/{product_id}',
    status_code=status.HTTP_204_NO_CONTENT,
    summary='Remover produto',
    dependencies=[Depends(require_catalog_editor)],
)
async def delete_product(
    product_id: str,
    service: CatalogService[ProductOutput] = Depends(get_product_service),
) -> None:
    await service.delete(product_id)


# -------------------------------------------------------------------------
# Serviços de TI
# -------------------------------------------------------------------------
@router.get('/it-services', response_model=list[ITServiceOutput], summary='Listar serviços de TI')
async def list_it_services(
    service: CatalogService[ITServiceOutput] = Depends(get_it_service_service),
) -> list[ITServiceOutput]:
    return list(await service.list())


@router.get('/it-services/{service_id}', response_model=ITServiceOutput, summary='Detalhar serviço de TI')
async def get_it_service(
    service_id: str,
    service: CatalogService[ITServiceOutput] = Depends(get_it_service_service),
) -> ITServiceOutput:
    return await service.get(service_id)


@router.post(
    '/it-services',
    response_model=ITServiceOutput,
    status_code=status.HTTP_201_CREATED,
    summary='Criar serviço de TI',
    dependencies=[Depends(require_catalog_editor)],
)
async def create_it_service(
    payload: ITServiceCreate,
    service: CatalogService[ITServiceOutput] = Depends(get_it_service_service),
) -> ITServiceOutput:
    return await service.create(payload)


@router.put(
    '/it-services/{service_id}',
    response_model=ITServiceOutput,
    summary='Atualizar serviço de TI',
    dependencies=[Depends(require_catalog_editor)],
)
async def update_it_service(
    service_id: str,
    payload: ITServiceUpdate,
    service: CatalogService[ITServiceOutput] = Depends(get_it_service_service),
) -> ITServiceOutput:
    return await service.update(service_id, payload)


@router.delete(
    '/it-services/{service_id}',
    status_code=status.HTTP_204_NO_CONTENT,
    summary='Remover serviço de TI',
    dependencies=[Depends(require_catalog_editor)],
)
async def delete_it_service(
    service_id: str,
    service: CatalogService[ITServiceOutput] = Depends(get_it_service_service),
) -> None:
    await service.delete(service_id)


# -------------------------------------------------------------------------
# Cardápio
# -------------------------------------------------------------------------
@router.get('/food-items', response_model=list[FoodItemOutput], summary='Listar pratos')
async def list_food_items(
    category: Optional[str] = CATEGORY_QUERY,
    service: CatalogService[FoodItemOutput] = Depends(get_food_item_service),
) -> list[FoodItemOutput]:
    return list(await service.list(category))


@router.get('/food-items/{item_id}', response_model=FoodItemOutput, summary='Detalhar prato')
async def get_food_item(
    item_id: str,
    service: CatalogService[FoodItemOutput] = Depends(get_food_item_service),
) -> FoodItemOutput:
    return await service.get(item_id)


@router.post(
    '/food-items',
    response_model=FoodItemOutput,
    status_code=status.HTTP_201_CREATED,
    summary='Criar prato',
    dependencies=[Depends(require_catalog_editor)],
)
async def create_food_item(
    payload: FoodItemCreate,
    service: CatalogService[FoodItemOutput] = Depends(get_food_item_service),
) -> FoodItemOutput:
    return await service.create(payload)


@router.put(
    '/food-items/{item_id}',
    response_model=FoodItemOutput,
    summary='Atualizar prato',
    dependencies=[Depends(require_catalog_editor)],
)
async def update_food_item(
    item_id: str,
    payload: FoodItemUpdate,
    service: CatalogService[FoodItemOutput] = Depends(get_food_item_service),
) -> FoodItemOutput:
    return await service.update(item_id, payload)


@router.delete(
    '/food-items/{item_id}',
    status_code=status.HTTP_204_NO_CONTENT,
    summary='Remover prato',
    dependencies=[Depends(require_catalog_editor)],
)
async def delete_food_item(
    item_id: str,
    service: CatalogService[FoodItemOutput] = Depends(get_food_item_service),
) -> None:
    await service.delete(item_id)
