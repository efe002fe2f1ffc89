# caminho: storefront_app/application/catalog/dto.py
# Funções:
# - DTOs Pydantic do catálogo (produtos, serviços TI, pratos), do carrinho
#   e dos pedidos de contato. Preço é Decimal(10,2) serializado como string.

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal, Optional

from pydantic import Field

from storefront_app.config.constants import CART_QUANTITY_MAX, PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS
from storefront_app.shared.schemas import CamelInput, CamelModel

Price = Annotated[Decimal, Field(ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES)]
Text = Annotated[str, Field(min_length=1)]
ServiceType = Literal['tech', 'it_service', 'food']


# -------------------------------------------------------------------------
# Produtos (loja de roupas/tecnologia)
# -------------------------------------------------------------------------
class ProductCreate(CamelInput):
    name: Text
    description: Text
    price: Price
    category: Text
    image: Text
    featured: bool = False
    in_stock: bool = True


class ProductUpdate(CamelInput):
    name: Optional[Text] = None
    description: Optional[Text] = None
    price: Optional[Price] = None
    category: Optional[Text] = None
    image: Optional[Text] = None
    featured: Optional[bool] = None
    in_stock: Optional[bool] = None


class ProductOutput(CamelModel):
    id: str
    name: str
    description: str
    price: Decimal
    category: str
    image: str
    featured: bool
    in_stock: bool


# -------------------------------------------------------------------------
# Serviços de TI
# -------------------------------------------------------------------------
class ITServiceCreate(CamelInput):
    title: Text
    description: Text
    features: list[str] = Field(default_factory=list)
    icon: Text
    available: bool = True


class ITServiceUpdate(CamelInput):
    title: Optional[Text] = None
    description: Optional[Text] = None
    features: Optional[list[str]] = None
    icon: Optional[Text] = None
    available: Optional[bool] = None


class ITServiceOutput(CamelModel):
    id: str
    title: str
    description: str
    features: list[str]
    icon: str
    available: bool


# -------------------------------------------------------------------------
# Cardápio
# -------------------------------------------------------------------------
class FoodItemCreate(CamelInput):
    name: Text
    description: Text
    price: Price
    category: Text
    image: Text
    available: bool = True


class FoodItemUpdate(CamelInput):
    name: Optional[Text] = None
    description: Optional[Text] = None
    price: Optional[Price] = None
    category: Optional[Text] = None
    image: Optional[Text] = None
    available: Optional[bool] = None


class FoodItemOutput(CamelModel):
    id: str
    name: str
    description: str
    price: Decimal
    category: str
    image: str
    available: bool


# -------------------------------------------------------------------------
# Carrinho
# -------------------------------------------------------------------------
class CartItemCreate(CamelInput):
    product_id: Text
    product_name: Text
    product_price: Price
    quantity: int = Field(default=1, ge=1, le=CART_QUANTITY_MAX)
    image: Text


class CartItemOutput(CamelModel):
    id: str
    product_id: str
    product_name: str
    product_price: Decimal
    quantity: int
    image: str


# -------------------------------------------------------------------------
# Contato
# -------------------------------------------------------------------------
class ContactRequestCreate(CamelInput):
    name: Text
    phone: Text
    message: Text
    service_type: ServiceType


class ContactRequestOutput(CamelModel):
    id: str
    name: str
    phone: str
    message: str
    service_type: str
    created_at: Optional[datetime] = None
