# caminho: storefront_app/domain/catalog/entities.py
# Funções:
# - Product, ITService, FoodItem: entidades de catálogo (CRUD simples)
# - CartItem: item do carrinho anônimo, chaveado por cart_id
# - ContactRequest: formulário de contato das seções da loja

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(slots=True)
class Product:
    id: str
    name: str
    description: str
    price: Decimal
    category: str
    image: str
    featured: bool = False
    in_stock: bool = True


@dataclass(slots=True)
class ITService:
    id: str
    title: str
    description: str
    icon: str
    features: list[str] = field(default_factory=list)
    available: bool = True


@dataclass(slots=True)
class FoodItem:
    id: str
    name: str
    description: str
    price: Decimal
    category: str
    image: str
    available: bool = True


@dataclass(slots=True)
class CartItem:
    id: str
    cart_id: str
    product_id: str
    product_name: str
    product_price: Decimal
    image: str
    quantity: int = 1


@dataclass(slots=True)
class ContactRequest:
    id: str
    name: str
    phone: str
    message: str
    service_type: str
    created_at: Optional[datetime] = None
