# caminho: storefront_app/infrastructure/db/models.py
# Funções:
# - Declarar modelos SQLAlchemy:
#   AdminUserModel, PasswordResetTokenModel (estado da recuperação de senha)
#   ProductModel, ITServiceModel, FoodItemModel, CartItemModel, ContactRequestModel

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from storefront_app.infrastructure.db.base import Base


def _uuid() -> str:
    return str(uuid4())


class AdminUserModel(Base):
    __tablename__ = 'admin_users'

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(String(254), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    full_name: Mapped[str] = mapped_column(String(120), nullable=False)
    document_type: Mapped[str] = mapped_column(String(16), nullable=False, server_default=text("'DNI'"))
    document_number: Mapped[Optional[str]] = mapped_column(String(32), unique=True, nullable=True)
    recovery_email: Mapped[Optional[str]] = mapped_column(String(254), nullable=True, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, server_default=text('true'), default=True, nullable=False)
    created_by_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey('admin_users.id', ondelete='SET NULL'), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("role IN ('super_admin', 'editor', 'viewer')", name='ck_admin_users_role'),
    )


class PasswordResetTokenModel(Base):
    __tablename__ = 'password_reset_tokens'

    id: Mapped[int] = mapped_column(primary_key=True)
    # Sem FK: remover a conta não mexe nos tokens
    admin_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    code: Mapped[str] = mapped_column(String(16), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(254), nullable=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    used: Mapped[bool] = mapped_column(Boolean, server_default=text('false'), default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        # Código único enquanto não usado
        Index(
            'ux_password_reset_tokens_code_unused',
            'code',
            unique=True,
            postgresql_where=text('used = false'),
            sqlite_where=text('used = 0'),
        ),
    )


class ProductModel(Base):
    __tablename__ = 'products'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    image: Mapped[str] = mapped_column(Text, nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, server_default=text('false'), default=False, nullable=False)
    in_stock: Mapped[bool] = mapped_column(Boolean, server_default=text('true'), default=True, nullable=False)


class ITServiceModel(Base):
    __tablename__ = 'it_services'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    features: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    icon: Mapped[str] = mapped_column(String(64), nullable=False)
    available: Mapped[bool] = mapped_column(Boolean, server_default=text('true'), default=True, nullable=False)


class FoodItemModel(Base):
    __tablename__ = 'food_items'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    image: Mapped[str] = mapped_column(Text, nullable=False)
    available: Mapped[bool] = mapped_column(Boolean, server_default=text('true'), default=True, nullable=False)


class CartItemModel(Base):
    __tablename__ = 'cart_items'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    cart_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    product_id: Mapped[str] = mapped_column(String(36), nullable=False)
    product_name: Mapped[str] = mapped_column(Text, nullable=False)
    product_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    image: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (CheckConstraint('quantity >= 1', name='ck_cart_items_quantity'),)


class ContactRequestModel(Base):
    __tablename__ = 'contact_requests'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    service_type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
