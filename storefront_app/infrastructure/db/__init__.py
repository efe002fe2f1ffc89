# caminho: storefront_app/infrastructure/db/__init__.py
# Funções:
# - expõe Base (metadata de todas as tabelas)

from __future__ import annotations

from storefront_app.infrastructure.db.base import Base
from storefront_app.infrastructure.db import models  # noqa: F401

__all__ = ['Base']
