# caminho: storefront_app/domain/admins/enums.py
# Funções:
# - Define os value objects de papéis e tipos de documento dos administradores.
# - Fornece os conjuntos de papéis exigidos pelas rotas protegidas.

from __future__ import annotations

from typing import Annotated, Any, Literal, get_args

from pydantic import AfterValidator, StringConstraints

SC = StringConstraints
LowerStr = SC(strip_whitespace=True, to_lower=True)
UpperStr = SC(strip_whitespace=True, to_upper=True)


def _one_of(literal: Any) -> AfterValidator:
    """Valida (após normalizar) que o valor pertence ao Literal."""
    choices = frozenset(str(value) for value in get_args(literal))

    def _check(value: str) -> str:
        if value not in choices:
            raise ValueError(f'must be one of: {", ".join(sorted(choices))}')
        return value

    return AfterValidator(_check)


# -------------------------------------------------------------------------
# Papéis do painel administrativo
# super_admin gerencia contas; editor mantém o catálogo; viewer só consulta.
# -------------------------------------------------------------------------
AdminRole = Annotated[
    str,
    Literal['super_admin', 'editor', 'viewer'],
    LowerStr,
    _one_of(Literal['super_admin', 'editor', 'viewer']),
]
ADMIN_ROLE_DEFAULT: str = 'viewer'
ADMIN_ROLE_SUPERUSER: str = 'super_admin'

# Conjuntos de papéis aceitos pelas rotas protegidas
SUPER_ADMIN_ONLY: frozenset[str] = frozenset({'super_admin'})
CATALOG_EDITORS: frozenset[str] = frozenset({'super_admin', 'editor'})


# -------------------------------------------------------------------------
# Tipos de documento de identidade
# DNI exige exatamente 8 caracteres; demais tipos apenas não vazios.
# -------------------------------------------------------------------------
DocumentType = Annotated[
    str,
    Literal['DNI', 'CE', 'PASSPORT', 'RUC'],
    UpperStr,
    _one_of(Literal['DNI', 'CE', 'PASSPORT', 'RUC']),
]
DOCUMENT_TYPE_DEFAULT: str = 'DNI'


def is_role_allowed(role: str, allowed_roles: frozenset[str]) -> bool:
    """Teste estático de pertinência do papel no conjunto exigido pela rota."""
    return (role or '').strip().lower() in allowed_roles
