# caminho: storefront_app/interfaces/api/routers/admins.py
# Funções:
# - CRUD de administradores (somente super_admin)

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from storefront_app.application.admins.dto import AdminCreateInput, AdminOutput, AdminUpdateInput
from storefront_app.application.admins.use_cases import AdminService
from storefront_app.domain.admins.entities import AdminSession
from storefront_app.interfaces.api.dependencies import get_admin_service
from storefront_app.shared.auth_dependencies import require_super_admin
from storefront_app.shared.logging import log_info

router = APIRouter(prefix='/api/admins', tags=['admins'])


@router.get(
    '',
    response_model=list[AdminOutput],
    summary='Listar administradores',
    description="""Retorna todos os administradores em ordem crescente de `id`.

**Proteções**:
- Exige sessão com papel `super_admin`.
""",
)
async def list_admins(
    current_admin: AdminSession = Depends(require_super_admin),
    service: AdminService = Depends(get_admin_service),
) -> list[AdminOutput]:
    return list(await service.list_admins())


@router.post(
    '',
    response_model=AdminOutput,
    status_code=status.HTTP_201_CREATED,
    summary='Criar administrador',
    description="""Cria uma conta com senha armazenada como hash.

**Regras**:
- `email` e `documentNumber` são únicos (409 se repetidos).
- `role` padrão `viewer`; `documentType` padrão `DNI` (DNI exige 8 caracteres).

**Proteções**:
- Exige sessão com papel `super_admin`.
""",
)
async def create_admin(
    payload: AdminCreateInput,
    current_admin: AdminSession = Depends(require_super_admin),
    service: AdminService = Depends(get_admin_service),
) -> AdminOutput:
    log_info('ADMIN_CREATE_REQUESTED', {'email': payload.email, 'role': payload.role, 'acting_admin_id': current_admin.admin_id})
    return await service.create_admin(payload, acting_admin_id=current_admin.admin_id)


@router.put(
    '/{admin_id}',
    response_model=AdminOutput,
    summary='Atualizar administrador',
    description="""Atualização parcial: apenas os campos enviados são alterados; os demais permanecem.

Payload sem nenhum campo responde 400. Uma nova `password` é gravada como hash.

**Proteções**:
- Exige sessão com papel `super_admin`.
""",
)
async def update_admin(
    admin_id: int,
    payload: AdminUpdateInput,
    current_admin: AdminSession = Depends(require_super_admin),
    service: AdminService = Depends(get_admin_service),
) -> AdminOutput:
    return await service.update_admin(admin_id, payload, acting_admin_id=current_admin.admin_id)


@router.delete(
    '/{admin_id}',
    status_code=status.HTTP_204_NO_CONTENT,
    summary='Remover administrador',
    description="""Exclui o administrador informado. Retorna 404 caso o registro não exista.

Os códigos de recuperação emitidos para a conta não são apagados em cascata.

**Proteções**:
- Exige sessão com papel `super_admin`.
- Impede a autoexclusão.
""",
)
async def delete_admin(
    admin_id: int,
    current_admin: AdminSession = Depends(require_super_admin),
    service: AdminService = Depends(get_admin_service),
) -> None:
    await service.delete_admin(admin_id, acting_admin_id=current_admin.admin_id)
