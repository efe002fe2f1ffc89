# caminho: storefront_app/application/recovery/gate.py
# Funções:
# - VerificationGate: confere as alegações de identidade (e-mail, e-mail + documento,
#   documento) contra as contas antes de qualquer código ser emitido. Somente leitura.

from __future__ import annotations

from typing import Optional

from storefront_app.domain.admins.entities import Admin
from storefront_app.domain.admins.repositories import AdminRepository
from storefront_app.shared.errors import NotFoundError
from storefront_app.shared.logging import log_warning


class VerificationGate:
    def __init__(self, admins: AdminRepository) -> None:
        self._admins = admins

    async def check_document(self, document_number: str) -> Admin:
        admin = await self._admins.get_by_document(document_number.strip())
        if admin is None or not admin.is_active:
            log_warning('RECOVERY_DOCUMENT_NOT_FOUND', {})
            raise NotFoundError('DOCUMENT_NOT_FOUND')
        return admin

    async def check_email_and_document(self, email: str, document_number: str) -> Admin:
        admin = await self._admins.get_by_email(email)
        # E-mail desconhecido e documento divergente respondem igual
        if admin is None or not admin.is_active or admin.document_number != document_number.strip():
            log_warning('RECOVERY_DOCUMENT_MISMATCH', {'email': email.lower()})
            raise NotFoundError('DOCUMENT_MISMATCH')
        return admin

    async def resolve_account(
        self,
        *,
        email: Optional[str] = None,
        document_number: Optional[str] = None,
        admin_email: Optional[str] = None,
    ) -> Optional[Admin]:
        """Encontra a conta apontada por todos os identificadores informados.

        Cada identificador presente precisa resolver para a mesma conta ativa;
        `email` aceita o e-mail da conta ou o de recuperação. Sem nenhum
        identificador, ou com qualquer divergência, retorna None.
        """
        found: list[Admin] = []

        if admin_email:
            admin = await self._admins.get_by_email(admin_email)
            if admin is None:
                return None
            found.append(admin)

        if document_number:
            admin = await self._admins.get_by_document(document_number.strip())
            if admin is None:
                return None
            found.append(admin)

        if email:
            admin = await self._admins.get_by_email(email) or await self._admins.get_by_recovery_email(email)
            if admin is None:
                return None
            found.append(admin)

        if not found:
            return None
        if len({admin.id for admin in found}) != 1:
            return None
        account = found[0]
        return account if account.is_active else None
