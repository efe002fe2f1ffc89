# caminho: storefront_app/shared/schemas.py
# Funções:
# - CamelModel: base dos DTOs; JSON em camelCase, atributos em snake_case
# - CamelInput: CamelModel para entradas (rejeita campos desconhecidos, apara strings)
# - RawPassword: senha sem aparar espaços
# - MessageResponse: resposta simples {message}

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class CamelInput(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='forbid',
        str_strip_whitespace=True,
    )


# Senha é comparada exatamente como digitada
RawPassword = Annotated[str, StringConstraints(strip_whitespace=False)]


class MessageResponse(BaseModel):
    message: str
