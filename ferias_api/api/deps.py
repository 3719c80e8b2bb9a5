from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError

from ferias_api.core.exceptions import (
    CredentialsError,
    ForbiddenError,
    TokenExpiredError,
    TokenInvalidError,
)
from ferias_api.core.security import TokenUtils
from ferias_api.database import get_db
from ferias_api.models.user import Tipo

http_bearer = HTTPBearer(auto_error=False)

__all__ = ["get_db", "get_current_user", "require_roles", "http_bearer"]


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
) -> dict:
    """Sessão do usuário a partir dos claims do token; não consulta o banco."""
    if credentials is None:
        raise CredentialsError("Token não fornecido")

    try:
        payload = TokenUtils.decode_token(credentials.credentials)
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError:
        raise TokenInvalidError()

    user_id = payload.get("sub")
    if user_id is None:
        raise TokenInvalidError("Token inválido: claim sub ausente")
    if payload.get("type") != "access":
        raise TokenInvalidError("Token não é do tipo access")

    try:
        tipo = Tipo(payload.get("tipo"))
        user_id = int(user_id)
    except ValueError:
        raise TokenInvalidError()

    return {
        "id": user_id,
        "email": payload.get("email"),
        "tipo": tipo,
        "cargo": payload.get("cargo"),
        "setor": payload.get("setor"),
    }


def require_roles(*tipos: Tipo):
    async def roles_dependency(
        current_user: dict = Depends(get_current_user),
    ) -> dict:
        if current_user["tipo"] not in tipos:
            raise ForbiddenError("Acesso não autorizado.")
        return current_user

    return roles_dependency


require_rh = require_roles(Tipo.RH)
require_gestor = require_roles(Tipo.GESTOR)
require_rh_or_gestor = require_roles(Tipo.RH, Tipo.GESTOR)
