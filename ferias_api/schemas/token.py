from typing import Optional

from pydantic import BaseModel, ConfigDict

from ferias_api.models.user import Tipo
from ferias_api.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Credenciais de acesso."""

    # str e não EmailStr: um e-mail malformado deve cair no mesmo 401 genérico
    email: str
    senha: str

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "maria.rh@empresa.com", "senha": "rh123"}}
    )


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    user: UserResponse


class SessionUser(BaseModel):
    """Claims do token de sessão."""

    id: int
    email: str
    tipo: Tipo
    cargo: Optional[str] = None
    setor: Optional[str] = None
