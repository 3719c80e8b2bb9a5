from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ferias_api.models.user import Tipo
from ferias_api.schemas.ferias import FeriasRead
from ferias_api.schemas.organizacao import CargoResponse, SetorResponse

CPF_FIELD = Field(..., min_length=11, max_length=11, pattern=r"^[0-9]*$", description="CPF, só dígitos")


class UserBase(BaseModel):
    """Schema base para colaborador"""

    nome: str = Field(..., min_length=1, max_length=150, description="Nome completo")
    cpf: str = CPF_FIELD
    idade: int = Field(..., ge=0)
    salario: float = Field(..., ge=0)
    setor_id: int
    cargo_id: int
    gestor_id: Optional[int] = Field(None, description="Gestor direto (Gestor ou RH)")


class UserCreate(UserBase):
    """Schema para criação de colaborador.

    ``tipo`` é sempre derivado do cargo; um valor diferente é ignorado.
    E-mail e senha são obrigatórios para Gestor e RH.
    """

    email: Optional[EmailStr] = None
    senha: Optional[str] = Field(None, description="Senha (mínimo 6 caracteres)")
    tipo: Optional[Tipo] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "nome": "Sefhora Ravenne",
                "email": "maria.rh@empresa.com",
                "cpf": "11111111111",
                "idade": 38,
                "salario": 5200,
                "setor_id": 1,
                "cargo_id": 2,
                "gestor_id": 7,
                "senha": "rh1234",
            }
        }
    )


class UserUpdate(BaseModel):
    """Schema para atualização parcial"""

    nome: Optional[str] = Field(None, min_length=1, max_length=150)
    email: Optional[EmailStr] = None
    cpf: Optional[str] = Field(None, min_length=11, max_length=11, pattern=r"^[0-9]*$")
    idade: Optional[int] = Field(None, ge=0)
    salario: Optional[float] = Field(None, ge=0)
    tipo: Optional[Tipo] = None
    setor_id: Optional[int] = None
    cargo_id: Optional[int] = None
    gestor_id: Optional[int] = None
    senha: Optional[str] = None


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    email: str
    tipo: Tipo


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    # E-mails gerados usam domínio reservado (.local), por isso str
    email: str
    cpf: str
    idade: int
    salario: float
    tipo: Tipo
    setor_id: int
    cargo_id: int
    gestor_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    setor: Optional[SetorResponse] = None
    cargo: Optional[CargoResponse] = None
    gestor: Optional[UserSummary] = None
    ferias: List[FeriasRead] = []
