from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ferias_api.models.user import Tipo


class SetorBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100, description="Nome do setor")


class SetorCreate(SetorBase):
    model_config = ConfigDict(json_schema_extra={"example": {"nome": "TI"}})


class SetorUpdate(SetorBase):
    pass


class SetorResponse(SetorBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class CargoBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100, description="Nome do cargo")


class CargoCreate(CargoBase):
    """Sem ``tipo``, o papel é inicializado a partir do nome (Gestor/RH)."""

    tipo: Optional[Tipo] = Field(None, description="Papel de acesso concedido pelo cargo")

    model_config = ConfigDict(
        json_schema_extra={"example": {"nome": "Coordenador", "tipo": "Gestor"}}
    )


class CargoUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=100)
    tipo: Optional[Tipo] = None


class CargoResponse(CargoBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    tipo: Tipo
