from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ferias_api.models.ferias import StatusFerias
from ferias_api.models.user import Tipo


class FeriasCreate(BaseModel):
    """Solicitação criada pelo gestor em nome de um subordinado"""

    user_id: int = Field(..., description="ID do colaborador")
    start_date: date = Field(..., description="Data de início (YYYY-MM-DD)")
    periodo: int = Field(..., description="Duração em dias: 7 ou 15")
    motivo: Optional[str] = Field(None, max_length=100, description="Razão da solicitação")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": 4,
                "start_date": "2026-11-26",
                "periodo": 7,
                "motivo": "Viagem em família",
            }
        }
    )


class FeriasStatusUpdate(BaseModel):
    status: StatusFerias
    observacao_reprovacao: Optional[str] = Field(None, max_length=500)


class FeriasOwner(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    email: str
    tipo: Tipo
    setor_id: int
    cargo_id: int
    gestor_id: Optional[int] = None


class FeriasRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int] = None
    start_date: date
    end_date: date
    periodo: int
    motivo: Optional[str] = None
    status: StatusFerias
    observacao_reprovacao: Optional[str] = None
    created_at: Optional[datetime] = None


class FeriasResponse(FeriasRead):
    user: Optional[FeriasOwner] = None
