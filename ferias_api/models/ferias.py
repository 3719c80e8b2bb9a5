import enum
from datetime import date, timedelta

from sqlalchemy import Column, Date, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ferias_api.models.base import BaseModel


class StatusFerias(str, enum.Enum):
    PENDENTE = "Pendente"
    APROVADO = "Aprovado"
    REPROVADO = "Reprovado"


PERIODOS_PERMITIDOS = (7, 15)


class Ferias(BaseModel):
    """Solicitação de férias de um colaborador.

    Pendente -> Aprovado | Reprovado; os dois estados finais não mudam mais.
    """
    __tablename__ = "ferias"

    # Nulo quando o colaborador foi removido
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    periodo = Column(Integer, nullable=False)
    motivo = Column(String(100), nullable=True)
    status = Column(Enum(StatusFerias), default=StatusFerias.PENDENTE, nullable=False)
    observacao_reprovacao = Column(String(500), nullable=True)

    user = relationship("User", back_populates="ferias")

    @staticmethod
    def calcular_fim(start_date: date, periodo: int) -> date:
        return start_date + timedelta(days=periodo)

    @property
    def is_pending(self) -> bool:
        return self.status == StatusFerias.PENDENTE

    def __repr__(self) -> str:
        return f"<Ferias(id={self.id}, user_id={self.user_id}, status='{self.status}')>"
