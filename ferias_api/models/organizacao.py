from sqlalchemy import Column, Enum, String
from sqlalchemy.orm import relationship

from ferias_api.models.base import BaseModel
from ferias_api.models.user import Tipo


class Setor(BaseModel):
    """Departamento da empresa."""
    __tablename__ = "setores"

    nome = Column(String(100), unique=True, index=True, nullable=False)

    users = relationship("User", back_populates="setor")

    def __repr__(self) -> str:
        return f"<Setor(id={self.id}, nome='{self.nome}')>"


class Cargo(BaseModel):
    """Cargo do colaborador.

    O papel de acesso vem de ``tipo``, nunca do nome: renomear um cargo
    não altera as permissões de quem o ocupa.
    """
    __tablename__ = "cargos"

    nome = Column(String(100), unique=True, index=True, nullable=False)
    tipo = Column(Enum(Tipo), default=Tipo.FUNCIONARIO, nullable=False)

    users = relationship("User", back_populates="cargo")

    @staticmethod
    def tipo_padrao(nome: str) -> Tipo:
        """Papel inicial de um cargo criado sem tipo explícito."""
        if nome == Tipo.GESTOR.value:
            return Tipo.GESTOR
        if nome == Tipo.RH.value:
            return Tipo.RH
        return Tipo.FUNCIONARIO

    def __repr__(self) -> str:
        return f"<Cargo(id={self.id}, nome='{self.nome}', tipo='{self.tipo}')>"
