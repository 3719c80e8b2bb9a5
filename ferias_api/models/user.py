import enum

from sqlalchemy import Column, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ferias_api.models.base import BaseModel


class Tipo(str, enum.Enum):
    """Papéis de acesso"""
    RH = "RH"
    GESTOR = "Gestor"
    FUNCIONARIO = "Funcionario"

    @property
    def has_login(self) -> bool:
        return self in (Tipo.RH, Tipo.GESTOR)


class User(BaseModel):
    """Colaborador: RH, gestor ou funcionário."""
    __tablename__ = "users"

    nome = Column(String(150), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    senha = Column(String(255), nullable=False)
    cpf = Column(String(11), unique=True, index=True, nullable=False)
    idade = Column(Integer, nullable=False)
    salario = Column(Float, nullable=False)
    tipo = Column(Enum(Tipo), default=Tipo.FUNCIONARIO, nullable=False)

    setor_id = Column(Integer, ForeignKey("setores.id"), nullable=False)
    cargo_id = Column(Integer, ForeignKey("cargos.id"), nullable=False)
    gestor_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    setor = relationship("Setor", back_populates="users")
    cargo = relationship("Cargo", back_populates="users")
    gestor = relationship("User", remote_side="User.id", back_populates="subordinados")
    subordinados = relationship("User", back_populates="gestor")
    ferias = relationship("Ferias", back_populates="user")

    @property
    def can_login(self) -> bool:
        return self.tipo is not None and self.tipo.has_login

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', tipo='{self.tipo}')>"
