from typing import Any

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class BaseModel(Base):
    """Modelo base com campos comuns"""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def update(self, **kwargs: Any) -> None:
        """Atualiza atributos do modelo"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
