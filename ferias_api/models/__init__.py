from .base import Base, BaseModel
from .user import Tipo, User
from .organizacao import Cargo, Setor
from .ferias import Ferias, StatusFerias, PERIODOS_PERMITIDOS

__all__ = [
    "Base",
    "BaseModel",
    "Tipo",
    "User",
    "Setor",
    "Cargo",
    "Ferias",
    "StatusFerias",
    "PERIODOS_PERMITIDOS",
]
