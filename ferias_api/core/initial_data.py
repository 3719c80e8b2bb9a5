"""
Dados de demonstração: setores, cargos, um RH, dois gestores e dois funcionários.

As senhas são gravadas em texto plano de propósito, como nas bases legadas;
o primeiro login de cada usuário migra a senha para hash.
"""

import logging

from sqlalchemy.orm import Session

from ferias_api.database import SessionLocal
from ferias_api.models.organizacao import Cargo, Setor
from ferias_api.models.user import Tipo, User

logger = logging.getLogger(__name__)

SETORES = ("RH", "TI", "Financeiro", "Comercial")
CARGOS = ("Gestor", "Desenvolvedor", "Analista", "RH")


def _get_or_create(db: Session, model, nome: str, **extra):
    obj = db.query(model).filter(model.nome == nome).first()
    if obj is None:
        obj = model(nome=nome, **extra)
        db.add(obj)
        db.flush()
    return obj


def _ensure_user(db: Session, **fields) -> User:
    user = db.query(User).filter(User.email == fields["email"]).first()
    if user is None:
        user = User(**fields)
        db.add(user)
        db.flush()
    return user


def seed_demo_data(db: Session | None = None) -> None:
    """Garante os registros de demonstração; pode rodar mais de uma vez."""
    own_session = db is None
    if own_session:
        db = SessionLocal()
    try:
        setores = {nome: _get_or_create(db, Setor, nome) for nome in SETORES}
        cargos = {
            nome: _get_or_create(db, Cargo, nome, tipo=Cargo.tipo_padrao(nome))
            for nome in CARGOS
        }

        maria = _ensure_user(
            db,
            nome="Maria Souza",
            email="maria.rh@empresa.com",
            senha="rh123",
            cpf="11122233344",
            idade=35,
            salario=8000,
            tipo=Tipo.RH,
            setor_id=setores["RH"].id,
            cargo_id=cargos["RH"].id,
        )
        joao = _ensure_user(
            db,
            nome="João Silva",
            email="joao.gestor@empresa.com",
            senha="gestor123",
            cpf="55566677788",
            idade=40,
            salario=10000,
            tipo=Tipo.GESTOR,
            setor_id=setores["TI"].id,
            cargo_id=cargos["Gestor"].id,
            gestor_id=maria.id,
        )
        carlos = _ensure_user(
            db,
            nome="Carlos Pereira",
            email="carlos.gestor@empresa.com",
            senha="gestor123",
            cpf="99988877766",
            idade=42,
            salario=9500,
            tipo=Tipo.GESTOR,
            setor_id=setores["Financeiro"].id,
            cargo_id=cargos["Gestor"].id,
            gestor_id=maria.id,
        )
        _ensure_user(
            db,
            nome="Ana Costa",
            email="ana.costa@empresa.com",
            senha="func123",
            cpf="12312312312",
            idade=28,
            salario=5000,
            tipo=Tipo.FUNCIONARIO,
            setor_id=setores["TI"].id,
            cargo_id=cargos["Desenvolvedor"].id,
            gestor_id=joao.id,
        )
        _ensure_user(
            db,
            nome="Bruno Lima",
            email="bruno.lima@empresa.com",
            senha="func123",
            cpf="32132132132",
            idade=30,
            salario=4500,
            tipo=Tipo.FUNCIONARIO,
            setor_id=setores["Financeiro"].id,
            cargo_id=cargos["Analista"].id,
            gestor_id=carlos.id,
        )
        db.commit()
        logger.info("Dados de demonstração garantidos")
    finally:
        if own_session:
            db.close()
