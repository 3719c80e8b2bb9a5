import os

# Antes de importar o app: bcrypt rápido e segredo fixo
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import itertools
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ferias_api.api.deps import get_db
from ferias_api.core.security import PasswordUtils, TokenUtils
from ferias_api.main import app
from ferias_api.models import Base, Cargo, Setor, Tipo, User

_cpfs = itertools.count(10000000000)


@pytest.fixture()
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def org(db):
    """Setores e cargos padrão."""
    setores = {nome: Setor(nome=nome) for nome in ("RH", "TI", "Financeiro")}
    cargos = {
        nome: Cargo(nome=nome, tipo=Cargo.tipo_padrao(nome))
        for nome in ("RH", "Gestor", "Desenvolvedor", "Analista")
    }
    db.add_all([*setores.values(), *cargos.values()])
    db.commit()
    return {"setores": setores, "cargos": cargos}


@pytest.fixture()
def make_user(db, org):
    """Insere um usuário direto no banco, sem passar pelas regras do CRUD."""

    def _make(tipo=Tipo.FUNCIONARIO, *, gestor=None, email=None, senha="senha123",
              hashed=True, setor="TI", cargo=None, nome="Colaborador"):
        cpf = str(next(_cpfs))
        cargo = cargo or {Tipo.RH: "RH", Tipo.GESTOR: "Gestor"}.get(tipo, "Desenvolvedor")
        user = User(
            nome=nome,
            email=email or f"user{cpf}@empresa.com",
            senha=PasswordUtils.hash(senha) if hashed else senha,
            cpf=cpf,
            idade=30,
            salario=5000,
            tipo=tipo,
            setor_id=org["setores"][setor].id,
            cargo_id=org["cargos"][cargo].id,
            gestor_id=gestor.id if gestor else None,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture()
def rh(make_user):
    return make_user(Tipo.RH, email="maria.rh@empresa.com", setor="RH", nome="Maria Souza")


@pytest.fixture()
def gestor(make_user, rh):
    return make_user(Tipo.GESTOR, gestor=rh, email="joao.gestor@empresa.com", nome="João Silva")


@pytest.fixture()
def funcionario(make_user, gestor):
    return make_user(Tipo.FUNCIONARIO, gestor=gestor, nome="Ana Costa")


@pytest.fixture()
def auth_headers():
    def _headers(user) -> dict:
        return {"Authorization": f"Bearer {TokenUtils.create_session_token(user)}"}

    return _headers


@pytest.fixture()
def start_date():
    return date.today() + timedelta(days=20)
