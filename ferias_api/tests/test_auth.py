from datetime import timedelta

from ferias_api.core.security import PasswordUtils, TokenUtils
from ferias_api.core.initial_data import seed_demo_data
from ferias_api.models import Tipo, User


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Sistema de Férias" in response.json()["message"]


def test_docs(client):
    response = client.get("/docs")
    assert response.status_code == 200


def test_login_returns_token_with_role_claims(client, gestor):
    response = client.post("/auth/login", json={"email": gestor.email, "senha": "senha123"})
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "Bearer"
    assert body["user"]["email"] == gestor.email
    assert body["user"]["setor"]["nome"] == "TI"
    assert "senha" not in body["user"]

    claims = TokenUtils.decode_token(body["access_token"])
    assert claims["sub"] == str(gestor.id)
    assert claims["tipo"] == "Gestor"
    assert claims["cargo"] == "Gestor"
    assert claims["setor"] == "TI"


def test_wrong_password_and_unknown_email_look_the_same(client, gestor):
    wrong = client.post("/auth/login", json={"email": gestor.email, "senha": "errada"})
    unknown = client.post("/auth/login", json={"email": "ninguem@empresa.com", "senha": "errada"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"detail": "E-mail ou senha inválidos."}


def test_funcionario_cannot_login(client, make_user, gestor):
    funcionario = make_user(Tipo.FUNCIONARIO, gestor=gestor, email="ana.costa@empresa.com")
    response = client.post("/auth/login", json={"email": funcionario.email, "senha": "senha123"})
    assert response.status_code == 403
    assert response.json() == {"detail": "Acesso não autorizado."}


def test_legacy_password_is_migrated_on_login(client, db, make_user):
    rh = make_user(Tipo.RH, email="legado@empresa.com", senha="rh123", hashed=False, setor="RH")
    assert rh.senha == "rh123"

    response = client.post("/auth/login", json={"email": "legado@empresa.com", "senha": "rh123"})
    assert response.status_code == 200

    db.refresh(rh)
    assert PasswordUtils.is_hashed(rh.senha)
    assert PasswordUtils.verify("rh123", rh.senha)

    again = client.post("/auth/login", json={"email": "legado@empresa.com", "senha": "rh123"})
    assert again.status_code == 200


def test_legacy_funcionario_is_migrated_before_being_refused(client, db, make_user, gestor):
    funcionario = make_user(Tipo.FUNCIONARIO, gestor=gestor, senha="func123", hashed=False)
    response = client.post("/auth/login", json={"email": funcionario.email, "senha": "func123"})
    assert response.status_code == 403
    db.refresh(funcionario)
    assert PasswordUtils.is_hashed(funcionario.senha)


def test_me_returns_session_claims(client, rh, auth_headers):
    response = client.get("/auth/me", headers=auth_headers(rh))
    assert response.status_code == 200
    assert response.json() == {
        "id": rh.id,
        "email": rh.email,
        "tipo": "RH",
        "cargo": "RH",
        "setor": "RH",
    }


def test_invalid_and_expired_tokens(client, rh):
    assert client.get("/auth/me").status_code == 401

    response = client.get("/auth/me", headers={"Authorization": "Bearer nao-e-um-jwt"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Token inválido"

    expired = TokenUtils.create_session_token(rh, expires_delta=timedelta(minutes=-1))
    response = client.get("/auth/me", headers={"Authorization": f"Bearer {expired}"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Token expirado"


def test_seeded_users_log_in_with_legacy_passwords(client, db):
    seed_demo_data(db)
    seed_demo_data(db)
    assert db.query(User).count() == 5

    response = client.post("/auth/login", json={"email": "maria.rh@empresa.com", "senha": "rh123"})
    assert response.status_code == 200
    assert response.json()["user"]["tipo"] == "RH"

    ana = db.query(User).filter(User.email == "ana.costa@empresa.com").one()
    assert ana.gestor.email == "joao.gestor@empresa.com"
