from datetime import date, timedelta

import pytest

from ferias_api.core.exceptions import NotFoundError, ValidationError
from ferias_api.crud.ferias import ferias as ferias_crud
from ferias_api.models import StatusFerias, Tipo
from ferias_api.schemas.ferias import FeriasCreate


def _submit(db, funcionario, gestor, start, periodo=7, motivo=None, **kwargs):
    obj_in = FeriasCreate(user_id=funcionario.id, start_date=start, periodo=periodo, motivo=motivo)
    return ferias_crud.submit(db, obj_in=obj_in, gestor_id=gestor.id, **kwargs)


class TestSubmit:
    @pytest.mark.parametrize("periodo", [7, 15])
    def test_creates_pending_request(self, db, gestor, funcionario, start_date, periodo):
        request = _submit(db, funcionario, gestor, start_date, periodo=periodo, motivo="Viagem")
        assert request.status == StatusFerias.PENDENTE
        assert request.end_date == start_date + timedelta(days=periodo)
        assert request.motivo == "Viagem"
        assert request.observacao_reprovacao is None

    def test_unknown_employee(self, db, gestor, start_date):
        obj_in = FeriasCreate(user_id=999, start_date=start_date, periodo=7)
        with pytest.raises(NotFoundError):
            ferias_crud.submit(db, obj_in=obj_in, gestor_id=gestor.id)

    def test_only_direct_manager_may_submit(self, db, rh, make_user, funcionario, start_date):
        outro_gestor = make_user(Tipo.GESTOR, gestor=rh, email="carlos.gestor@empresa.com")
        with pytest.raises(ValidationError, match="subordinado"):
            _submit(db, funcionario, outro_gestor, start_date)

    def test_second_pending_request_is_refused(self, db, gestor, funcionario, start_date):
        _submit(db, funcionario, gestor, start_date)
        with pytest.raises(ValidationError, match="pendente"):
            _submit(db, funcionario, gestor, start_date + timedelta(days=30))

    @pytest.mark.parametrize("status", [StatusFerias.APROVADO, StatusFerias.REPROVADO])
    def test_new_request_allowed_after_decision(self, db, gestor, funcionario, start_date, status):
        first = _submit(db, funcionario, gestor, start_date)
        ferias_crud.decide(db, id=first.id, status=status)
        second = _submit(db, funcionario, gestor, start_date + timedelta(days=30))
        assert second.status == StatusFerias.PENDENTE

    def test_minimum_notice(self, db, gestor, funcionario):
        today = date(2026, 3, 2)
        with pytest.raises(ValidationError, match="14 dias"):
            _submit(db, funcionario, gestor, today + timedelta(days=13), today=today)
        request = _submit(db, funcionario, gestor, today + timedelta(days=14), today=today)
        assert request.start_date == date(2026, 3, 16)
        assert request.end_date == date(2026, 3, 23)

    def test_invalid_period(self, db, gestor, funcionario, start_date):
        with pytest.raises(ValidationError):
            _submit(db, funcionario, gestor, start_date, periodo=10)


class TestDecide:
    def test_reject_stores_note(self, db, gestor, funcionario, start_date):
        request = _submit(db, funcionario, gestor, start_date)
        decided = ferias_crud.decide(
            db, id=request.id, status=StatusFerias.REPROVADO, observacao_reprovacao="Fechamento do mês"
        )
        assert decided.status == StatusFerias.REPROVADO
        assert decided.observacao_reprovacao == "Fechamento do mês"

    def test_reject_without_note(self, db, gestor, funcionario, start_date):
        request = _submit(db, funcionario, gestor, start_date)
        decided = ferias_crud.decide(db, id=request.id, status=StatusFerias.REPROVADO)
        assert decided.observacao_reprovacao is None

    def test_approve_clears_note(self, db, gestor, funcionario, start_date):
        request = _submit(db, funcionario, gestor, start_date)
        decided = ferias_crud.decide(
            db, id=request.id, status=StatusFerias.APROVADO, observacao_reprovacao="ignorada"
        )
        assert decided.status == StatusFerias.APROVADO
        assert decided.observacao_reprovacao is None

    def test_pending_is_not_a_decision(self, db, gestor, funcionario, start_date):
        request = _submit(db, funcionario, gestor, start_date)
        with pytest.raises(ValidationError, match="Status inválido"):
            ferias_crud.decide(db, id=request.id, status=StatusFerias.PENDENTE)

    def test_decided_request_is_final(self, db, gestor, funcionario, start_date):
        request = _submit(db, funcionario, gestor, start_date)
        ferias_crud.decide(db, id=request.id, status=StatusFerias.REPROVADO, observacao_reprovacao="Não")
        with pytest.raises(ValidationError, match="já foi decidida"):
            ferias_crud.decide(db, id=request.id, status=StatusFerias.APROVADO)

    def test_unknown_request(self, db, org):
        with pytest.raises(NotFoundError):
            ferias_crud.decide(db, id=42, status=StatusFerias.APROVADO)


class TestListing:
    def test_listings(self, db, rh, gestor, funcionario, make_user, start_date):
        outro_gestor = make_user(Tipo.GESTOR, gestor=rh, email="carlos.gestor@empresa.com")
        outro = make_user(Tipo.FUNCIONARIO, gestor=outro_gestor, nome="Bruno Lima")
        mine = _submit(db, funcionario, gestor, start_date)
        theirs = _submit(db, outro, outro_gestor, start_date)

        assert [f.id for f in ferias_crud.list_for_rh(db)] == [mine.id, theirs.id]
        assert [f.id for f in ferias_crud.list_for_gestor(db, gestor_id=gestor.id)] == [mine.id]


class TestHttp:
    def test_full_flow(self, client, rh, gestor, funcionario, auth_headers):
        start = date.today() + timedelta(days=20)
        response = client.post(
            "/vacation-requests",
            json={"user_id": funcionario.id, "start_date": start.isoformat(), "periodo": 7},
            headers=auth_headers(gestor),
        )
        assert response.status_code == 201
        created = response.json()
        assert created["status"] == "Pendente"
        assert created["end_date"] == (start + timedelta(days=7)).isoformat()
        assert created["user"]["id"] == funcionario.id

        response = client.get("/vacation-requests/my-team", headers=auth_headers(gestor))
        assert [f["id"] for f in response.json()] == [created["id"]]

        response = client.patch(
            f"/vacation-requests/{created['id']}/status",
            json={"status": "Aprovado"},
            headers=auth_headers(rh),
        )
        assert response.status_code == 200
        assert response.json()["status"] == "Aprovado"
        assert response.json()["observacao_reprovacao"] is None

        response = client.get("/vacation-requests", headers=auth_headers(rh))
        assert response.status_code == 200
        assert response.json()[0]["user"]["nome"] == "Ana Costa"

    def test_roles_are_enforced(self, client, rh, gestor, funcionario, auth_headers):
        start = (date.today() + timedelta(days=20)).isoformat()
        body = {"user_id": funcionario.id, "start_date": start, "periodo": 15}
        assert client.post("/vacation-requests", json=body, headers=auth_headers(rh)).status_code == 403
        assert client.get("/vacation-requests", headers=auth_headers(gestor)).status_code == 403
        response = client.patch(
            "/vacation-requests/1/status", json={"status": "Aprovado"}, headers=auth_headers(gestor)
        )
        assert response.status_code == 403

    def test_rule_violations_are_bad_requests(self, client, gestor, funcionario, auth_headers):
        too_soon = (date.today() + timedelta(days=13)).isoformat()
        response = client.post(
            "/vacation-requests",
            json={"user_id": funcionario.id, "start_date": too_soon, "periodo": 7},
            headers=auth_headers(gestor),
        )
        assert response.status_code == 400
        assert "14 dias" in response.json()["detail"]

    def test_malformed_input_is_bad_request(self, client, rh, gestor, funcionario, auth_headers):
        start = (date.today() + timedelta(days=20)).isoformat()
        response = client.post(
            "/vacation-requests",
            json={"user_id": funcionario.id, "start_date": start, "periodo": "sete"},
            headers=auth_headers(gestor),
        )
        assert response.status_code == 400
        assert response.json()["detail"][0]["loc"] == ["body", "periodo"]

        created = client.post(
            "/vacation-requests",
            json={"user_id": funcionario.id, "start_date": start, "periodo": 7},
            headers=auth_headers(gestor),
        ).json()
        for decision in ("Cancelado", "Pendente"):
            response = client.patch(
                f"/vacation-requests/{created['id']}/status",
                json={"status": decision},
                headers=auth_headers(rh),
            )
            assert response.status_code == 400
