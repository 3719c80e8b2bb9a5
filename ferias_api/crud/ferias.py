import logging
from datetime import date, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from ferias_api.core.config import settings
from ferias_api.core.exceptions import NotFoundError, ValidationError
from ferias_api.crud.base import CRUDBase
from ferias_api.models.ferias import PERIODOS_PERMITIDOS, Ferias, StatusFerias
from ferias_api.models.user import User
from ferias_api.schemas.ferias import FeriasCreate, FeriasStatusUpdate

logger = logging.getLogger(__name__)

DECISOES = (StatusFerias.APROVADO, StatusFerias.REPROVADO)


class CRUDFerias(CRUDBase[Ferias, FeriasCreate, FeriasStatusUpdate]):
    """Ciclo de vida das solicitações de férias."""

    not_found_detail = "Solicitação não encontrada"

    def _query(self, db: Session):
        return db.query(Ferias).options(selectinload(Ferias.user))

    def get(self, db: Session, *, id) -> Optional[Ferias]:
        return self._query(db).filter(Ferias.id == id).first()

    def get_pending_for_user(self, db: Session, *, user_id: int) -> Optional[Ferias]:
        return (
            db.query(Ferias)
            .filter(Ferias.user_id == user_id, Ferias.status == StatusFerias.PENDENTE)
            .first()
        )

    def submit(
        self,
        db: Session,
        *,
        obj_in: FeriasCreate,
        gestor_id: int,
        today: Optional[date] = None,
    ) -> Ferias:
        colaborador = db.get(User, obj_in.user_id)
        if colaborador is None:
            raise NotFoundError("Colaborador não encontrado")

        if colaborador.gestor_id != gestor_id:
            raise ValidationError("Colaborador não é subordinado deste gestor.")

        if self.get_pending_for_user(db, user_id=colaborador.id):
            raise ValidationError("Funcionário já possui uma solicitação de férias pendente.")

        minimo = (today or date.today()) + timedelta(days=settings.VACATION_MIN_NOTICE_DAYS)
        if obj_in.start_date < minimo:
            raise ValidationError(
                f"A data de início deve ser pelo menos {settings.VACATION_MIN_NOTICE_DAYS} "
                "dias a partir de hoje."
            )

        if obj_in.periodo not in PERIODOS_PERMITIDOS:
            raise ValidationError("periodo deve ser 7 ou 15")

        db_obj = Ferias(
            user_id=colaborador.id,
            start_date=obj_in.start_date,
            end_date=Ferias.calcular_fim(obj_in.start_date, obj_in.periodo),
            periodo=obj_in.periodo,
            motivo=obj_in.motivo,
            status=StatusFerias.PENDENTE,
        )
        db.add(db_obj)
        ferias = self.commit(db, db_obj)
        logger.info(
            "Solicitação de férias %s criada pelo gestor %s para o usuário %s",
            ferias.id, gestor_id, colaborador.id,
        )
        return ferias

    def decide(
        self,
        db: Session,
        *,
        id: int,
        status: StatusFerias,
        observacao_reprovacao: Optional[str] = None,
    ) -> Ferias:
        ferias = self.get_or_404(db, id=id)

        if status not in DECISOES:
            raise ValidationError("Status inválido")

        if not ferias.is_pending:
            raise ValidationError(
                f"Solicitação já foi decidida (status atual: {ferias.status.value})."
            )

        ferias.status = status
        ferias.observacao_reprovacao = (
            observacao_reprovacao if status == StatusFerias.REPROVADO else None
        )
        db.add(ferias)
        ferias = self.commit(db, ferias)
        logger.info("Solicitação de férias %s: %s", ferias.id, status.value)
        return ferias

    def list_for_rh(self, db: Session) -> List[Ferias]:
        return self._query(db).order_by(Ferias.id).all()

    def list_for_gestor(self, db: Session, *, gestor_id: int) -> List[Ferias]:
        return (
            self._query(db)
            .join(Ferias.user)
            .filter(User.gestor_id == gestor_id)
            .order_by(Ferias.id)
            .all()
        )


ferias = CRUDFerias(Ferias)
