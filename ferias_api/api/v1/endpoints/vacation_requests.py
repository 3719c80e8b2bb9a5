from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ferias_api.api.deps import get_db, require_gestor, require_rh
from ferias_api.crud.ferias import ferias as ferias_crud
from ferias_api.schemas.ferias import FeriasCreate, FeriasResponse, FeriasStatusUpdate

router = APIRouter(prefix="/vacation-requests", tags=["vacation-requests"])


@router.post("", response_model=FeriasResponse, status_code=status.HTTP_201_CREATED)
def create_vacation_request(
    ferias_in: FeriasCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_gestor),
):
    """Criada pelo gestor para um subordinado direto."""
    return ferias_crud.submit(db, obj_in=ferias_in, gestor_id=current_user["id"])


@router.get("", response_model=List[FeriasResponse])
def read_vacation_requests(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    return ferias_crud.list_for_rh(db)


@router.get("/my-team", response_model=List[FeriasResponse])
def read_team_vacation_requests(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_gestor),
):
    return ferias_crud.list_for_gestor(db, gestor_id=current_user["id"])


@router.patch("/{ferias_id}/status", response_model=FeriasResponse)
def update_vacation_request_status(
    ferias_id: int,
    status_in: FeriasStatusUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    return ferias_crud.decide(
        db,
        id=ferias_id,
        status=status_in.status,
        observacao_reprovacao=status_in.observacao_reprovacao,
    )
