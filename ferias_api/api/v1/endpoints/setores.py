from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ferias_api.api.deps import get_db, require_rh, require_rh_or_gestor
from ferias_api.crud.setor import setor as setor_crud
from ferias_api.schemas.organizacao import SetorCreate, SetorResponse, SetorUpdate
from ferias_api.templates.api import ApiResponseTemplate

router = APIRouter(prefix="/setores", tags=["setores"])


@router.get("", response_model=List[SetorResponse])
def read_setores(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh_or_gestor),
):
    return setor_crud.get_multi(db)


@router.get("/{setor_id}", response_model=SetorResponse)
def read_setor(
    setor_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh_or_gestor),
):
    return setor_crud.get_or_404(db, id=setor_id)


@router.post("", response_model=SetorResponse, status_code=status.HTTP_201_CREATED)
def create_setor(
    setor_in: SetorCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    return setor_crud.create(db, obj_in=setor_in)


@router.patch("/{setor_id}", response_model=SetorResponse)
def update_setor(
    setor_id: int,
    setor_in: SetorUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    setor = setor_crud.get_or_404(db, id=setor_id)
    return setor_crud.update(db, db_obj=setor, obj_in=setor_in)


@router.delete("/{setor_id}")
def delete_setor(
    setor_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    setor_crud.remove(db, id=setor_id)
    return ApiResponseTemplate.success(data={"id": setor_id}, message="Setor deletado com sucesso")
