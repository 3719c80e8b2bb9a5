from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ferias_api.api.deps import get_db, require_rh, require_rh_or_gestor
from ferias_api.crud.cargo import cargo as cargo_crud
from ferias_api.schemas.organizacao import CargoCreate, CargoResponse, CargoUpdate
from ferias_api.templates.api import ApiResponseTemplate

router = APIRouter(prefix="/cargos", tags=["cargos"])


@router.get("", response_model=List[CargoResponse])
def read_cargos(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh_or_gestor),
):
    return cargo_crud.get_multi(db)


@router.get("/{cargo_id}", response_model=CargoResponse)
def read_cargo(
    cargo_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh_or_gestor),
):
    return cargo_crud.get_or_404(db, id=cargo_id)


@router.post("", response_model=CargoResponse, status_code=status.HTTP_201_CREATED)
def create_cargo(
    cargo_in: CargoCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    return cargo_crud.create(db, obj_in=cargo_in)


@router.patch("/{cargo_id}", response_model=CargoResponse)
def update_cargo(
    cargo_id: int,
    cargo_in: CargoUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    cargo = cargo_crud.get_or_404(db, id=cargo_id)
    return cargo_crud.update(db, db_obj=cargo, obj_in=cargo_in)


@router.delete("/{cargo_id}")
def delete_cargo(
    cargo_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    cargo_crud.remove(db, id=cargo_id)
    return ApiResponseTemplate.success(data={"id": cargo_id}, message="Cargo deletado com sucesso")
