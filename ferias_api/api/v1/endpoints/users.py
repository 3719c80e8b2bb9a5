from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ferias_api.api.deps import get_current_user, get_db, require_gestor, require_rh
from ferias_api.core.exceptions import ValidationError
from ferias_api.crud.user import user as user_crud
from ferias_api.schemas.user import UserCreate, UserResponse, UserUpdate
from ferias_api.templates.api import ApiResponseTemplate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
def read_users(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
):
    return user_crud.get_multi(db, skip=skip, limit=limit)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    return user_crud.create(db, obj_in=user_in)


@router.get("/my-team", response_model=List[UserResponse])
def read_my_team(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_gestor),
):
    return user_crud.get_by_gestor(db, gestor_id=current_user["id"])


@router.get("/{user_id}", response_model=UserResponse)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    return user_crud.get_or_404(db, id=user_id)


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    user = user_crud.get_or_404(db, id=user_id)
    return user_crud.update(db, db_obj=user, obj_in=user_in)


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_rh),
):
    if user_id == current_user["id"]:
        raise ValidationError("Você não pode remover o próprio usuário.")
    user_crud.remove(db, id=user_id)
    return ApiResponseTemplate.success(
        data={"id": user_id},
        message="Usuário deletado com sucesso",
    )
