from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ferias_api.api.deps import get_current_user, get_db
from ferias_api.core.config import settings
from ferias_api.core.security import TokenUtils
from ferias_api.crud.user import user as user_crud
from ferias_api.schemas.token import LoginRequest, LoginResponse, SessionUser

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = user_crud.authenticate(db, email=credentials.email, password=credentials.senha)
    return {
        "access_token": TokenUtils.create_session_token(user),
        "token_type": settings.TOKEN_TYPE,
        "user": user,
    }


@router.get("/me", response_model=SessionUser)
async def read_session(current_user: dict = Depends(get_current_user)):
    return current_user
