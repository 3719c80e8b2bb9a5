from fastapi import APIRouter

from ferias_api.api.v1.endpoints import (
    auth,
    cargos,
    setores,
    users,
    vacation_requests,
)

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(setores.router)
api_router.include_router(cargos.router)
api_router.include_router(vacation_requests.router)
