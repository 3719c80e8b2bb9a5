import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ferias_api.api.v1.router import api_router
from ferias_api.core.config import settings
from ferias_api.core.initial_data import seed_demo_data
from ferias_api.database import Base, engine
from ferias_api.templates.api import ApiResponseTemplate

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.secret_key_configured:
        logger.warning("SECRET_KEY não configurada: usando chave aleatória, tokens expiram no restart")
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DEMO_DATA:
        seed_demo_data()
    yield
    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="API para gestão de colaboradores e solicitações de férias",
    lifespan=lifespan,
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    # Entrada malformada responde 400, igual às violações de regra
    logger.info("Requisição inválida em %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Erro inesperado em %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ApiResponseTemplate.error("Erro interno do servidor", 500),
    )


# Incluir rotas
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    return {"message": f"{settings.PROJECT_NAME} API"}
