import secrets
from typing import List, Union

from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    API_PREFIX: str = ""
    PROJECT_NAME: str = "Sistema de Férias"
    VERSION: str = "1.0.0"

    # Segurança JWT
    SECRET_KEY: str = secrets.token_urlsafe(32)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 1 dia
    TOKEN_TYPE: str = "Bearer"

    # CORS
    BACKEND_CORS_ORIGINS: List[Union[str, AnyHttpUrl]] = [
        "http://localhost:4200",
    ]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(
        cls, v: Union[str, List[str]]
    ) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Banco de dados
    DATABASE_URL: str = "sqlite:///./ferias.db"

    # Senhas
    PASSWORD_MIN_LENGTH: int = 6
    BCRYPT_ROUNDS: int = 10
    # Aceita senhas legadas em texto plano e migra no primeiro login
    ALLOW_LEGACY_PLAINTEXT_PASSWORDS: bool = True

    # Regras de férias
    VACATION_MIN_NOTICE_DAYS: int = 14

    # Credenciais geradas para funcionários sem login
    PLACEHOLDER_EMAIL_DOMAIN: str = "empresa.local"

    # Aplicação
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    SEED_DEMO_DATA: bool = False

    class Config:
        case_sensitive = True
        env_file = ".env"

    @property
    def secret_key_configured(self) -> bool:
        return "SECRET_KEY" in self.model_fields_set


settings = Settings()
