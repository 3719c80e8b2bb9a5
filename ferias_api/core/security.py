import hmac
import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt
from passlib.context import CryptContext

from ferias_api.core.config import settings

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

# $2a$, $2b$ ou $2y$ seguido do custo e de um $
BCRYPT_HASH_PATTERN = re.compile(r"^\$2[ayb]\$\d{2}\$")


class PasswordUtils:
    """Hash e verificação de senhas, com suporte a senhas legadas em texto plano."""

    @staticmethod
    def is_hashed(value: Optional[str]) -> bool:
        return bool(value) and BCRYPT_HASH_PATTERN.match(value) is not None

    @staticmethod
    def hash(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify(candidate: str, stored: str) -> bool:
        """Compara a senha informada com a armazenada.

        Hashes bcrypt são verificados pelo passlib. Um valor armazenado sem
        hash é uma senha legada: só é aceito enquanto
        ALLOW_LEGACY_PLAINTEXT_PASSWORDS estiver ativo, e cada comparação
        fica registrada no log.
        """
        if PasswordUtils.is_hashed(stored):
            return pwd_context.verify(candidate, stored)

        if not settings.ALLOW_LEGACY_PLAINTEXT_PASSWORDS:
            logger.warning("Senha legada em texto plano recusada: modo legado desativado")
            return False

        logger.warning("Comparando senha legada armazenada em texto plano")
        return hmac.compare_digest(candidate.encode("utf-8"), stored.encode("utf-8"))


class TokenUtils:
    """Utilidades para tokens JWT de sessão."""

    @staticmethod
    def create_access_token(
        data: Dict[str, Any],
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        to_encode = data.copy()
        now = datetime.now(timezone.utc)

        if expires_delta:
            expire = now + expires_delta
        else:
            expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

        to_encode.update({"exp": expire, "iat": now, "type": "access"})
        return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    @staticmethod
    def decode_token(token: str) -> Dict[str, Any]:
        """Decodifica e valida assinatura e expiração; propaga os erros do jose."""
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])

    @staticmethod
    def create_session_token(user, expires_delta: Optional[timedelta] = None) -> str:
        """Token de sessão com os claims de papel consumidos pelo controle de acesso."""
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "tipo": user.tipo.value,
            "cargo": user.cargo.nome if user.cargo else None,
            "setor": user.setor.nome if user.setor else None,
        }
        return TokenUtils.create_access_token(payload, expires_delta=expires_delta)
