from fastapi import HTTPException, status


class FeriasException(HTTPException):
    """Exceção base das regras de negócio."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        headers: dict | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class ValidationError(FeriasException):
    """Entrada que viola uma regra de negócio."""

    def __init__(self, detail: str = "Requisição inválida"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConflictError(FeriasException):
    """Violação de unicidade."""

    def __init__(self, detail: str = "Registro já cadastrado no sistema."):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class NotFoundError(FeriasException):
    def __init__(self, detail: str = "Registro não encontrado"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class CredentialsError(FeriasException):
    """Credenciais ou token inválidos."""

    def __init__(self, detail: str = "E-mail ou senha inválidos."):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class TokenExpiredError(CredentialsError):
    def __init__(self, detail: str = "Token expirado"):
        super().__init__(detail=detail)


class TokenInvalidError(CredentialsError):
    def __init__(self, detail: str = "Token inválido"):
        super().__init__(detail=detail)


class ForbiddenError(FeriasException):
    """Autenticado, mas sem o papel necessário."""

    def __init__(self, detail: str = "Acesso não autorizado."):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
