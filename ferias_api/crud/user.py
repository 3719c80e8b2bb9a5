import logging
import time
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session, selectinload

from ferias_api.core.config import settings
from ferias_api.core.exceptions import (
    ConflictError,
    CredentialsError,
    ForbiddenError,
    ValidationError,
)
from ferias_api.core.security import PasswordUtils
from ferias_api.crud.base import CRUDBase
from ferias_api.models.organizacao import Cargo, Setor
from ferias_api.models.user import Tipo, User
from ferias_api.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "E-mail ou senha inválidos."


def _blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


class CRUDUser(CRUDBase[User, UserCreate, UserUpdate]):
    """Cadastro de colaboradores e regras de papel/credenciais."""

    not_found_detail = "Usuário não encontrado"
    unique_fields = {"email": "Email", "cpf": "CPF"}

    def _query(self, db: Session):
        return db.query(User).options(
            selectinload(User.setor),
            selectinload(User.cargo),
            selectinload(User.gestor),
            selectinload(User.ferias),
        )

    def get(self, db: Session, *, id: Any) -> Optional[User]:
        return self._query(db).filter(User.id == id).first()

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[User]:
        query = self._query(db).order_by(User.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_by_gestor(self, db: Session, *, gestor_id: int) -> List[User]:
        return self._query(db).filter(User.gestor_id == gestor_id).order_by(User.id).all()

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def get_by_cpf(self, db: Session, cpf: str) -> Optional[User]:
        return db.query(User).filter(User.cpf == cpf).first()

    # -- validações -------------------------------------------------------

    def _resolve_cargo(self, db: Session, cargo_id: int) -> Cargo:
        cargo = db.get(Cargo, cargo_id)
        if cargo is None:
            raise ValidationError("cargo_id deve referenciar um cargo existente.")
        return cargo

    def _check_setor(self, db: Session, setor_id: int) -> None:
        if db.get(Setor, setor_id) is None:
            raise ValidationError("setor_id deve referenciar um setor existente.")

    def _check_gestor(self, db: Session, gestor_id: int) -> None:
        gestor = db.get(User, gestor_id)
        if gestor is None or not gestor.can_login:
            raise ValidationError("gestor_id deve referenciar um Gestor ou RH válido.")

    def _check_password(self, senha: str) -> None:
        if len(senha) < settings.PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"Senha deve ter pelo menos {settings.PASSWORD_MIN_LENGTH} caracteres."
            )

    # -- credenciais geradas ----------------------------------------------

    def _placeholder_email(self, db: Session, cpf: str, *, force_unique: bool = False) -> str:
        domain = settings.PLACEHOLDER_EMAIL_DOMAIN
        email = f"funcionario.{cpf}@{domain}"
        if force_unique or self.get_by_email(db, email):
            email = f"funcionario.{cpf}.{int(time.time() * 1000)}@{domain}"
        return email

    def _placeholder_password(self, cpf: str) -> str:
        return f"temp_{cpf}_{int(time.time() * 1000)}"

    # -- escrita ----------------------------------------------------------

    def create(self, db: Session, *, obj_in: UserCreate) -> User:
        cargo = self._resolve_cargo(db, obj_in.cargo_id)
        tipo = cargo.tipo
        if obj_in.tipo is not None and obj_in.tipo != tipo:
            logger.info(
                "Tipo informado %s substituído por %s (cargo: %s)",
                obj_in.tipo.value, tipo.value, cargo.nome,
            )

        if tipo == Tipo.FUNCIONARIO and obj_in.gestor_id is None:
            raise ValidationError("Funcionário deve ter um gestor definido.")

        email = None if _blank(obj_in.email) else obj_in.email.strip()
        senha = None if _blank(obj_in.senha) else obj_in.senha

        if tipo.has_login and (email is None or senha is None):
            raise ValidationError("Gestor e RH devem ter email e senha.")
        if tipo.has_login:
            self._check_password(senha)

        if obj_in.gestor_id is not None:
            self._check_gestor(db, obj_in.gestor_id)
        self._check_setor(db, obj_in.setor_id)

        if email is not None and self.get_by_email(db, email):
            raise ConflictError(f"Email {email} já está cadastrado no sistema.")
        if self.get_by_cpf(db, obj_in.cpf):
            raise ConflictError(f"CPF {obj_in.cpf} já está cadastrado no sistema.")

        if email is None:
            email = self._placeholder_email(db, obj_in.cpf)
            logger.info("Email gerado automaticamente para funcionário: %s", email)
        if senha is None:
            senha = self._placeholder_password(obj_in.cpf)
            logger.info("Senha temporária gerada para funcionário cpf=%s", obj_in.cpf)

        db_obj = User(
            nome=obj_in.nome,
            email=email,
            senha=PasswordUtils.hash(senha),
            cpf=obj_in.cpf,
            idade=obj_in.idade,
            salario=obj_in.salario,
            tipo=tipo,
            setor_id=obj_in.setor_id,
            cargo_id=obj_in.cargo_id,
            gestor_id=obj_in.gestor_id,
        )
        db.add(db_obj)
        user = self.commit(db, db_obj)
        logger.info("Usuário criado id=%s tipo=%s", user.id, user.tipo.value)
        return user

    def update(
        self,
        db: Session,
        *,
        db_obj: User,
        obj_in: Union[UserUpdate, Dict[str, Any]],
    ) -> User:
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)

        old_tipo = db_obj.tipo
        new_tipo = data.get("tipo") or old_tipo
        cargo_id = data.get("cargo_id")
        if cargo_id is not None and cargo_id != db_obj.cargo_id:
            cargo = self._resolve_cargo(db, cargo_id)
            new_tipo = cargo.tipo
            logger.info(
                "Tipo do usuário %s atualizado pelo cargo: %s -> %s (cargo: %s)",
                db_obj.id, old_tipo.value, new_tipo.value, cargo.nome,
            )

        gestor_id = data["gestor_id"] if "gestor_id" in data else db_obj.gestor_id
        if new_tipo == Tipo.FUNCIONARIO and gestor_id is None:
            raise ValidationError("Funcionário deve ter um gestor definido.")
        if gestor_id is not None and gestor_id != db_obj.gestor_id:
            if gestor_id == db_obj.id:
                raise ValidationError("Usuário não pode ser gestor de si mesmo.")
            self._check_gestor(db, gestor_id)

        setor_id = data.get("setor_id")
        if setor_id is not None and setor_id != db_obj.setor_id:
            self._check_setor(db, setor_id)

        changes: Dict[str, Any] = {
            field: data[field]
            for field in ("nome", "cpf", "idade", "salario", "setor_id", "cargo_id")
            if data.get(field) is not None
        }
        changes["tipo"] = new_tipo
        if "gestor_id" in data:
            changes["gestor_id"] = gestor_id

        cpf = changes.get("cpf")
        if cpf is not None and cpf != db_obj.cpf:
            other = self.get_by_cpf(db, cpf)
            if other and other.id != db_obj.id:
                raise ConflictError("CPF já cadastrado por outro usuário")

        demoted = old_tipo.has_login and not new_tipo.has_login
        if demoted:
            if db_obj.subordinados:
                raise ValidationError(
                    "Usuário possui subordinados; transfira-os para outro gestor antes do rebaixamento."
                )
            # Rebaixado a funcionário: troca as credenciais para revogar o login
            logger.warning("Rebaixamento do usuário %s: credenciais de acesso revogadas", db_obj.id)
            effective_cpf = changes.get("cpf", db_obj.cpf)
            changes["email"] = self._placeholder_email(db, effective_cpf, force_unique=True)
            changes["senha"] = PasswordUtils.hash(self._placeholder_password(effective_cpf))
        else:
            email = None if _blank(data.get("email")) else data["email"].strip()
            senha = None if _blank(data.get("senha")) else data["senha"]

            promoted = new_tipo.has_login and not old_tipo.has_login
            if promoted and (email is None or senha is None):
                raise ValidationError("Gestor e RH devem ter email e senha.")
            if senha is not None and new_tipo.has_login:
                self._check_password(senha)

            if email is not None and email != db_obj.email:
                other = self.get_by_email(db, email)
                if other and other.id != db_obj.id:
                    raise ConflictError("Email já cadastrado por outro usuário")
                changes["email"] = email
            if senha is not None:
                changes["senha"] = PasswordUtils.hash(senha)

        db_obj.update(**changes)
        db.add(db_obj)
        user = self.commit(db, db_obj)
        logger.info("Usuário atualizado id=%s tipo=%s", user.id, user.tipo.value)
        return user

    # -- autenticação -----------------------------------------------------

    def authenticate(self, db: Session, *, email: str, password: str) -> User:
        """Valida as credenciais de login.

        Senha legada em texto plano que confere é migrada para hash aqui
        mesmo: o login grava no banco.
        """
        user = self.get_by_email(db, email)
        if not user:
            logger.info("Falha de login: credenciais inválidas")
            raise CredentialsError(INVALID_CREDENTIALS)

        if not PasswordUtils.verify(password, user.senha):
            logger.info("Falha de login para o usuário %s: senha incorreta", user.id)
            raise CredentialsError(INVALID_CREDENTIALS)

        if not PasswordUtils.is_hashed(user.senha):
            user.senha = PasswordUtils.hash(password)
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.warning("Senha legada do usuário %s migrada para hash bcrypt", user.id)

        if not user.can_login:
            logger.info("Login recusado para o usuário %s: tipo %s", user.id, user.tipo.value)
            raise ForbiddenError("Acesso não autorizado.")

        return user


user = CRUDUser(User)
