from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ferias_api.core.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """CRUD base com operações básicas sobre modelos SQLAlchemy."""

    not_found_detail = "Registro não encontrado"
    # coluna única -> rótulo usado na mensagem de conflito
    unique_fields: Dict[str, str] = {}

    def __init__(self, model: Type[ModelType]) -> None:
        self.model = model

    def get(self, db: Session, *, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def get_or_404(self, db: Session, *, id: Any) -> ModelType:
        obj = self.get(db, id=id)
        if obj is None:
            raise NotFoundError(self.not_found_detail)
        return obj

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: Optional[int] = None
    ) -> list[ModelType]:
        query = db.query(self.model).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        db_obj = self.model(**obj_in.model_dump())
        db.add(db_obj)
        return self.commit(db, db_obj)

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            setattr(db_obj, field, value)

        db.add(db_obj)
        return self.commit(db, db_obj)

    def remove(self, db: Session, *, id: Any) -> ModelType:
        obj = self.get_or_404(db, id=id)
        db.delete(obj)
        db.commit()
        return obj

    def commit(self, db: Session, db_obj: ModelType) -> ModelType:
        """Confirma a transação; violação de unicidade vira ConflictError."""
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            conflict = self._conflict_from(exc)
            if conflict is None:
                raise
            raise conflict from exc
        db.refresh(db_obj)
        return db_obj

    def _conflict_from(self, exc: IntegrityError) -> Optional[ConflictError]:
        message = str(exc.orig).lower()
        if "unique" not in message and "duplicate" not in message:
            return None
        for column, label in self.unique_fields.items():
            if column in message:
                logger.warning("Violação de unicidade em %s.%s", self.model.__tablename__, column)
                return ConflictError(f"{label} já está cadastrado no sistema.")
        logger.warning("Violação de unicidade em %s", self.model.__tablename__)
        return ConflictError()


class CRUDNamed(CRUDBase[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Cadastros identificados por nome único (setores e cargos)."""

    label = "Registro"

    def __init__(self, model: Type[ModelType]) -> None:
        super().__init__(model)
        self.not_found_detail = f"{self.label} não encontrado"
        self.unique_fields = {"nome": f"{self.label} com este nome"}

    def get_by_nome(self, db: Session, nome: str) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.nome == nome).first()

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        if self.get_by_nome(db, obj_in.nome):
            raise ConflictError(f'{self.label} "{obj_in.nome}" já existe.')
        return super().create(db, obj_in=obj_in)

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        nome = update_data.get("nome")
        if nome is None:
            update_data.pop("nome", None)
        else:
            existing = self.get_by_nome(db, nome)
            if existing and existing.id != db_obj.id:
                raise ConflictError(f'{self.label} "{nome}" já existe.')
        return super().update(db, db_obj=db_obj, obj_in=update_data)

    def remove(self, db: Session, *, id: Any) -> ModelType:
        obj = self.get_or_404(db, id=id)
        total = len(obj.users)
        if total:
            raise ValidationError(
                f'Não é possível deletar o {self.label.lower()} "{obj.nome}" pois existem '
                f"{total} usuário(s) associado(s)."
            )
        db.delete(obj)
        db.commit()
        return obj
