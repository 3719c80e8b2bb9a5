from typing import Any, Dict, Union

from sqlalchemy.orm import Session

from ferias_api.crud.base import CRUDNamed
from ferias_api.models.organizacao import Cargo
from ferias_api.schemas.organizacao import CargoCreate, CargoUpdate


class CRUDCargo(CRUDNamed[Cargo, CargoCreate, CargoUpdate]):
    label = "Cargo"

    def create(self, db: Session, *, obj_in: CargoCreate) -> Cargo:
        if obj_in.tipo is None:
            obj_in = obj_in.model_copy(update={"tipo": Cargo.tipo_padrao(obj_in.nome)})
        return super().create(db, obj_in=obj_in)

    def update(
        self,
        db: Session,
        *,
        db_obj: Cargo,
        obj_in: Union[CargoUpdate, Dict[str, Any]],
    ) -> Cargo:
        # Renomear não altera o papel; só um tipo explícito altera
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        if update_data.get("tipo") is None:
            update_data.pop("tipo", None)
        return super().update(db, db_obj=db_obj, obj_in=update_data)


cargo = CRUDCargo(Cargo)
