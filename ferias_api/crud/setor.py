from ferias_api.crud.base import CRUDNamed
from ferias_api.models.organizacao import Setor
from ferias_api.schemas.organizacao import SetorCreate, SetorUpdate


class CRUDSetor(CRUDNamed[Setor, SetorCreate, SetorUpdate]):
    label = "Setor"


setor = CRUDSetor(Setor)
