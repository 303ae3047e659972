import logging

from sqlalchemy.orm import Session

from minimal_api.data_access import veiculo_repo
from minimal_api.models import Veiculo

logger = logging.getLogger(__name__)


class VeiculoService:
    """Vehicle CRUD bound to one database session."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, veiculo: Veiculo) -> None:
        veiculo_repo.create(self.db, db_obj=veiculo)
        logger.info(f"Vehicle {veiculo.id} created ({veiculo.marca} {veiculo.nome})")

    def update(self, veiculo: Veiculo) -> None:
        veiculo_repo.update(self.db, db_obj=veiculo)
        logger.info(f"Vehicle {veiculo.id} updated")

    def find_by_id(self, id: int) -> Veiculo | None:
        return veiculo_repo.get(self.db, id=id)

    def delete(self, veiculo: Veiculo) -> None:
        veiculo_id = veiculo.id
        veiculo_repo.remove(self.db, db_obj=veiculo)
        logger.info(f"Vehicle {veiculo_id} deleted")

    def list(
        self, page: int = 1, nome: str | None = None, marca: str | None = None
    ) -> list[Veiculo]:
        return veiculo_repo.search(self.db, page=page, nome=nome, marca=marca)
