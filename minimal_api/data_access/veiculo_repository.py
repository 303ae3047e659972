from sqlalchemy.orm import Session

from minimal_api.models import Veiculo
from .base_repository import BaseRepository

class VeiculoRepository(BaseRepository[Veiculo]):
    def search(
        self, db: Session, *, page: int, nome: str | None = None, marca: str | None = None
    ) -> list[Veiculo]:
        """Case-insensitive substring match on nome and marca. % and _ match literally."""
        filters = []
        if nome:
            filters.append(Veiculo.nome.icontains(nome, autoescape=True))
        if marca:
            filters.append(Veiculo.marca.icontains(marca, autoescape=True))
        return self.get_multi(db, page=page, filters=filters)

veiculo_repo = VeiculoRepository(Veiculo)
