from typing import Protocol

from minimal_api.models import Administrador, Veiculo


class VeiculoServicoProtocol(Protocol):
    """Persistence contract for vehicles used by the route layer."""

    def add(self, veiculo: Veiculo) -> None: ...

    def update(self, veiculo: Veiculo) -> None: ...

    def find_by_id(self, id: int) -> Veiculo | None: ...

    def delete(self, veiculo: Veiculo) -> None: ...

    def list(
        self, page: int = 1, nome: str | None = None, marca: str | None = None
    ) -> list[Veiculo]: ...


class AdministradorServicoProtocol(Protocol):
    """Persistence and login contract for administrators."""

    def login(self, email: str, senha: str) -> Administrador | None: ...

    def add(self, administrador: Administrador) -> None: ...

    def find_by_id(self, id: int) -> Administrador | None: ...

    def find_by_email(self, email: str) -> Administrador | None: ...

    def list(self, page: int | None = None) -> list[Administrador]: ...
