import logging

from sqlalchemy.orm import Session

from minimal_api.core.security import get_password_hash
from minimal_api.data_access import administrador_repo
from minimal_api.models import Administrador

logger = logging.getLogger(__name__)


class AdministradorService:
    """Administrator persistence and login bound to one database session."""

    def __init__(self, db: Session):
        self.db = db

    def login(self, email: str, senha: str) -> Administrador | None:
        administrador = administrador_repo.authenticate(self.db, email=email, senha=senha)
        if administrador is None:
            logger.warning(f"Failed login attempt for {email}")
        return administrador

    def add(self, administrador: Administrador) -> None:
        """Persists a new administrator. `senha` is given in plain text and stored hashed."""
        administrador.senha = get_password_hash(administrador.senha)
        administrador_repo.create(self.db, db_obj=administrador)
        logger.info(f"Administrator {administrador.id} created with role {administrador.perfil}")

    def find_by_id(self, id: int) -> Administrador | None:
        return administrador_repo.get(self.db, id=id)

    def find_by_email(self, email: str) -> Administrador | None:
        return administrador_repo.get_by_email(self.db, email=email)

    def list(self, page: int | None = None) -> list[Administrador]:
        return administrador_repo.get_multi(self.db, page=page)
