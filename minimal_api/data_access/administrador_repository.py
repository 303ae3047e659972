from sqlalchemy.orm import Session

from minimal_api.core.security import verify_password
from minimal_api.models import Administrador
from .base_repository import BaseRepository

class AdministradorRepository(BaseRepository[Administrador]):
    def authenticate(self, db: Session, *, email: str, senha: str) -> Administrador | None:
        administrador = self.get_by_email(db, email=email)
        if not administrador:
            return None
        if not verify_password(senha, administrador.senha):  # type: ignore
            return None
        return administrador

    def get_by_email(self, db: Session, *, email: str) -> Administrador | None:
        return db.query(Administrador).filter(Administrador.email == email).first()

administrador_repo = AdministradorRepository(Administrador)
