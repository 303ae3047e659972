import logging
from sqlalchemy.orm import Session

from minimal_api.core.config import settings
from minimal_api.models import Administrador, Perfil
from minimal_api.services import AdministradorService

logger = logging.getLogger(__name__)

def seed_database(db: Session) -> Administrador | None:
    """
    Create the first Admin when the administrators table is empty.
    Credentials come from FIRST_ADMIN_EMAIL / FIRST_ADMIN_PASSWORD; nothing is
    created while the password is unset.
    """
    service = AdministradorService(db)
    if service.list(page=1):
        logger.info("Administrators already exist, skipping seed.")
        return None

    if not settings.FIRST_ADMIN_PASSWORD:
        logger.warning("FIRST_ADMIN_PASSWORD is not set, no administrator was seeded.")
        return None

    logger.info(f"Creating first administrator {settings.FIRST_ADMIN_EMAIL}...")
    administrador = Administrador(
        email=settings.FIRST_ADMIN_EMAIL,
        senha=settings.FIRST_ADMIN_PASSWORD,
        perfil=Perfil.admin.value,
    )
    service.add(administrador)
    logger.info("Seeding complete.")
    return administrador

if __name__ == "__main__":
    # Run from the project root: python -m minimal_api.seeds.initial_data
    logging.basicConfig(level=logging.INFO)

    from minimal_api.db.session import SessionLocal, create_tables

    create_tables()
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()
