import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError
from pydantic import ValidationError

from minimal_api.core import security
from minimal_api.db.session import get_db
from minimal_api.schemas import token_schemas
from minimal_api.services import (
    AdministradorService,
    AdministradorServicoProtocol,
    VeiculoService,
    VeiculoServicoProtocol,
)

logger = logging.getLogger(__name__)

# auto_error is off so a missing header is a 401 rather than FastAPI's default
http_bearer_scheme = HTTPBearer(auto_error=False)


def get_veiculo_service(db: Session = Depends(get_db)) -> VeiculoServicoProtocol:
    return VeiculoService(db)


def get_administrador_service(db: Session = Depends(get_db)) -> AdministradorServicoProtocol:
    return AdministradorService(db)


def get_current_administrador(
    auth: HTTPAuthorizationCredentials | None = Depends(http_bearer_scheme),
) -> token_schemas.TokenPayloadSchema:
    """
    Dependency to get the caller's identity from a Bearer token.
    1. Extracts the token from the Authorization header.
    2. Decodes and validates signature and expiry.
    3. Returns the email/role claims. No database round trip.
    """
    if auth is None or not auth.credentials:
        raise security.CREDENTIALS_EXCEPTION
    try:
        payload = security.decode_access_token(auth.credentials)
        return token_schemas.TokenPayloadSchema(**payload)
    except (JWTError, ValidationError) as e:
        logger.info(f"Rejected bearer token: {e}")
        raise security.CREDENTIALS_EXCEPTION


def require_perfil(*perfis: str):
    """
    Factory function that creates a dependency for requiring one of the given roles.
    Usage: Depends(require_perfil("Admin", "User"))
    """
    def check_perfil(
        current: token_schemas.TokenPayloadSchema = Depends(get_current_administrador),
    ) -> token_schemas.TokenPayloadSchema:
        if current.role not in perfis:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Not enough permissions. Role {' or '.join(perfis)} required.",
            )
        return current
    return check_perfil
