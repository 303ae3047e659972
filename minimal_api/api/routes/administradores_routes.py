from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from minimal_api import schemas
from minimal_api.api import dependencies
from minimal_api.core import security
from minimal_api.core.exceptions import ErrosDeValidacao
from minimal_api.models import Administrador, Perfil
from minimal_api.services import AdministradorServicoProtocol

router = APIRouter()

SOMENTE_ADMIN = Depends(dependencies.require_perfil(Perfil.admin.value))

PERFIS_VALIDOS = [perfil.value for perfil in Perfil]


@router.post("/login", response_model=schemas.token_schemas.AdministradorLogadoSchema)
def login_for_access_token(
    *,
    login_data: schemas.token_schemas.LoginRequestSchema,
    service: AdministradorServicoProtocol = Depends(dependencies.get_administrador_service),
):
    """
    Login to get an access token.
    """
    administrador = service.login(login_data.email, login_data.senha)
    if not administrador:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = security.create_access_token(
        email=administrador.email, perfil=administrador.perfil  # type: ignore
    )
    return {
        "email": administrador.email,
        "perfil": administrador.perfil,
        "token": token,
    }


@router.get(
    "",
    response_model=List[schemas.administrador_schemas.AdministradorReadSchema],
    dependencies=[SOMENTE_ADMIN],
)
def get_administradores(
    *,
    pagina: Optional[int] = Query(None, ge=1),
    service: AdministradorServicoProtocol = Depends(dependencies.get_administrador_service),
):
    """
    List administrators. Without `pagina` every administrator is returned.
    """
    return service.list(page=pagina)


@router.get(
    "/{administrador_id}",
    response_model=schemas.administrador_schemas.AdministradorReadSchema,
    dependencies=[SOMENTE_ADMIN],
)
def get_administrador_by_id(
    *,
    administrador_id: int,
    service: AdministradorServicoProtocol = Depends(dependencies.get_administrador_service),
):
    administrador = service.find_by_id(administrador_id)
    if administrador is None:
        raise HTTPException(status_code=404, detail="Administrador não encontrado")
    return administrador


@router.post(
    "",
    response_model=schemas.administrador_schemas.AdministradorReadSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": schemas.response_schemas.ErrosDeValidacaoSchema}},
    dependencies=[SOMENTE_ADMIN],
)
def create_administrador(
    *,
    response: Response,
    administrador_in: schemas.administrador_schemas.AdministradorCreateSchema,
    service: AdministradorServicoProtocol = Depends(dependencies.get_administrador_service),
):
    """
    Register a new administrator with role Admin or User.
    """
    mensagens = []
    perfil = administrador_in.perfil or ""

    if len(perfil) < 3:
        mensagens.append("O perfil do administrador deve conter ao menos 3 caracteres.")
    elif perfil not in PERFIS_VALIDOS:
        mensagens.append(f"O perfil do administrador deve ser um de: {', '.join(PERFIS_VALIDOS)}.")

    if len(administrador_in.email) < 3:
        mensagens.append("O email do administrador deve conter ao menos 3 caracteres.")

    if len(administrador_in.senha) < 3:
        mensagens.append("A senha do administrador deve conter ao menos 3 caracteres.")

    if not administrador_in.senha:
        mensagens.append("A senha do administrador não pode ser vazia.")

    if not mensagens and service.find_by_email(administrador_in.email):
        mensagens.append("Já existe um administrador com este email.")

    if mensagens:
        raise ErrosDeValidacao(mensagens)

    administrador = Administrador(
        email=administrador_in.email,
        senha=administrador_in.senha,
        perfil=perfil,
    )
    service.add(administrador)

    response.headers["Location"] = f"/administradores/{administrador.id}"
    return administrador
