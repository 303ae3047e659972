from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from minimal_api import schemas
from minimal_api.api import dependencies
from minimal_api.core.exceptions import ErrosDeValidacao
from minimal_api.models import Perfil, Veiculo
from minimal_api.services import VeiculoServicoProtocol, validate_veiculo

router = APIRouter()

ADMIN_OU_USUARIO = Depends(dependencies.require_perfil(Perfil.admin.value, Perfil.user.value))
SOMENTE_ADMIN = Depends(dependencies.require_perfil(Perfil.admin.value))

_ERROS = {400: {"model": schemas.response_schemas.ErrosDeValidacaoSchema}}


def _get_or_404(service: VeiculoServicoProtocol, veiculo_id: int) -> Veiculo:
    veiculo = service.find_by_id(veiculo_id)
    if veiculo is None:
        raise HTTPException(status_code=404, detail="Veículo não encontrado")
    return veiculo


@router.post(
    "",
    response_model=schemas.veiculo_schemas.VeiculoReadSchema,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROS,
    dependencies=[ADMIN_OU_USUARIO],
)
def create_veiculo(
    *,
    response: Response,
    veiculo_in: schemas.veiculo_schemas.VeiculoSchema,
    service: VeiculoServicoProtocol = Depends(dependencies.get_veiculo_service),
):
    """
    Create a new vehicle.
    """
    mensagens = validate_veiculo(veiculo_in)
    if mensagens:
        raise ErrosDeValidacao(mensagens)

    veiculo = Veiculo(nome=veiculo_in.nome, marca=veiculo_in.marca, ano=veiculo_in.ano)
    service.add(veiculo)

    response.headers["Location"] = f"/veiculos/{veiculo.id}"
    return veiculo


@router.get(
    "",
    response_model=List[schemas.veiculo_schemas.VeiculoReadSchema],
    responses=_ERROS,
    dependencies=[ADMIN_OU_USUARIO],
)
def get_veiculos(
    *,
    pagina: int = Query(1, ge=1),
    nome: Optional[str] = None,
    marca: Optional[str] = None,
    service: VeiculoServicoProtocol = Depends(dependencies.get_veiculo_service),
):
    """
    Retrieve one page of vehicles, optionally filtered by name or brand.
    """
    return service.list(page=pagina, nome=nome, marca=marca)


@router.get(
    "/{veiculo_id}",
    response_model=schemas.veiculo_schemas.VeiculoReadSchema,
    dependencies=[ADMIN_OU_USUARIO],
)
def get_veiculo_by_id(
    *,
    veiculo_id: int,
    service: VeiculoServicoProtocol = Depends(dependencies.get_veiculo_service),
):
    """
    Get a specific vehicle by ID.
    """
    return _get_or_404(service, veiculo_id)


@router.put(
    "/{veiculo_id}",
    response_model=schemas.veiculo_schemas.VeiculoReadSchema,
    responses=_ERROS,
    dependencies=[SOMENTE_ADMIN],
)
def update_veiculo(
    *,
    veiculo_id: int,
    veiculo_in: schemas.veiculo_schemas.VeiculoSchema,
    service: VeiculoServicoProtocol = Depends(dependencies.get_veiculo_service),
):
    """
    Replace name, brand and year of a vehicle.
    """
    veiculo = _get_or_404(service, veiculo_id)

    mensagens = validate_veiculo(veiculo_in)
    if mensagens:
        raise ErrosDeValidacao(mensagens)

    veiculo.nome = veiculo_in.nome
    veiculo.marca = veiculo_in.marca
    veiculo.ano = veiculo_in.ano
    service.update(veiculo)

    return veiculo


@router.delete(
    "/{veiculo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[SOMENTE_ADMIN],
)
def delete_veiculo(
    *,
    veiculo_id: int,
    service: VeiculoServicoProtocol = Depends(dependencies.get_veiculo_service),
):
    """
    Delete a vehicle.
    """
    veiculo = _get_or_404(service, veiculo_id)
    service.delete(veiculo)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
