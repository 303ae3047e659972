from datetime import date

from minimal_api.schemas.veiculo_schemas import VeiculoSchema

ANO_MINIMO = 1900


def validate_veiculo(veiculo_in: VeiculoSchema, current_year: int | None = None) -> list[str]:
    """Returns the validation messages for a vehicle body, empty when valid."""
    ano_maximo = current_year or date.today().year
    mensagens = []

    if not veiculo_in.nome or len(veiculo_in.nome) < 3:
        mensagens.append("O nome do veículo deve conter ao menos 3 caracteres.")

    if not veiculo_in.marca or len(veiculo_in.marca) < 3:
        mensagens.append("A marca do veículo deve conter ao menos 3 caracteres.")

    if veiculo_in.ano < ANO_MINIMO or veiculo_in.ano > ano_maximo:
        mensagens.append(f"O ano do veículo deve estar entre {ANO_MINIMO} e {ano_maximo}.")

    return mensagens
