from . import administrador_schemas, response_schemas, token_schemas, veiculo_schemas
