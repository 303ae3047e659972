from pydantic import BaseModel, Field
from typing import List

class HomeSchema(BaseModel):
    """Landing document returned by the root endpoint."""
    mensagem: str = "Bem vindo a API de veículos - Minimal API"
    doc: str = "/swagger"

class ErrosDeValidacaoSchema(BaseModel):
    """Body of every 400 response."""
    mensagens: List[str] = Field(default_factory=list)
