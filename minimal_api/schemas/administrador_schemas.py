from pydantic import BaseModel, ConfigDict
from typing import Optional

# --- Administrator Schemas ---

class AdministradorCreateSchema(BaseModel):
    email: str = ""
    senha: str = ""
    perfil: Optional[str] = None

class AdministradorReadSchema(BaseModel):
    id: int
    email: str
    perfil: str

    model_config = ConfigDict(from_attributes=True)
