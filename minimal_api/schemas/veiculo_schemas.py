from pydantic import BaseModel, ConfigDict, Field

# --- Vehicle Schemas ---

class VeiculoSchema(BaseModel):
    """Body for creating or replacing a vehicle. Missing fields fall through to validation."""
    nome: str = Field("", description="Vehicle name, at least 3 characters")
    marca: str = Field("", description="Brand, at least 3 characters")
    ano: int = Field(0, description="Model year between 1900 and the current year")

class VeiculoReadSchema(BaseModel):
    id: int
    nome: str
    marca: str
    ano: int

    model_config = ConfigDict(from_attributes=True)
