from pydantic import BaseModel

class LoginRequestSchema(BaseModel):
    email: str
    senha: str

class AdministradorLogadoSchema(BaseModel):
    email: str
    perfil: str
    token: str

class TokenPayloadSchema(BaseModel):
    email: str
    perfil: str
    role: str
