import enum

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class Perfil(str, enum.Enum):
    admin = "Admin"
    user = "User"

class Administrador(Base):
    __tablename__ = "administradores"
    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    email = Column("Email", String(255), unique=True, index=True, nullable=False)
    senha = Column("Senha", String(255), nullable=False)
    perfil = Column("Perfil", String(10), nullable=False, default=Perfil.user.value)

    def __repr__(self):
        return f"<Administrador {self.id} email={self.email} perfil={self.perfil}>"

class Veiculo(Base):
    __tablename__ = "veiculos"
    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    nome = Column("Nome", String(150), nullable=False)
    marca = Column("Marca", String(100), nullable=False)
    ano = Column("Ano", Integer, nullable=False)

    def __repr__(self):
        return f"<Veiculo {self.id} {self.marca} {self.nome} ({self.ano})>"
