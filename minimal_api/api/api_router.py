from fastapi import APIRouter
from .routes import administradores_routes, veiculos_routes

api_router = APIRouter()

api_router.include_router(administradores_routes.router, prefix="/administradores", tags=["Administradores"])

api_router.include_router(veiculos_routes.router, prefix="/veiculos", tags=["Veiculos"])
