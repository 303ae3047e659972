from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import time
import logging
from minimal_api.api.api_router import api_router
from minimal_api.core.config import settings
from minimal_api.core.exceptions import ErrosDeValidacao
from minimal_api.db.session import SessionLocal, create_tables
from minimal_api.schemas.response_schemas import HomeSchema
from minimal_api.seeds.initial_data import seed_database

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events"""
    logger.info(f"Starting {settings.PROJECT_NAME}...")

    create_tables()
    logger.info("Database tables ready")

    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()

    logger.info(f"{settings.PROJECT_NAME} started, docs at /swagger")

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Vehicle and administrator management API with JWT authentication.",
    version=settings.VERSION,
    docs_url="/swagger",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.4f}s")
    return response

@app.exception_handler(ErrosDeValidacao)
async def validation_messages_handler(request: Request, exc: ErrosDeValidacao):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"mensagens": exc.mensagens},
    )

# Malformed bodies and query parameters share the 400 message shape
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    mensagens = []
    for error in exc.errors():
        campo = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        mensagens.append(f"{campo}: {error.get('msg')}" if campo else str(error.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"mensagens": mensagens},
    )

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

app.include_router(api_router)

@app.get("/", response_model=HomeSchema, tags=["Home"])
async def read_root():
    """Landing document pointing at the interactive docs."""
    return HomeSchema()
