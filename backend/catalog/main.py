"""
Ponto de entrada da aplicação FastAPI.

Este módulo configura a aplicação FastAPI, inclui rotas, registra o
handler de erros de domínio e define o ciclo de vida (startup/shutdown).
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog.api.v1.router import api_router
from catalog.core.config import get_settings
from catalog.core.exceptions import CatalogError, ValidationError, errors_to_details
from catalog.core.logging import setup_logging, get_logger
from catalog.db.session import check_database_connection, engine
from catalog.schemas.health import HealthResponse

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gerencia o ciclo de vida da aplicação.

    Startup:
        - Configura logging
        - Verifica conexão com PostgreSQL

    Shutdown:
        - Fecha pool de conexões do banco
    """
    setup_logging()
    logger.info(f"Iniciando {settings.APP_NAME} em ambiente {settings.ENVIRONMENT}")

    success, error = await check_database_connection()
    if success:
        logger.info("Conexão com PostgreSQL estabelecida")
    else:
        logger.warning(f"PostgreSQL não disponível: {error}")

    yield

    logger.info(f"Encerrando {settings.APP_NAME}")
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description="API REST para catálogo de livros e autores",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.include_router(api_router)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Converte erros de domínio em ErrorResponse com o status correspondente."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Corpo ou parâmetros malformados viram ValidationError (400)."""
    error = ValidationError(
        "Dados de entrada inválidos",
        details=errors_to_details(exc.errors()),
    )
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_response().model_dump(),
    )


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Verifica status da aplicação",
)
async def health_check() -> HealthResponse:
    """
    Endpoint de healthcheck para monitoramento.

    Retorna status da aplicação e da conexão com o banco.
    """
    db_ok, _ = await check_database_connection()
    return HealthResponse(
        status="healthy" if db_ok else "degraded",
        app_name=settings.APP_NAME,
        environment=settings.ENVIRONMENT,
        database="ok" if db_ok else "unavailable",
    )
