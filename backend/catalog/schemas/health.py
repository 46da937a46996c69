"""
Schemas Pydantic para o endpoint de healthcheck.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """
    Resposta do endpoint de healthcheck.

    Attributes:
        status: Status da aplicação ("healthy" ou "degraded")
        app_name: Nome da aplicação
        environment: Ambiente atual (development, staging, production)
        database: Status da conexão com o banco ("ok" ou "unavailable")
    """

    status: str
    app_name: str
    environment: str
    database: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "app_name": "Book Catalog API",
                    "environment": "development",
                    "database": "ok",
                }
            ]
        }
    }
