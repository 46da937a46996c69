"""
Repository base: execução de SQL parametrizado sobre a sessão do request.

Toda falha do SQLAlchemy vira QueryError; escritas são confirmadas com
commit ou desfeitas com rollback, nunca ficam pela metade.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping, Sequence

from sqlalchemy import Result, Row, TextClause
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import QueryError
from catalog.core.logging import get_logger

logger = get_logger(__name__)


class BaseRepository:
    """
    Repository base sobre um AsyncSession.

    Fornece:
    - fetch_all: todas as linhas de um SELECT, na ordem do banco
    - fetch_one: primeira linha de um SELECT (ou None)
    - execute: statement avulso, retorna o Result
    - transaction: delimita uma escrita (commit/rollback)
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def execute(
        self,
        statement: TextClause,
        params: Mapping[str, Any] | None = None,
    ) -> Result:
        """Executa o statement, convertendo falhas do banco em QueryError."""
        try:
            return await self.db.execute(statement, dict(params or {}))
        except SQLAlchemyError as exc:
            logger.error(f"Falha ao executar statement: {exc}")
            raise QueryError("Falha ao consultar o banco de dados") from exc

    async def fetch_all(
        self,
        statement: TextClause,
        params: Mapping[str, Any] | None = None,
    ) -> Sequence[Row]:
        result = await self.execute(statement, params)
        try:
            return result.all()
        except SQLAlchemyError as exc:
            logger.error(f"Falha ao ler linhas: {exc}")
            raise QueryError("Falha ao ler resultado do banco de dados") from exc

    async def fetch_one(
        self,
        statement: TextClause,
        params: Mapping[str, Any] | None = None,
    ) -> Row | None:
        result = await self.execute(statement, params)
        try:
            return result.first()
        except SQLAlchemyError as exc:
            logger.error(f"Falha ao ler linha: {exc}")
            raise QueryError("Falha ao ler resultado do banco de dados") from exc

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """
        Delimita uma escrita.

        Commit ao sair sem erro; rollback e propagação em qualquer falha.
        """
        try:
            yield
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.error(f"Falha ao confirmar escrita: {exc}")
            raise QueryError("Falha ao gravar no banco de dados") from exc
        except Exception:
            await self.db.rollback()
            raise
