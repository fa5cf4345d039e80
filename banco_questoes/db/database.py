# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import Any, Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

"""
Gateway assíncrono do banco relacional via SQLAlchemy 2.0.


- `Database` guarda um único engine, criado na primeira utilização.
- Normaliza URLs `postgresql://` para o driver `postgresql+asyncpg://`.
- `execute()` roda um statement parametrizado e devolve as linhas como dicts.
- `ping()` faz a checagem de conectividade usada no startup.
"""

_ASYNCPG_PREFIX = "postgresql+asyncpg://"


def normalize_url(url: str) -> str:
    """Troca `postgres://`/`postgresql://` pelo driver asyncpg; demais URLs passam intactas."""
    for prefix in ("postgresql://", "postgres://"):
        if url.startswith(prefix):
            return _ASYNCPG_PREFIX + url[len(prefix):]
    return url


class Database:
    def __init__(self, url: str, **engine_kwargs: Any) -> None:
        self.url = normalize_url(url)
        self._engine_kwargs = engine_kwargs
        self._engine: Optional[AsyncEngine] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = create_async_engine(self.url, echo=False, **self._engine_kwargs)
        return self._engine

    async def execute(self, sql: str, params: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        """
        Executa um único statement em sua própria transação (commit ao final).
        Parâmetros vão sempre como binds nomeados (`:id`), nunca concatenados no SQL.
        """
        async with self.engine.begin() as conn:
            result = await conn.execute(text(sql), params or {})
            if not result.returns_rows:
                return []
            return [dict(r) for r in result.mappings().all()]

    async def ping(self) -> str:
        try:
            await self.execute("SELECT 1")
        except Exception as e:
            return str(e) or e.__class__.__name__
        return "ok"
