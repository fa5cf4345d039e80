# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import logging
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from banco_questoes.core.config import Settings, settings as default_settings
from banco_questoes.core.logging import configure_logging
from banco_questoes.db.database import Database
from banco_questoes.api.deps import corpo_invalido
from banco_questoes.api.router import router_api

"""
API de questões e usuários – FastAPI entrypoint.

- `create_app()` monta a aplicação com o `Database` injetado em `app.state.db`.
- No startup faz um `SELECT 1`; o resultado vira `statusBD` em `GET /` (não bloqueia o boot).
- `run()` sobe o uvicorn na porta configurada (3000 por padrão).
"""

log = logging.getLogger("app")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)
    db = database if database is not None else Database(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        status_bd = await db.ping()
        if status_bd == "ok":
            log.info("db_connect_ok: Conexão com o banco de dados estabelecida com sucesso!")
        else:
            log.error("db_connect_error: Erro na conexão com o banco de dados: %s", status_bd)
        app.state.status_bd = status_bd
        yield

    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db
    app.state.status_bd = "ok"
    app.add_exception_handler(RequestValidationError, corpo_invalido)
    app.include_router(router_api)
    return app


app = create_app()


def run() -> None:
    log.info("server_start: Servidor rodando na porta %s", default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
