# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from banco_questoes.db.database import Database

"""
Dependências e respostas reutilizáveis da API.


- `get_db()` injeta o `Database` criado pela aplicação (`app.state.db`).
- `erro()`/`mensagem()` montam os corpos `{"erro": ...}` e `{"mensagem": ...}`.
- `corpo_invalido()` troca o 422 do FastAPI (JSON malformado, campo com tipo errado) pelo 400 `{"erro"}`.
"""

CAMPOS_FALTANDO = "Campos obrigatórios faltando"

def get_db(request: Request) -> Database:
    return request.app.state.db

def erro(status_code: int, texto: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"erro": texto})

def mensagem(texto: str, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"mensagem": texto})

async def corpo_invalido(request: Request, exc: RequestValidationError) -> JSONResponse:
    return erro(400, CAMPOS_FALTANDO)
