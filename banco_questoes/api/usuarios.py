# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import logging
from typing import Any, List, Optional
from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel
from banco_questoes.api.deps import get_db, erro, mensagem, CAMPOS_FALTANDO
from banco_questoes.db.database import Database

"""
Endpoints de usuários (CRUD sobre a tabela `usuarios`).


- `GET /usuarios` lista por id; `GET /usuarios/{id}` e `GET /usuarios/email/{email}` detalham.
- `POST`/`PUT`/`DELETE` seguem as mesmas regras de questões (nome, email, senha).
- Senha é gravada e devolvida em texto puro; não há hash nesta camada.
"""

router = APIRouter()
log = logging.getLogger("usuarios")

NAO_ENCONTRADO = "Usuário não encontrado"
CAMPOS = ("nome", "email", "senha")

# Schemas UsuarioIn/UsuarioOut
class UsuarioIn(BaseModel):
    nome: Optional[str] = None
    email: Optional[str] = None
    senha: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "nome": "Maria Souza",
                "email": "maria@escola.com",
                "senha": "segredo123"
            }
        }
    }

class UsuarioOut(BaseModel):
    id: int
    nome: str
    email: str
    senha: str


async def _buscar(db: Database, usuario_id: str) -> Optional[dict[str, Any]]:
    # id vem como texto do path; int() inválido cai no 500 do próprio handler
    rows = await db.execute("SELECT * FROM usuarios WHERE id = :id", {"id": int(usuario_id)})
    return rows[0] if rows else None


@router.get("", responses={200: {"model": List[UsuarioOut]}}, summary="Listar usuários (ordenados por id)")
async def listar_usuarios(db: Database = Depends(get_db)):
    try:
        return await db.execute("SELECT * FROM usuarios ORDER BY id ASC")
    except Exception:
        return erro(500, "Erro ao buscar usuários")


@router.get("/email/{email}", responses={200: {"model": UsuarioOut}}, summary="Buscar usuário por e-mail")
async def obter_usuario_por_email(
    email: str = Path(..., description="E-mail do usuário"),
    db: Database = Depends(get_db),
):
    try:
        rows = await db.execute("SELECT * FROM usuarios WHERE email = :email", {"email": email})
        if not rows:
            return mensagem("Usuário não encontrado com esse e-mail", 404)
        return rows[0]
    except Exception:
        log.error("usuario_email_error", exc_info=True, extra={"email": email})
        return erro(500, "Erro interno ao buscar usuário")


@router.get("/{usuario_id}", responses={200: {"model": UsuarioOut}}, summary="Detalhar um usuário")
async def obter_usuario(
    usuario_id: str = Path(..., description="ID do usuário"),
    db: Database = Depends(get_db),
):
    try:
        row = await _buscar(db, usuario_id)
        if not row:
            return mensagem(NAO_ENCONTRADO, 404)
        return row
    except Exception:
        return erro(500, "Erro ao buscar usuário")


@router.post("", status_code=201, summary="Criar usuário")
async def criar_usuario(
    payload: Optional[UsuarioIn] = None,
    db: Database = Depends(get_db),
):
    payload = payload or UsuarioIn()
    try:
        if not all(getattr(payload, c) for c in CAMPOS):
            return erro(400, CAMPOS_FALTANDO)
        # sem checagem de e-mail duplicado; fica a cargo do banco
        await db.execute("""
            INSERT INTO usuarios (nome, email, senha)
            VALUES (:nome, :email, :senha)
        """, {c: getattr(payload, c) for c in CAMPOS})
        return mensagem("Usuário criado com sucesso!", 201)
    except Exception:
        log.error("usuario_create_error", exc_info=True, extra={"email": payload.email})
        return erro(500, "Erro ao criar usuário")


@router.put("/{usuario_id}", summary="Atualizar usuário (parcial)")
async def atualizar_usuario(
    payload: Optional[UsuarioIn] = None,
    usuario_id: str = Path(..., description="ID do usuário"),
    db: Database = Depends(get_db),
):
    payload = payload or UsuarioIn()
    try:
        atual = await _buscar(db, usuario_id)
        if not atual:
            return mensagem(NAO_ENCONTRADO, 404)

        params: dict[str, Any] = {c: getattr(payload, c) or atual[c] for c in CAMPOS}
        params["id"] = int(usuario_id)
        await db.execute("""
            UPDATE usuarios
            SET nome = :nome, email = :email, senha = :senha
            WHERE id = :id
        """, params)
        return mensagem("Usuário atualizado com sucesso!")
    except Exception:
        return erro(500, "Erro ao atualizar usuário")


@router.delete("/{usuario_id}", summary="Excluir usuário")
async def excluir_usuario(
    usuario_id: str = Path(..., description="ID do usuário"),
    db: Database = Depends(get_db),
):
    try:
        if not await _buscar(db, usuario_id):
            return mensagem(NAO_ENCONTRADO, 404)
        await db.execute("DELETE FROM usuarios WHERE id = :id", {"id": int(usuario_id)})
        return mensagem("Usuário excluído com sucesso!")
    except Exception:
        return erro(500, "Erro ao excluir usuário")
