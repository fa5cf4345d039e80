# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import Any, List, Optional
from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel
from banco_questoes.api.deps import get_db, erro, mensagem, CAMPOS_FALTANDO
from banco_questoes.db.database import Database

"""
Endpoints de questões (CRUD sobre a tabela `questoes`).


- `GET /questoes` lista todas; `GET /questoes/{id}` detalha uma.
- `POST /questoes` cria (os 4 campos obrigatórios).
- `PUT /questoes/{id}` atualiza parcial: campo vazio/ausente mantém o valor gravado.
- `DELETE /questoes/{id}` exclui após checar existência.
"""

router = APIRouter()

NAO_ENCONTRADA = "Questão não encontrada"
CAMPOS = ("enunciado", "disciplina", "tema", "nivel")

# Schemas QuestaoIn/QuestaoOut
class QuestaoIn(BaseModel):
    enunciado: Optional[str] = None
    disciplina: Optional[str] = None
    tema: Optional[str] = None
    nivel: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "enunciado": "Quanto é 2+2?",
                "disciplina": "Matemática",
                "tema": "Aritmética",
                "nivel": "fácil"
            }
        }
    }

class QuestaoOut(BaseModel):
    id: int
    enunciado: str
    disciplina: str
    tema: str
    nivel: str


async def _buscar(db: Database, questao_id: str) -> Optional[dict[str, Any]]:
    # id vem como texto do path; int() inválido cai no 500 do próprio handler
    rows = await db.execute("SELECT * FROM questoes WHERE id = :id", {"id": int(questao_id)})
    return rows[0] if rows else None


@router.get("", responses={200: {"model": List[QuestaoOut]}}, summary="Listar questões")
async def listar_questoes(db: Database = Depends(get_db)):
    try:
        return await db.execute("SELECT * FROM questoes")
    except Exception:
        return erro(500, "Erro ao buscar questões")


@router.get("/{questao_id}", responses={200: {"model": QuestaoOut}}, summary="Detalhar uma questão")
async def obter_questao(
    questao_id: str = Path(..., description="ID da questão"),
    db: Database = Depends(get_db),
):
    try:
        row = await _buscar(db, questao_id)
        if not row:
            return mensagem(NAO_ENCONTRADA, 404)
        return row
    except Exception:
        return erro(500, "Erro interno do servidor")


@router.post("", status_code=201, summary="Criar questão")
async def criar_questao(
    payload: Optional[QuestaoIn] = None,
    db: Database = Depends(get_db),
):
    payload = payload or QuestaoIn()
    try:
        if not all(getattr(payload, c) for c in CAMPOS):
            return erro(400, CAMPOS_FALTANDO)
        await db.execute("""
            INSERT INTO questoes (enunciado, disciplina, tema, nivel)
            VALUES (:enunciado, :disciplina, :tema, :nivel)
        """, {c: getattr(payload, c) for c in CAMPOS})
        return mensagem("Questão criada com sucesso!", 201)
    except Exception:
        return erro(500, "Erro ao criar questão")


@router.put("/{questao_id}", summary="Atualizar questão (parcial)")
async def atualizar_questao(
    payload: Optional[QuestaoIn] = None,
    questao_id: str = Path(..., description="ID da questão"),
    db: Database = Depends(get_db),
):
    payload = payload or QuestaoIn()
    try:
        atual = await _buscar(db, questao_id)
        if not atual:
            return mensagem(NAO_ENCONTRADA, 404)

        # valor vazio/falsy não sobrescreve o gravado
        params: dict[str, Any] = {c: getattr(payload, c) or atual[c] for c in CAMPOS}
        params["id"] = int(questao_id)
        await db.execute("""
            UPDATE questoes
            SET enunciado = :enunciado, disciplina = :disciplina, tema = :tema, nivel = :nivel
            WHERE id = :id
        """, params)
        return mensagem("Questão atualizada com sucesso!")
    except Exception:
        return erro(500, "Erro ao atualizar questão")


@router.delete("/{questao_id}", summary="Excluir questão")
async def excluir_questao(
    questao_id: str = Path(..., description="ID da questão"),
    db: Database = Depends(get_db),
):
    try:
        if not await _buscar(db, questao_id):
            return mensagem(NAO_ENCONTRADA, 404)
        await db.execute("DELETE FROM questoes WHERE id = :id", {"id": int(questao_id)})
        return mensagem("Questão excluída com sucesso!")
    except Exception:
        return erro(500, "Erro ao excluir questão")
