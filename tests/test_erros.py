# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
"""
Falhas do banco viram 500 com mensagem genérica por endpoint.
"""
import logging
import pytest


@pytest.mark.parametrize("metodo,caminho,corpo,esperado", [
    ("get", "/questoes", None, "Erro ao buscar questões"),
    ("get", "/questoes/1", None, "Erro interno do servidor"),
    ("post", "/questoes", {"enunciado": "a", "disciplina": "b", "tema": "c", "nivel": "d"}, "Erro ao criar questão"),
    ("put", "/questoes/1", {"tema": "x"}, "Erro ao atualizar questão"),
    ("delete", "/questoes/1", None, "Erro ao excluir questão"),
    ("get", "/usuarios", None, "Erro ao buscar usuários"),
    ("get", "/usuarios/1", None, "Erro ao buscar usuário"),
    ("get", "/usuarios/email/a@b.com", None, "Erro interno ao buscar usuário"),
    ("post", "/usuarios", {"nome": "a", "email": "b", "senha": "c"}, "Erro ao criar usuário"),
    ("put", "/usuarios/1", {"nome": "x"}, "Erro ao atualizar usuário"),
    ("delete", "/usuarios/1", None, "Erro ao excluir usuário"),
])
def test_falha_do_banco_retorna_500(client_quebrado, metodo, caminho, corpo, esperado):
    kwargs = {"json": corpo} if corpo is not None else {}
    response = client_quebrado.request(metodo.upper(), caminho, **kwargs)
    assert response.status_code == 500
    assert response.json() == {"erro": esperado}


def test_validacao_acontece_antes_do_banco(client_quebrado, banco_quebrado):
    response = client_quebrado.post("/questoes", json={"enunciado": "só isso"})
    assert response.status_code == 400
    assert banco_quebrado.chamadas == []


def test_busca_por_email_registra_diagnostico(client_quebrado, caplog):
    caplog.set_level(logging.ERROR, logger="usuarios")
    client_quebrado.get("/usuarios/email/a@b.com")
    registros = [r for r in caplog.records if r.name == "usuarios"]
    assert [r.getMessage() for r in registros] == ["usuario_email_error"]
    assert registros[0].email == "a@b.com"
    assert registros[0].exc_info is not None


def test_erro_interno_nao_vaza_detalhe(client_quebrado):
    response = client_quebrado.get("/questoes/1")
    assert "connection refused" not in response.text
