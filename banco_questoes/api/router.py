# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import APIRouter
from banco_questoes.api import raiz, questoes, usuarios

"""
Roteador principal da API.


- Agrega os sub-routers (raiz, questoes, usuarios).
- Centraliza prefixos/tags; importado por `main.py`.
"""

router_api = APIRouter()

router_api.include_router(raiz.router,     prefix="",          tags=["status"])
router_api.include_router(questoes.router, prefix="/questoes", tags=["questoes"])
router_api.include_router(usuarios.router, prefix="/usuarios", tags=["usuarios"])
