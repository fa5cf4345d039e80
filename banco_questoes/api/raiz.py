# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import APIRouter, Request

"""
Endpoint raiz: identificação da API e status do banco capturado no startup.
"""

router = APIRouter()

@router.get("/", summary="Identificação da API e status do banco")
async def raiz(request: Request) -> dict[str, str]:
    """
    `statusBD` é o resultado da checagem feita no startup; não é reavaliado por requisição.
    """
    settings = request.app.state.settings
    return {
        "message": settings.APP_NAME,
        "author": settings.APP_AUTHOR,
        "statusBD": request.app.state.status_bd,
    }
