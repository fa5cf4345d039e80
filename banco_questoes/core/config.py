# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import os
from dataclasses import dataclass
from dotenv import load_dotenv

"""
Central de configurações (Settings) da API de questões e usuários.


- Carrega variáveis do .env (app/db/log/servidor).
- Aceita `URL_BD` como alias legado de `DATABASE_URL`.
- Expõe `settings` como singleton; `create_app()` aceita outra instância.
"""

load_dotenv()

@dataclass
class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "API para questões e usuários")
    APP_AUTHOR: str = os.getenv("APP_AUTHOR", "Luick Eduardo Neres Costa")
    APP_ENV: str = os.getenv("APP_ENV", "local")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))


    DATABASE_URL: str = os.getenv("DATABASE_URL", os.getenv("URL_BD", ""))

settings = Settings()
