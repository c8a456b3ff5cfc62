# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import os
from dataclasses import dataclass
from dotenv import load_dotenv

"""
Central de configurações (Settings) do site do manual.


- Carrega variáveis do .env (app/env/log/cors/docs/chrome).
- Fornece defaults seguros e tipados via dataclass.
- Expõe `settings` como singleton para uso em toda a app.
"""

load_dotenv()

@dataclass
class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "Code::Blocks Manual")
    APP_ENV: str = os.getenv("APP_ENV", "local")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))

    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    # PDFs servidos em /docs
    DOCS_DIR: str = os.getenv("DOCS_DIR", "docs")

    SITE_NAME: str = os.getenv("SITE_NAME", "Code::Blocks")
    SITE_FOOTER: str = os.getenv(
    "SITE_FOOTER",
    "Code::Blocks, the open source, cross-platform IDE",
)

settings = Settings()
