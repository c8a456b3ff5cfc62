# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.core.config import settings
from app.web.router import router_web
from pathlib import Path
import logging
import json

"""
Site do manual – FastAPI entrypoint.

- Cria a instância principal do FastAPI (title/version) e inclui as páginas na raiz.
- Garante a existência do diretório dos PDFs e o serve em /docs (StaticFiles).
- Move a UI do OpenAPI para /api/docs (o /docs pertence aos manuais).
- Configura CORS conforme settings (origens, headers, métodos).
- Expõe /health para diagnóstico rápido do ambiente.
"""

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
log = logging.getLogger("app")

start_server = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url=None,
    openapi_url="/api/openapi.json",
)

Path(settings.DOCS_DIR).mkdir(parents=True, exist_ok=True)
start_server.mount("/docs", StaticFiles(directory=settings.DOCS_DIR), name="docs")
log.info("Manuais servidos de %s", Path(settings.DOCS_DIR).resolve())

start_server.include_router(router_web)

def _normalize_cors(origins_setting):
    """
    Aceita: list[str], string JSON (ex: '["http://..."]') ou CSV (ex: 'http://...,http://...').
    Retorna sempre uma lista de strings (sem espaços) ou lista vazia.
    """
    if not origins_setting:
        return []
    if isinstance(origins_setting, (list, tuple)):
        return [o.strip() for o in origins_setting if o and o.strip()]
    if isinstance(origins_setting, str):
        s = origins_setting.strip()
        try:
            parsed = json.loads(s)
            if isinstance(parsed, list):
                return [o.strip() for o in parsed if o and o.strip()]
        except json.JSONDecodeError:
            pass
        return [o.strip() for o in s.split(",") if o and o.strip()]
    return []

origins = _normalize_cors(settings.CORS_ORIGINS)

if origins:
    start_server.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    log.info("CORS habilitado para: %s", origins)

@start_server.get("/health", tags=["Health"])
def health():
    return {"status": "ok", "env": settings.APP_ENV}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:start_server", host=settings.HOST, port=settings.PORT)
