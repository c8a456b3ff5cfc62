# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import APIRouter
from fastapi.responses import RedirectResponse
from app.web import manual

"""
Roteador das páginas do site.


- Inclui a página do manual e redireciona `/` para ela.
- Importado por `main.py` sem prefixo (links relativos dependem disso).
"""

router_web = APIRouter(tags=["pages"])

router_web.include_router(manual.router, prefix="")

@router_web.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    return RedirectResponse(url="/manual")
