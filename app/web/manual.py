# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
import logging
from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from app.web.chrome import render_page

"""
Página estática do manual (PDF em inglês e alemão).


- `GET /manual` devolve o HTML fixo, emoldurado pelo chrome compartilhado.
- `GET /manual.php` mantém o endereço antigo do site.
- Links relativos para `docs/manual_en.pdf` e `docs/manual_de.pdf` (servidos em /docs).
"""

log = logging.getLogger("manual")

router = APIRouter()

MANUAL_TITLE = "Manual"
MANUAL_EN_PATH = "docs/manual_en.pdf"
MANUAL_DE_PATH = "docs/manual_de.pdf"

MANUAL_BODY = f"""
<h1>{MANUAL_TITLE}</h1>

<p>
There's an on-going effort to write a manual for using Code::Blocks. This is a
community-driven effort and contributions/criticism/suggestions are welcomed.
</p>

<p>
The initial documentation had started as an internal project of
HighTec EDV-Systeme GmbH (www.hightec-rt.com) who is now
making it yet another contribution to the community.
</p>

<p>
The documentation is provided in English and German, in PDF format.
More formats will follow soon.
</p>

<p>
<a href="{MANUAL_EN_PATH}">English manual</a>
<a href="{MANUAL_DE_PATH}">German manual</a>
</p>
"""

# renderizado uma vez; toda requisição recebe o mesmo conteúdo
MANUAL_HTML = render_page(MANUAL_TITLE, MANUAL_BODY)


@router.get("/manual", response_class=HTMLResponse, summary="Página do manual")
async def manual_page() -> HTMLResponse:
    log.debug("serving manual page")
    return HTMLResponse(content=MANUAL_HTML)


@router.get("/manual.php", response_class=HTMLResponse, include_in_schema=False)
async def manual_page_legacy() -> HTMLResponse:
    return HTMLResponse(content=MANUAL_HTML)
