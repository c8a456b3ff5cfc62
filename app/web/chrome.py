# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from html import escape
from app.core.config import settings

"""
Moldura compartilhada das páginas (cabeçalho/rodapé).


- `render_page(title, body)` envolve o corpo com <head>, header e footer.
- Texto do header/footer vem de settings (SITE_NAME / SITE_FOOTER).
- Sem links e sem estado por requisição; o corpo é inserido como está.
"""

def _header() -> str:
    return f'<header class="site-header">{escape(settings.SITE_NAME)}</header>'

def _footer() -> str:
    return f'<footer class="site-footer">{escape(settings.SITE_FOOTER)}</footer>'

def render_page(title: str, body: str) -> str:
    """
    Monta o documento completo. `title` é escapado; `body` já é HTML.
    """
    return "\n".join([
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{escape(title)}</title>",
        "</head>",
        "<body>",
        _header(),
        "<main>",
        body.strip(),
        "</main>",
        _footer(),
        "</body>",
        "</html>",
    ]) + "\n"
