# src/atlas_rendermime/renderers/base.py
"""
Utilitários compartilhados pelos Renderers embutidos.

- Normalização de valores textuais (str ou lista de fragmentos).
- Escape HTML e extração de texto de markup.
- NÃO decide política de segurança.
"""

from __future__ import annotations

from typing import Any
import html
import re

from bs4 import BeautifulSoup

from atlas_rendermime.core.exceptions import MalformedBundleEntry


_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def escape(s: Any) -> str:
    return html.escape("" if s is None else str(s))


def coerce_text(value: Any, mimetype: str) -> str:
    """
    Normaliza o valor de um mimetype textual.

    Aceita:
    - str
    - lista/tupla de str (fragmentos concatenados sem separador)
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return "".join(value)
    raise MalformedBundleEntry(
        message=f"Valor textual esperado para {mimetype}",
        details={"mimetype": mimetype, "value_type": type(value).__name__},
        hint="Forneça uma string ou lista de strings.",
    )


def strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE.sub("", text)


def markup_text(markup: str) -> str:
    """Texto visível de um fragmento HTML."""
    return BeautifulSoup(markup, "html.parser").get_text()
