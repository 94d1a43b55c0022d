# src/atlas_rendermime/renderers/text.py
"""
Renderers textuais (SAFE).

- text/plain → `<pre>` escapado, sem sequências ANSI.
- text/latex → fonte preservada para um typesetter externo.

Nenhum dos dois interpreta markup do valor: todo conteúdo é escapado.
"""

from __future__ import annotations

from typing import Any

from atlas_rendermime.core.registry.types import RenderOptions, RenderResult, Safety

from .base import coerce_text, escape, strip_ansi


class TextRenderer:
    """Texto puro; catch-all de menor precedência."""

    safety = Safety.SAFE

    def render(self, value: Any, options: RenderOptions) -> RenderResult:
        text = strip_ansi(coerce_text(value, options.mimetype))
        return RenderResult(
            mimetype=options.mimetype,
            html=f"<pre>{escape(text)}</pre>",
            text=text,
            trusted=options.trusted,
        )


class LatexRenderer:
    """Fonte LaTeX; a composição tipográfica fica a cargo da UI."""

    safety = Safety.SAFE

    def render(self, value: Any, options: RenderOptions) -> RenderResult:
        source = coerce_text(value, options.mimetype).strip()
        return RenderResult(
            mimetype=options.mimetype,
            html=f"<div class=\"latex\">{escape(source)}</div>",
            text=source,
            trusted=options.trusted,
        )
