# src/atlas_rendermime/renderers/script.py
"""
Renderer de JavaScript (UNSAFE).

O único comportamento significativo deste conteúdo é executar código,
portanto não existe caminho de sanitização. O Selector nunca o escolhe
para bundles não confiáveis; uma chamada direta sem confiança é recusada.
"""

from __future__ import annotations

from typing import Any

from atlas_rendermime.core.exceptions import UnsafeRenderRefused
from atlas_rendermime.core.registry.types import RenderOptions, RenderResult, Safety

from .base import coerce_text


class JavaScriptRenderer:
    safety = Safety.UNSAFE

    def render(self, value: Any, options: RenderOptions) -> RenderResult:
        if not options.trusted:
            raise UnsafeRenderRefused(
                message=f"{options.mimetype} exige renderização confiável",
                details={"mimetype": options.mimetype},
                hint="Marque o bundle como confiável ou remova o Renderer UNSAFE.",
            )
        source = coerce_text(value, options.mimetype)
        return RenderResult(
            mimetype=options.mimetype,
            html=f"<script type=\"{options.mimetype}\">{source}</script>",
            text=source,
            trusted=True,
        )
