# src/atlas_rendermime/renderers/data.py
"""
Renderer de dados estruturados (SAFE).

- application/json → JSON pretty (indent=2) em `<pre>` escapado.
- Publica a forma textual como companheira `text/plain` via injector.
- NÃO altera o payload.
"""

from __future__ import annotations

from typing import Any
import json

from atlas_rendermime.core.exceptions import MalformedBundleEntry
from atlas_rendermime.core.registry.types import RenderOptions, RenderResult, Safety

from .base import escape


def as_pretty_json(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


class JSONRenderer:
    safety = Safety.SAFE

    def render(self, value: Any, options: RenderOptions) -> RenderResult:
        try:
            text = as_pretty_json(value)
        except (TypeError, ValueError) as exc:
            raise MalformedBundleEntry(
                message=f"Valor não serializável como JSON em {options.mimetype}",
                details={
                    "mimetype": options.mimetype,
                    "value_type": type(value).__name__,
                    "reason": str(exc),
                },
                hint="Forneça um valor composto apenas por dict/list/str/número/bool/None.",
            ) from exc

        if options.injector is not None:
            options.injector("text/plain", text)

        return RenderResult(
            mimetype=options.mimetype,
            html=f"<pre>{escape(text)}</pre>",
            text=text,
            trusted=options.trusted,
        )
