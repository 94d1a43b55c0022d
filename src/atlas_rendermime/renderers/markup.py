# src/atlas_rendermime/renderers/markup.py
"""
Renderers de markup (SANITIZABLE).

Objetivo:
- text/html     → fragmento HTML
- text/markdown → HTML gerado pela biblioteca `markdown`

Regras:
- Renderização não confiável SEMPRE passa pelo Sanitizer
  (o de `options.sanitizer`, ou um Sanitizer padrão).
- Renderização confiável devolve o markup sem alteração.
- Com Resolver presente, referências relativas são reescritas
  depois da sanitização.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import markdown

from atlas_rendermime.core.registry.types import RenderOptions, RenderResult, Safety
from atlas_rendermime.core.resolver import resolve_references
from atlas_rendermime.core.sanitizer import Sanitizer

from .base import coerce_text, markup_text


def _finalize(markup: str, options: RenderOptions) -> RenderResult:
    if not options.trusted:
        sanitizer = options.sanitizer or Sanitizer()
        markup = sanitizer.sanitize(markup)
    if options.resolver is not None:
        markup = resolve_references(markup, options.resolver)
    return RenderResult(
        mimetype=options.mimetype,
        html=markup,
        text=markup_text(markup),
        trusted=options.trusted,
    )


class HTMLRenderer:
    safety = Safety.SANITIZABLE

    def render(self, value: Any, options: RenderOptions) -> RenderResult:
        return _finalize(coerce_text(value, options.mimetype), options)


class MarkdownRenderer:
    """Markdown → HTML; HTML bruto embutido no Markdown também é sanitizado."""

    safety = Safety.SANITIZABLE

    def __init__(self, extensions: Optional[Sequence[str]] = None):
        self.extensions = list(extensions) if extensions is not None else ["fenced_code", "tables"]

    def render(self, value: Any, options: RenderOptions) -> RenderResult:
        source = coerce_text(value, options.mimetype)
        converted = markdown.markdown(source, extensions=self.extensions)
        return _finalize(converted, options)
