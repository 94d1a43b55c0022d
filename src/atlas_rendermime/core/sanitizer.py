# src/atlas_rendermime/core/sanitizer.py
"""
Sanitizador HTML do Atlas RenderMime.

Este módulo implementa a política de sanitização aplicada a conteúdo
SANITIZABLE (HTML, Markdown convertido) quando a renderização não é
confiável.

A política é baseada em **allowlist**: apenas elementos e atributos
explicitamente permitidos sobrevivem. A sanitização é preservadora de
conteúdo sempre que possível.

Política de sanitização (v2):
    - elementos de `strip_tags` (ex.: `<script>`, `<iframe>`, `<style>`,
      animações SVG) são removidos junto com todo o seu conteúdo
    - elementos fora de `allowed_tags` são desembrulhados: a tag some,
      o conteúdo permanece
    - atributos fora de `allowed_attributes` são removidos
      (inclui todos os handlers `on*`); `data-*` e `aria-*` são mantidos
    - atributos de URL com esquemas bloqueados (`javascript:`,
      `vbscript:`) são removidos, inclusive em listas `a;b` (SMIL)

Exemplo:
    `<h1>foo <script>x=1</script></h1>` → `<h1>foo </h1>`

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Nenhum elemento listado em `strip_tags` sobrevive
    - Nenhum elemento fora de `allowed_tags` sobrevive como tag
    - Markup permitido não é escapado

Limites explícitos:
    - Não valida HTML
    - Não resolve referências relativas (ver `core.resolver`)
    - Não decide quando sanitizar (responsabilidade do Engine/Renderer)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from bs4 import BeautifulSoup


# html.parser normaliza nomes de tags e atributos para minúsculas
DEFAULT_STRIP_TAGS: Tuple[str, ...] = (
    "script",
    "style",
    "link",
    "iframe",
    "frame",
    "frameset",
    "object",
    "embed",
    "applet",
    "base",
    "meta",
    "animate",
    "set",
    "animatemotion",
    "animatetransform",
)

DEFAULT_ALLOWED_TAGS: Tuple[str, ...] = (
    # texto e estrutura
    "a", "abbr", "b", "blockquote", "br", "cite", "code", "dd", "del",
    "details", "dfn", "div", "dl", "dt", "em", "figcaption", "figure",
    "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i", "img", "ins", "kbd",
    "li", "mark", "ol", "p", "pre", "q", "s", "samp", "small", "span",
    "strong", "sub", "summary", "sup", "u", "ul", "var",
    # tabelas
    "caption", "col", "colgroup", "table", "tbody", "td", "tfoot", "th",
    "thead", "tr",
    # SVG estático
    "svg", "g", "path", "rect", "circle", "ellipse", "line", "polyline",
    "polygon", "text", "tspan", "defs", "lineargradient",
    "radialgradient", "stop", "title", "desc",
)

DEFAULT_ALLOWED_ATTRIBUTES: Tuple[str, ...] = (
    "alt", "title", "class", "id", "href", "src", "width", "height",
    "align", "colspan", "rowspan", "start", "type", "dir", "lang", "open",
    "cite", "datetime",
    # SVG
    "xmlns", "viewbox", "preserveaspectratio", "fill", "stroke",
    "stroke-width", "d", "x", "y", "x1", "y1", "x2", "y2", "cx", "cy",
    "r", "rx", "ry", "points", "transform", "offset", "stop-color",
    "font-size", "text-anchor",
)

DEFAULT_URL_ATTRIBUTES: Tuple[str, ...] = (
    "href",
    "src",
    "action",
    "formaction",
    "xlink:href",
    "background",
    "poster",
    # valores de animação SMIL
    "values",
    "to",
    "from",
    "by",
)

DEFAULT_BLOCKED_SCHEMES: Tuple[str, ...] = ("javascript", "vbscript")

_ATTRIBUTE_PREFIXES: Tuple[str, ...] = ("data-", "aria-")

_CONFIG_KEYS: Tuple[str, ...] = (
    "strip_tags",
    "allowed_tags",
    "allowed_attributes",
    "url_attributes",
    "blocked_schemes",
)

# navegadores ignoram espaços e caracteres de controle dentro do esquema
_URL_NOISE = re.compile(r"[\x00-\x20]+")


@dataclass(frozen=True)
class Sanitizer:
    """Reduz fragmentos HTML à allowlist de elementos e atributos."""

    strip_tags: Tuple[str, ...] = DEFAULT_STRIP_TAGS
    allowed_tags: Tuple[str, ...] = DEFAULT_ALLOWED_TAGS
    allowed_attributes: Tuple[str, ...] = DEFAULT_ALLOWED_ATTRIBUTES
    url_attributes: Tuple[str, ...] = DEFAULT_URL_ATTRIBUTES
    blocked_schemes: Tuple[str, ...] = DEFAULT_BLOCKED_SCHEMES

    @classmethod
    def from_config(cls, section: Mapping[str, Any]) -> "Sanitizer":
        """Constrói um Sanitizer a partir da seção `sanitizer` da configuração."""
        kwargs: Dict[str, Tuple[str, ...]] = {}
        for key in _CONFIG_KEYS:
            if key in section:
                kwargs[key] = tuple(str(v).lower() for v in section[key])
        return cls(**kwargs)

    def is_blocked_url(self, url: str) -> bool:
        cleaned = _URL_NOISE.sub("", url).lower()
        scheme, sep, _ = cleaned.partition(":")
        return bool(sep) and scheme in self.blocked_schemes

    def _is_blocked_value(self, value: str) -> bool:
        return any(self.is_blocked_url(part) for part in value.split(";"))

    def _is_allowed_attribute(self, name: str) -> bool:
        return name in self.allowed_attributes or name.startswith(_ATTRIBUTE_PREFIXES)

    def sanitize(self, markup: str) -> str:
        soup = BeautifulSoup(markup, "html.parser")

        for tag in soup.find_all(True):
            # descendentes de uma subárvore já removida
            if tag.decomposed:
                continue
            if tag.name in self.strip_tags:
                tag.decompose()
                continue
            if tag.name not in self.allowed_tags:
                tag.unwrap()
                continue

            for attr in list(tag.attrs):
                name = attr.lower()
                value = tag[attr]
                if not self._is_allowed_attribute(name):
                    del tag[attr]
                elif name in self.url_attributes and isinstance(value, str) and self._is_blocked_value(value):
                    del tag[attr]

        return str(soup)
