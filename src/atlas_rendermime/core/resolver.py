# src/atlas_rendermime/core/resolver.py
"""
Resolução de referências relativas.

O Resolver é um colaborador externo (não é lógica de renderização)
consultado por Renderers que embutem referências (HTML e Markdown)
para transformar caminhos relativos em referências absolutas contra
o documento vivo.

Componentes:
    - Resolver             → protocolo com a capacidade `resolve_url`
    - BaseUrlResolver      → implementação baseada em uma URL de documento
    - is_relative_reference → regra que decide o que é resolvível
    - resolve_references   → reescreve atributos `src`/`href` de um fragmento

Uma referência é considerada relativa quando não possui esquema nem
localização de rede e não é apenas um fragmento (`#secao`).

Limites explícitos:
    - Não realiza I/O nem valida se a referência existe
    - Não sanitiza markup
    - O Engine nunca interpreta o Resolver; apenas o repassa
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple, runtime_checkable
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup


REFERENCE_ATTRIBUTES: Tuple[str, ...] = ("src", "href")


@runtime_checkable
class Resolver(Protocol):
    """Resolve uma referência relativa contra o contexto do documento."""

    def resolve_url(self, url: str) -> str:
        ...


@dataclass(frozen=True)
class BaseUrlResolver:
    """Resolver que junta referências relativas à URL do documento."""

    base_url: str

    def resolve_url(self, url: str) -> str:
        return urljoin(self.base_url, url)


def is_relative_reference(url: str) -> bool:
    url = url.strip()
    if not url or url.startswith("#"):
        return False
    parts = urlsplit(url)
    return not parts.scheme and not parts.netloc


def resolve_references(markup: str, resolver: Resolver) -> str:
    """
    Reescreve referências relativas de um fragmento HTML.

    Apenas os atributos de `REFERENCE_ATTRIBUTES` são considerados.
    Referências absolutas, `data:` e fragmentos permanecem intactos.
    """
    soup = BeautifulSoup(markup, "html.parser")
    for attr in REFERENCE_ATTRIBUTES:
        for tag in soup.find_all(attrs={attr: True}):
            value = tag[attr]
            if isinstance(value, str) and is_relative_reference(value):
                tag[attr] = resolver.resolve_url(value)
    return str(soup)
