# src/atlas_rendermime/core/registry/registry.py
"""
Registro ordenado de Renderers por mimetype.

Este módulo define o `RendererRegistry`, responsável por manter os
bindings (mimetype → Renderer) e a ordem de precedência de renderização.

O registry mantém duas estruturas em lockstep:
    - um mapa mimetype → Renderer
    - uma lista de mimetypes, do mais preferido para o menos preferido

Responsabilidades do módulo:
    - Registrar, substituir e remover bindings
    - Preservar a ordem de precedência explicitamente
    - Expor snapshots imutáveis para o Selector e o Engine

Decisões arquiteturais:
    - A ordem é mantida separadamente da estrutura de armazenamento
    - Entradas malformadas são ignoradas (no-op com retorno False)
    - Ausência de mimetype nunca é erro (get → None, remove → no-op)
    - Iteração ocorre sobre snapshots, nunca sobre o estado vivo

Invariantes:
    - Todo mimetype da ordem possui exatamente um binding, e vice-versa
    - A ordem não contém duplicatas
    - Apenas objetos que satisfazem o protocolo `Renderer` são aceitos

Limites explícitos:
    - Não seleciona mimetypes (não é Selector)
    - Não renderiza conteúdo
    - Não registra eventos de log

Este módulo existe para garantir integridade estrutural
e previsibilidade na precedência de renderização.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .renderer import Renderer
from .types import Safety


Binding = Tuple[str, Renderer]


def _is_valid_mimetype(mimetype: object) -> bool:
    return isinstance(mimetype, str) and bool(mimetype.strip())


def _is_valid_renderer(renderer: object) -> bool:
    if not isinstance(renderer, Renderer):
        return False
    try:
        Safety(renderer.safety)
    except ValueError:
        return False
    return True


@dataclass
class RendererRegistry:
    """
    Registro canônico de Renderers ordenados por precedência.

    Esta classe mantém os bindings entre mimetypes e Renderers junto com
    a ordem de precedência utilizada pelo Selector. Mapa e ordem são
    sempre alterados juntos.

    Política de inserção (`add`):
        - sem `index`, um mimetype novo entra na posição 0
        - mimetype existente sem `index` é substituído na mesma posição
        - com `index`, o mimetype é (re)posicionado nesse índice
          com semântica de `list.insert`

    Invariantes:
        - `len(_order) == len(_renderers)`
        - `set(_order) == set(_renderers)`

    Limites explícitos:
        - Não valida o conteúdo de bundles
        - Não decide política de confiança
    """

    _renderers: Dict[str, Renderer] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, mimetype: str, renderer: Renderer, index: Optional[int] = None) -> bool:
        if not _is_valid_mimetype(mimetype) or not _is_valid_renderer(renderer):
            return False

        exists = mimetype in self._renderers
        self._renderers[mimetype] = renderer

        if exists:
            if index is None:
                return True
            self._order.remove(mimetype)

        self._order.insert(0 if index is None else index, mimetype)
        return True

    def remove(self, mimetype: str) -> bool:
        if mimetype not in self._renderers:
            return False
        del self._renderers[mimetype]
        self._order.remove(mimetype)
        return True

    def get(self, mimetype: str) -> Optional[Renderer]:
        return self._renderers.get(mimetype)

    def order(self) -> Iterator[str]:
        return iter(tuple(self._order))

    def snapshot(self) -> Tuple[Binding, ...]:
        return tuple((mt, self._renderers[mt]) for mt in self._order)

    def copy(self) -> "RendererRegistry":
        """Novo registry com mapa e ordem próprios (mesmas instâncias de Renderer)."""
        other = RendererRegistry()
        other._renderers = dict(self._renderers)
        other._order = list(self._order)
        return other

    def __contains__(self, mimetype: object) -> bool:
        return mimetype in self._renderers

    def __len__(self) -> int:
        return len(self._order)
