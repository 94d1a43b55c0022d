# src/atlas_rendermime/core/registry/__init__.py
"""
# Registry Core — Atlas RenderMime

Este pacote define os **contratos canônicos** e as **estruturas fundamentais**
que descrevem o que pode ser renderizado e em que ordem.

## Componentes

- **types**
  - `Safety`: classificação de segurança de um Renderer
  - `RenderOptions`: opções imutáveis de uma renderização
  - `RenderResult`: artefato imutável devolvido à UI

- **renderer**
  - `Renderer` (Protocol): contrato mínimo que todo Renderer deve satisfazer

- **registry**
  - `RendererRegistry`: bindings mimetype → Renderer e ordem de precedência

## Invariantes

- Ordem e mapa de bindings são mantidos em lockstep
- Cada mimetype possui no máximo um Renderer
- Renderers são despachados por lookup, nunca por herança

## Limites Explícitos

- Não seleciona mimetypes (ver `core.engine.selector`)
- Não renderiza conteúdo
- Não depende de UI ou widgets
"""

from .registry import RendererRegistry
from .renderer import Renderer
from .types import Bundle, Injector, RenderOptions, RenderResult, Safety

__all__ = [
    "Bundle",
    "Injector",
    "RenderOptions",
    "RenderResult",
    "Renderer",
    "RendererRegistry",
    "Safety",
]
