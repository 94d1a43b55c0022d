# src/atlas_rendermime/core/engine/__init__.py
"""
Engine do Atlas RenderMime.

Este pacote contém a implementação responsável por **selecionar** e
**renderizar** a representação preferida de um bundle, respeitando a
ordem de precedência e a política de confiança.

Componentes principais:
    - selector → seleção determinística (first match wins)
    - defaults → Renderers embutidos e ordem padrão (valor explícito)
    - engine   → fachada `RenderMime` (sanitização, injector, clone, log)

Princípios fundamentais:
    - Seleção e renderização são responsabilidades separadas
    - A seleção opera sobre snapshot do Registry
    - Nenhuma falha de Renderer chega à UI como exceção

Invariantes:
    - Sem confiança, nenhum Renderer UNSAFE é invocado
    - Cada `render` invoca no máximo um Renderer, salvo com fallback habilitado

Limites explícitos:
    - Não gerencia árvore DOM/UI
    - Não realiza I/O de rede, arquivo ou kernel
"""

from .defaults import DEFAULT_ORDER, default_registry, default_renderers, registry_from_config
from .engine import RenderMime
from .selector import is_admissible, iter_candidates, select_mimetype

__all__ = [
    "DEFAULT_ORDER",
    "RenderMime",
    "default_registry",
    "default_renderers",
    "is_admissible",
    "iter_candidates",
    "registry_from_config",
    "select_mimetype",
]
