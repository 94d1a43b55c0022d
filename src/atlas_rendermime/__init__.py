# src/atlas_rendermime/__init__.py
"""
Atlas RenderMime — renderização segura de bundles multi-representação.

Um bundle mapeia mimetypes para representações do mesmo valor lógico
(`text/plain`, `text/html`, `application/json`, `image/png`, ...). O
Atlas RenderMime escolhe uma única representação pela ordem de
precedência e a transforma em um artefato (`RenderResult`), aplicando
uma política de confiança que impede conteúdo não confiável de executar
código.

Arquitetura em alto nível:
    - core.registry  → Safety, RenderResult, protocolo Renderer, RendererRegistry
    - core.engine    → Selector, defaults e a fachada RenderMime
    - core.sanitizer → remoção de subárvores e atributos ativos
    - core.resolver  → resolução de referências relativas
    - core.config    → configuração declarativa (YAML/JSON)
    - renderers      → Renderers embutidos por mimetype

Limites explícitos:
    - Não gerencia widgets, DOM ou persistência
    - Não realiza I/O; bundles chegam prontos
"""

from .core.engine import DEFAULT_ORDER, RenderMime, default_registry
from .core.errors import RenderErrorPayload
from .core.registry import Renderer, RendererRegistry, RenderOptions, RenderResult, Safety
from .core.resolver import BaseUrlResolver, Resolver
from .core.sanitizer import Sanitizer

__all__ = [
    "BaseUrlResolver",
    "DEFAULT_ORDER",
    "RenderErrorPayload",
    "RenderMime",
    "RenderOptions",
    "RenderResult",
    "Renderer",
    "RendererRegistry",
    "Resolver",
    "Safety",
    "Sanitizer",
    "default_registry",
]
