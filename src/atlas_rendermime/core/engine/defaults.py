# src/atlas_rendermime/core/engine/defaults.py
"""
Conjunto padrão de Renderers e ordem de precedência.

Os defaults são um **valor de configuração explícito**: cada chamada a
`default_registry` constrói um Registry novo, com instâncias novas de
Renderers. Não existe singleton de módulo; Engines e clones podem
divergir livremente.

Ordem padrão (mais preferido → menos preferido):
    application/javascript, text/javascript, text/html, text/markdown,
    text/latex, image/svg+xml, image/png, image/jpeg, image/gif,
    application/json, text/plain

`text/plain` é sempre o catch-all de menor precedência.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from atlas_rendermime.core.config.errors import UnknownMimetypeError
from atlas_rendermime.core.registry.registry import RendererRegistry
from atlas_rendermime.core.registry.renderer import Renderer
from atlas_rendermime.renderers import (
    HTMLRenderer,
    ImageRenderer,
    JSONRenderer,
    JavaScriptRenderer,
    LatexRenderer,
    MarkdownRenderer,
    SVGRenderer,
    TextRenderer,
)


DEFAULT_ORDER: Tuple[str, ...] = (
    "application/javascript",
    "text/javascript",
    "text/html",
    "text/markdown",
    "text/latex",
    "image/svg+xml",
    "image/png",
    "image/jpeg",
    "image/gif",
    "application/json",
    "text/plain",
)


def default_renderers() -> Dict[str, Renderer]:
    """Instâncias novas dos Renderers embutidos, indexadas por mimetype."""
    script = JavaScriptRenderer()
    image = ImageRenderer()
    return {
        "application/javascript": script,
        "text/javascript": script,
        "text/html": HTMLRenderer(),
        "text/markdown": MarkdownRenderer(),
        "text/latex": LatexRenderer(),
        "image/svg+xml": SVGRenderer(),
        "image/png": image,
        "image/jpeg": image,
        "image/gif": image,
        "application/json": JSONRenderer(),
        "text/plain": TextRenderer(),
    }


def default_registry(
    order: Optional[Sequence[str]] = None,
    disabled: Iterable[str] = (),
) -> RendererRegistry:
    """
    Constrói um Registry com os Renderers embutidos.

    Args:
        order (Optional[Sequence[str]]): Precedência desejada; `DEFAULT_ORDER` se omitida.
            Mimetypes embutidos ausentes da ordem não são registrados.
        disabled (Iterable[str]): Mimetypes a não registrar.

    Returns:
        RendererRegistry: Registry novo, independente de qualquer outro.

    Raises:
        UnknownMimetypeError: Se a ordem ou `disabled` citar mimetype sem Renderer embutido.
    """
    renderers = default_renderers()
    effective = list(DEFAULT_ORDER if order is None else order)
    skip = set(disabled)

    unknown = [mt for mt in effective + sorted(skip) if mt not in renderers]
    if unknown:
        raise UnknownMimetypeError(
            f"Mimetypes sem Renderer embutido: {unknown}"
        )

    registry = RendererRegistry()
    for mimetype in effective:
        if mimetype in skip:
            continue
        registry.add(mimetype, renderers[mimetype], len(registry))
    return registry


def registry_from_config(config: Mapping[str, Any]) -> RendererRegistry:
    """Registry a partir da seção `registry` de uma configuração resolvida."""
    section = config.get("registry") or {}
    return default_registry(
        order=section.get("order"),
        disabled=section.get("disabled") or (),
    )
