# src/atlas_rendermime/core/engine/selector.py
"""
Seleção determinística de mimetype.

Este módulo implementa a regra de seleção utilizada pelo Engine para
escolher qual representação de um bundle será renderizada.

Algoritmo (first match wins):
    Para cada binding (mimetype, Renderer), na ordem de precedência:
        1. ignora se o mimetype não é chave do bundle
        2. ignora se o Renderer é UNSAFE e a renderização não é confiável
        3. caso contrário, o mimetype é admissível

Decisões arquiteturais:
    - A seleção opera sobre um snapshot de bindings, nunca sobre o
      Registry vivo
    - Entradas anteriores sempre superam entradas posteriores, mesmo
      que uma posterior seja "mais segura"
    - Renderers SAFE e SANITIZABLE são admissíveis sem confiança;
      a substituição de um UNSAFE é efeito emergente da ordem

Invariantes:
    - A mesma entrada sempre produz a mesma seleção
    - Sem confiança, um Renderer UNSAFE nunca é selecionado
    - Nenhum Renderer é invocado durante a seleção
    - Renderer com classificação desconhecida nunca é selecionado

Limites explícitos:
    - Não renderiza conteúdo
    - Não sanitiza conteúdo
    - Não registra eventos

Este módulo existe para garantir seleção previsível e explicável.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from atlas_rendermime.core.registry.renderer import Renderer
from atlas_rendermime.core.registry.types import Bundle, Safety


def is_admissible(renderer: Renderer, trusted: bool) -> bool:
    # classificação desconhecida (ex.: alterada após o registro) nunca é admissível
    try:
        safety = Safety(getattr(renderer, "safety", None))
    except ValueError:
        return False
    return trusted or safety is not Safety.UNSAFE


def iter_candidates(
    bundle: Bundle,
    bindings: Iterable[Tuple[str, Renderer]],
    trusted: bool,
) -> Iterator[Tuple[str, Renderer]]:
    """
    Gera todos os bindings admissíveis para o bundle, em ordem de precedência.

    Args:
        bundle (Bundle): Mapa mimetype → valor.
        bindings (Iterable[Tuple[str, Renderer]]): Snapshot ordenado do Registry.
        trusted (bool): Confiança declarada pelo chamador.

    Yields:
        Tuple[str, Renderer]: Pares (mimetype, Renderer) admissíveis.
    """
    for mimetype, renderer in bindings:
        if mimetype not in bundle:
            continue
        if not is_admissible(renderer, trusted):
            continue
        yield mimetype, renderer


def select_mimetype(
    bundle: Bundle,
    bindings: Iterable[Tuple[str, Renderer]],
    trusted: bool,
) -> Optional[str]:
    """Primeiro mimetype admissível, ou None quando nada é renderizável."""
    for mimetype, _ in iter_candidates(bundle, bindings, trusted):
        return mimetype
    return None
