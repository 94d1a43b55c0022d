# src/atlas_rendermime/core/registry/types.py
"""
Tipos canônicos do Atlas RenderMime.

Este módulo define as estruturas e enums fundamentais que padronizam
a comunicação entre Engine, Selector, Registry e Renderers.

Os tipos aqui definidos representam:
    - classificação de segurança de um Renderer
    - opções imutáveis entregues a um Renderer em cada renderização
    - artefato imutável produzido por uma renderização

Componentes principais:
    - Safety        → enum de classificação (SAFE, SANITIZABLE, UNSAFE)
    - RenderOptions → opções imutáveis de uma chamada de render
    - RenderResult  → artefato opaco devolvido à camada de UI

Invariantes:
    - Enums possuem valores textuais canônicos
    - RenderOptions e RenderResult são imutáveis
    - `RenderOptions.sanitizer` só é preenchido quando `trusted` é False
    - `RenderResult.text` é sempre preenchido

Limites explícitos:
    - Não renderiza conteúdo
    - Não seleciona mimetypes
    - Não contém política de segurança

Este módulo existe para garantir consistência
e clareza semântica entre os componentes do RenderMime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

if TYPE_CHECKING:  # pragma: no cover
    from atlas_rendermime.core.resolver import Resolver
    from atlas_rendermime.core.sanitizer import Sanitizer


# Bundle: mimetype -> representação do mesmo valor lógico
Bundle = Mapping[str, Any]

# Injector: callback(mimetype, value) para representações companheiras
Injector = Callable[[str, Any], None]


class Safety(str, Enum):
    """
    Classificação de segurança de um Renderer.

    A classificação é fixa na construção do Renderer e é a única
    informação de política que o Selector consulta.

    Valores definidos:
        - SAFE: sem risco de injeção, independente de confiança
          (imagens, texto puro, JSON)
        - SANITIZABLE: pode conter conteúdo ativo, mas é renderizável
          após remoção de construções perigosas (HTML, Markdown)
        - UNSAFE: executa código se renderizado diretamente
          (JavaScript); nunca renderizável a partir de dados não confiáveis

    Invariantes:
        - Todo Renderer possui exatamente uma classificação
        - O valor textual do enum é estável e canônico

    Limites explícitos:
        - Não define precedência
        - Não realiza sanitização
    """
    SAFE = "safe"
    SANITIZABLE = "sanitizable"
    UNSAFE = "unsafe"


@dataclass(frozen=True)
class RenderOptions:
    """
    Opções imutáveis entregues a um Renderer em uma renderização.

    Campos:
        - mimetype: mimetype selecionado para esta renderização
        - trusted: se o chamador garante a origem do bundle
        - resolver: colaborador opcional de resolução de referências relativas
        - sanitizer: sanitizador HTML; presente somente quando `trusted` é False
        - injector: callback opcional para representações companheiras

    Renderers SANITIZABLE devem sanitizar sempre que `sanitizer`
    estiver presente.
    """
    mimetype: str
    trusted: bool = False
    resolver: Optional["Resolver"] = None
    sanitizer: Optional["Sanitizer"] = None
    injector: Optional[Injector] = None


@dataclass(frozen=True)
class RenderResult:
    """Artefato de renderização (apenas apresentação)."""
    mimetype: str
    html: Optional[str]  # markup pronto para inserção (quando aplicável)
    text: str            # forma textual (sempre preenchida)
    trusted: bool = False
