# src/atlas_rendermime/core/registry/renderer.py
"""
Contrato canônico de Renderer do Atlas RenderMime.

Este módulo define o protocolo formal que qualquer Renderer deve
satisfazer para ser registrado e invocado pelo Engine.

Um Renderer é a capacidade que transforma o valor de um único mimetype
em um artefato renderizável (`RenderResult`).

Responsabilidades de um Renderer:
    - declarar sua classificação de segurança (`safety`)
    - renderizar um valor de forma determinística
    - sanitizar o conteúdo quando a renderização não é confiável

Princípios fundamentais:
    - Renderers não conhecem o Engine nem o Registry
    - Renderers não decidem precedência
    - Conformidade é garantida por duck typing (@runtime_checkable)

Limites explícitos:
    - Não seleciona mimetypes
    - Não realiza I/O
    - Não mantém estado entre renderizações

Este módulo existe para garantir desacoplamento,
clareza contratual e testabilidade dos Renderers.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .types import RenderOptions, RenderResult, Safety


@runtime_checkable
class Renderer(Protocol):
    """
    Contrato canônico de um Renderer do Atlas RenderMime.

    Este protocolo define a interface mínima que qualquer Renderer deve
    implementar para ser aceito pelo `RendererRegistry`.

    Atributos obrigatórios:
        - safety: classificação de segurança (`Safety`)

    Decisões arquiteturais:
        - O protocolo não impõe herança, apenas conformidade estrutural
        - O dispatch ocorre por lookup no Registry, nunca por hierarquia
        - Renderers SANITIZABLE sanitizam quando `options.sanitizer` existe

    Invariantes:
        - `safety` é fixo após a construção
        - `render` não produz efeitos colaterais além do artefato
          (e das chamadas opcionais ao injector)

    Limites explícitos:
        - Não define política de fallback
        - Não registra eventos de log
    """
    safety: Safety

    def render(self, value: Any, options: RenderOptions) -> RenderResult:
        """Renderiza `value` e devolve o artefato correspondente."""
        ...
