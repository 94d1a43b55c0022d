"""
Atlas RenderMime — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Atlas RenderMime.

Objetivo:
- Permitir que Renderers levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para RenderErrorPayload
- Evitar ValueError/RuntimeError genéricos dentro de Renderers

Regras:
- Exceções devem carregar apenas dados estruturados (serializáveis).
- O Engine captura estas exceções; elas nunca chegam à camada de UI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RenderMimeException(Exception):
    """Base class para exceções internas do RenderMime.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(frozen=True)
class MalformedBundleEntry(RenderMimeException):
    """Valor sob um mimetype não pode ser interpretado pelo Renderer."""


@dataclass(frozen=True)
class UnsafeRenderRefused(RenderMimeException):
    """Renderer UNSAFE foi invocado sem confiança."""
