"""
Atlas RenderMime — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Atlas RenderMime.
Falhas de renderização nunca propagam como exceção para a camada de UI:
o Engine as converte em payloads que devem ser

- explícitos
- serializáveis
- acionáveis

O pior resultado observável de uma renderização é "nada renderizado".
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderErrorPayload:
    """
    Payload canônico de erro do Atlas RenderMime.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao integrador
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Renderização
RENDERER_FAILED = "RENDERER_FAILED"
MALFORMED_BUNDLE_ENTRY = "MALFORMED_BUNDLE_ENTRY"
INVALID_RENDER_RESULT = "INVALID_RENDER_RESULT"

# Política de segurança
UNSAFE_RENDER_REFUSED = "UNSAFE_RENDER_REFUSED"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def renderer_failed(
    *,
    mimetype: str,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique a implementação do Renderer registrado para este mimetype.",
) -> RenderErrorPayload:
    return RenderErrorPayload(
        type=RENDERER_FAILED,
        message="Falha inesperada durante a renderização",
        details={
            "mimetype": mimetype,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def invalid_render_result(
    *,
    mimetype: str,
    received: str,
    hint: str = "Ajuste o Renderer para retornar RenderResult.",
) -> RenderErrorPayload:
    return RenderErrorPayload(
        type=INVALID_RENDER_RESULT,
        message="Renderer retornou tipo inválido",
        details={
            "mimetype": mimetype,
            "expected": "RenderResult",
            "received": received,
        },
        hint=hint,
    )
