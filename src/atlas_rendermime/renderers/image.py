# src/atlas_rendermime/renderers/image.py
"""
Renderers de imagem (SAFE).

Imagens são embutidas como `data:` URI dentro de `<img>`; nada é
decodificado aqui além da validação do base64. SVG também é entregue
via `<img>`, contexto no qual scripts embutidos não executam.
"""

from __future__ import annotations

from typing import Any
import base64
import binascii
import re

from atlas_rendermime.core.exceptions import MalformedBundleEntry
from atlas_rendermime.core.registry.types import RenderOptions, RenderResult, Safety

from .base import coerce_text


_WHITESPACE = re.compile(r"\s+")


def _image_result(mimetype: str, payload: str, trusted: bool) -> RenderResult:
    return RenderResult(
        mimetype=mimetype,
        html=f"<img src=\"data:{mimetype};base64,{payload}\">",
        text=f"[{mimetype}]",
        trusted=trusted,
    )


class ImageRenderer:
    """PNG/JPEG/GIF em base64 (bytes crus também são aceitos)."""

    safety = Safety.SAFE

    def render(self, value: Any, options: RenderOptions) -> RenderResult:
        if isinstance(value, (bytes, bytearray)):
            payload = base64.b64encode(bytes(value)).decode("ascii")
        else:
            payload = _WHITESPACE.sub("", coerce_text(value, options.mimetype))
            try:
                base64.b64decode(payload, validate=True)
            except (binascii.Error, ValueError) as exc:
                raise MalformedBundleEntry(
                    message=f"Payload base64 inválido para {options.mimetype}",
                    details={"mimetype": options.mimetype, "reason": str(exc)},
                    hint="Codifique a imagem em base64 antes de montar o bundle.",
                ) from exc
        return _image_result(options.mimetype, payload, options.trusted)


class SVGRenderer:
    safety = Safety.SAFE

    def render(self, value: Any, options: RenderOptions) -> RenderResult:
        source = coerce_text(value, options.mimetype)
        payload = base64.b64encode(source.encode("utf-8")).decode("ascii")
        return _image_result(options.mimetype, payload, options.trusted)
