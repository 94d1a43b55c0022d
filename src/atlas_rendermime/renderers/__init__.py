"""
Renderers embutidos do Atlas RenderMime.

Cada Renderer satisfaz o protocolo `core.registry.Renderer`
(atributo `safety` + método `render`) sem herança comum.
"""

from .data import JSONRenderer
from .image import ImageRenderer, SVGRenderer
from .markup import HTMLRenderer, MarkdownRenderer
from .script import JavaScriptRenderer
from .text import LatexRenderer, TextRenderer

__all__ = [
    "HTMLRenderer",
    "ImageRenderer",
    "JSONRenderer",
    "JavaScriptRenderer",
    "LatexRenderer",
    "MarkdownRenderer",
    "SVGRenderer",
    "TextRenderer",
]
