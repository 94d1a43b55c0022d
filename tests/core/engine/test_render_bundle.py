# tests/core/engine/test_render_bundle.py
"""
Testes de renderização ponta a ponta via `RenderMime.render`.

Este módulo valida o Engine com o Registry padrão, cobrindo:
- seleção por precedência com e sem confiança
- sanitização de HTML não confiável preservando a estrutura
- JSON pretty com indentação de dois espaços
- repasse do Resolver aos Renderers de markup
- bundles sem representação renderizável

Decisões arquiteturais:
    - Todos os testes utilizam o Engine real (sem mocks)
    - O resultado observado é sempre `RenderResult` ou `None`

Invariantes:
    - Conteúdo não confiável nunca executa código
    - Nenhuma falha propaga como exceção
"""

import pytest

try:
    from atlas_rendermime.core.engine.engine import RenderMime
    from atlas_rendermime.core.registry.types import RenderResult
    from atlas_rendermime.core.resolver import BaseUrlResolver
except Exception as e:  # noqa: BLE001
    RenderMime = None
    RenderResult = None
    BaseUrlResolver = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o Engine e seus colaboradores estejam disponíveis.

    Falha imediatamente quando `RenderMime` não pode ser importado,
    evitando falhas indiretas nos testes de renderização.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing RenderMime. Implement:\n"
            "- src/atlas_rendermime/core/engine/engine.py (RenderMime)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_untrusted_html_strips_script_but_keeps_structure(rendermime):
    """
    Verifica que HTML não confiável perde `<script>` e seu conteúdo,
    mantendo exatamente a estrutura `<h1>foo </h1>`.
    """
    _require_imports()
    result = rendermime.render({"text/html": "<h1>foo <script>x=1</script></h1>"})
    assert isinstance(result, RenderResult)
    assert result.mimetype == "text/html"
    assert result.html == "<h1>foo </h1>"
    assert result.trusted is False


def test_untrusted_html_strips_event_handlers_and_js_urls(rendermime):
    _require_imports()
    markup = '<a href="javascript:alert(1)" onclick="steal()">link</a><img src="x.png" onerror="x()">'
    result = rendermime.render({"text/html": markup})
    assert "onclick" not in result.html
    assert "onerror" not in result.html
    assert "javascript:" not in result.html
    assert "link" in result.html
    assert 'src="x.png"' in result.html


@pytest.mark.parametrize("mimetype", ["text/html", "text/markdown"])
def test_untrusted_svg_animation_cannot_set_javascript_href(rendermime, mimetype):
    _require_imports()
    markup = (
        '<svg><a><animate attributeName="href" values="javascript:alert(1)"/>'
        '<set attributeName="href" to="javascript:alert(2)"/><text>X</text></a></svg>'
    )
    result = rendermime.render({mimetype: markup})
    assert result.mimetype == mimetype
    assert "javascript:" not in result.html
    assert "<animate" not in result.html
    assert "<set" not in result.html
    assert "X" in result.html


def test_trusted_html_is_verbatim(rendermime):
    _require_imports()
    markup = '<h1 onclick="x()">foo <script>x=1</script></h1>'
    result = rendermime.render({"text/html": markup}, trusted=True)
    assert result.html == markup
    assert result.trusted is True


def test_json_is_pretty_printed(rendermime):
    _require_imports()
    result = rendermime.render({"application/json": {"foo": 1}})
    assert result.mimetype == "application/json"
    assert result.text == '{\n  "foo": 1\n}'


def test_untrusted_bundle_with_javascript_selects_image(rendermime, pixel_b64):
    """
    Verifica que a entrada UNSAFE (`text/javascript`) é ignorada sem
    confiança, mesmo precedendo `image/png` na ordem padrão.
    """
    _require_imports()
    bundle = {"text/plain": "foo", "text/javascript": "window.x=1", "image/png": pixel_b64}

    assert rendermime.preferred_mimetype(bundle) == "image/png"
    result = rendermime.render(bundle)
    assert result.mimetype == "image/png"
    assert result.html.startswith('<img src="data:image/png;base64,')


def test_trusted_bundle_with_javascript_selects_script(rendermime, pixel_b64):
    _require_imports()
    bundle = {"text/plain": "foo", "text/javascript": "window.x=1", "image/png": pixel_b64}
    result = rendermime.render(bundle, trusted=True)
    assert result.mimetype == "text/javascript"
    assert "window.x=1" in result.html


@pytest.mark.parametrize("trusted", [False, True])
def test_html_wins_over_plain_text_either_way(rendermime, trusted):
    _require_imports()
    bundle = {"text/plain": "foo", "text/html": "<h1>foo</h1>"}
    assert rendermime.preferred_mimetype(bundle, trusted=trusted) == "text/html"
    assert rendermime.render(bundle, trusted=trusted).html == "<h1>foo</h1>"


def test_markdown_and_latex_defaults(rendermime):
    _require_imports()
    assert rendermime.render({"text/markdown": "**x**", "text/plain": "x"}).html == "<p><strong>x</strong></p>"
    assert rendermime.render({"text/latex": "$x$"}).text == "$x$"


def test_unregistered_mimetypes_render_nothing(rendermime):
    _require_imports()
    assert rendermime.render({"application/x-unknown": "?"}) is None
    assert rendermime.render({}) is None
    assert rendermime.last_error is None
    assert rendermime.events[-1]["message"] == "nenhum mimetype renderizável"
    assert rendermime.events[-1]["level"] == "DEBUG"


def test_untrusted_only_javascript_renders_nothing(rendermime):
    _require_imports()
    assert rendermime.render({"application/javascript": "alert(1)"}) is None
    assert rendermime.last_error is None


def test_non_mapping_bundle_renders_nothing(rendermime):
    _require_imports()
    assert rendermime.render(["text/plain", "foo"]) is None
    assert rendermime.preferred_mimetype("text/plain") is None
    assert rendermime.events[-1]["level"] == "WARNING"
    assert rendermime.events[-1]["bundle_type"] == "list"


def test_resolver_rewrites_relative_references():
    _require_imports()
    engine = RenderMime(resolver=BaseUrlResolver("http://example.com/nb/doc.ipynb"))
    markup = '<img src="a.png"><a href="#top">t</a><a href="https://x.org/">x</a>'

    html = engine.render({"text/html": markup}).html
    assert 'src="http://example.com/nb/a.png"' in html
    assert 'href="#top"' in html
    assert 'href="https://x.org/"' in html

    md = engine.render({"text/markdown": "![alt](img/a.png)"}).html
    assert 'src="http://example.com/nb/img/a.png"' in md


def test_resolver_property_is_read_write(rendermime):
    _require_imports()
    assert rendermime.resolver is None
    resolver = BaseUrlResolver("http://example.com/")
    rendermime.resolver = resolver
    assert rendermime.resolver is resolver
    assert 'src="http://example.com/a.png"' in rendermime.render({"text/html": '<img src="a.png">'}).html


def test_sanitizer_is_only_provided_when_untrusted(rendermime, DummyRenderer):
    _require_imports()
    spy = DummyRenderer()
    rendermime.add_renderer("text/spy", spy)

    rendermime.render({"text/spy": 1})
    rendermime.render({"text/spy": 1}, trusted=True)

    (_, untrusted_opts), (_, trusted_opts) = spy.calls
    assert untrusted_opts.sanitizer is rendermime.sanitizer
    assert untrusted_opts.trusted is False
    assert trusted_opts.sanitizer is None
    assert trusted_opts.trusted is True
