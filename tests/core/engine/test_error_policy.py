# tests/core/engine/test_error_policy.py
"""
Testes da política de erro do Engine.

Este módulo valida o comportamento do Engine quando um Renderer falha,
com e sem `fallback_on_error`.

Os testes asseguram que:
- exceções de Renderers nunca propagam para o chamador
- a falha é convertida em RenderErrorPayload exposto em `last_error`
- sem fallback, a falha resulta em "nada renderizado"
- com fallback, o próximo candidato admissível é renderizado
- retornos que não são RenderResult são tratados como falha
- mutações do Registry durante a renderização não são observadas

Decisões arquiteturais:
    - A política é controlada por construção (ou configuração)
    - O Engine não faz retry do mesmo Renderer

Invariantes:
    - `last_error` é reiniciado a cada chamada de `render`
    - Toda falha gera um evento ERROR com o payload serializado
"""

import pytest

try:
    from atlas_rendermime.core.engine.engine import RenderMime
    from atlas_rendermime.core.errors import (
        INVALID_RENDER_RESULT,
        MALFORMED_BUNDLE_ENTRY,
        RENDERER_FAILED,
        RenderErrorPayload,
    )
    from atlas_rendermime.core.exceptions import RenderMimeException
except Exception as e:  # noqa: BLE001
    RenderMime = None
    RenderErrorPayload = None
    RenderMimeException = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que Engine, catálogo de erros e exceções tipadas estejam disponíveis.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing engine/error modules. Implement:\n"
            "- src/atlas_rendermime/core/engine/engine.py (RenderMime)\n"
            "- src/atlas_rendermime/core/errors.py (RenderErrorPayload)\n"
            "- src/atlas_rendermime/core/exceptions.py (RenderMimeException)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_failing_renderer_renders_nothing_by_default(rendermime, DummyRenderer):
    """
    Verifica que, sem fallback, a falha do Renderer preferido resulta em None.

    Invariantes:
        - Nenhuma exceção propaga
        - `last_error` é RENDERER_FAILED com mimetype e tipo da exceção
        - Um evento ERROR é registrado
    """
    _require_imports()
    rendermime.add_renderer("text/foo", DummyRenderer(fail_with=RuntimeError("boom")))

    result = rendermime.render({"text/foo": 1, "text/plain": "fallback"})

    assert result is None
    err = rendermime.last_error
    assert isinstance(err, RenderErrorPayload)
    assert err.type == RENDERER_FAILED
    assert err.details["mimetype"] == "text/foo"
    assert err.details["exc_type"] == "RuntimeError"
    assert err.details["exc_message"] == "boom"

    event = rendermime.events[-1]
    assert event["level"] == "ERROR"
    assert event["mimetype"] == "text/foo"
    assert event["error"] == err.to_dict()


def test_fallback_renders_next_candidate(DummyRenderer):
    _require_imports()
    engine = RenderMime(fallback_on_error=True)
    engine.add_renderer("text/foo", DummyRenderer(fail_with=RuntimeError("boom")))

    result = engine.render({"text/foo": 1, "text/plain": "fallback"})

    assert result is not None
    assert result.mimetype == "text/plain"
    assert result.text == "fallback"
    assert engine.last_error.type == RENDERER_FAILED


def test_malformed_entry_maps_to_catalog_code(rendermime):
    _require_imports()
    assert rendermime.render({"application/json": {"s": {1, 2}}}) is None
    err = rendermime.last_error
    assert err.type == MALFORMED_BUNDLE_ENTRY
    assert err.details["mimetype"] == "application/json"
    assert err.hint


def test_malformed_entry_with_fallback_uses_plain_text(pixel_b64):
    _require_imports()
    engine = RenderMime(fallback_on_error=True)
    result = engine.render({"image/png": "not base64!!", "text/plain": "[image]"})
    assert result.mimetype == "text/plain"
    assert engine.last_error.type == MALFORMED_BUNDLE_ENTRY


def test_custom_exception_subclass_uses_class_name(rendermime, DummyRenderer):
    _require_imports()

    class QuotaExceeded(RenderMimeException):
        pass

    exc = QuotaExceeded(message="quota", details={"limit": 3}, hint="reduza o payload")
    rendermime.add_renderer("text/foo", DummyRenderer(fail_with=exc))

    assert rendermime.render({"text/foo": 1}) is None
    err = rendermime.last_error
    assert err.type == "QuotaExceeded"
    assert err.details == {"limit": 3, "mimetype": "text/foo"}
    assert err.hint == "reduza o payload"


def test_invalid_render_result_is_a_failure(rendermime):
    _require_imports()

    class BadRenderer:
        safety = "safe"

        def render(self, value, options):
            return "<p>not a RenderResult</p>"

    rendermime.add_renderer("text/bad", BadRenderer())
    assert rendermime.render({"text/bad": 1}) is None
    err = rendermime.last_error
    assert err.type == INVALID_RENDER_RESULT
    assert err.details["received"] == "str"


def test_last_error_is_reset_on_each_render(rendermime, DummyRenderer):
    _require_imports()
    rendermime.add_renderer("text/foo", DummyRenderer(fail_with=ValueError("x")))
    rendermime.render({"text/foo": 1})
    assert rendermime.last_error is not None

    rendermime.render({"text/plain": "ok"})
    assert rendermime.last_error is None


def test_registry_mutation_during_render_is_not_observed(DummyRenderer):
    """
    Verifica que a renderização opera sobre o snapshot tirado na entrada.

    O Renderer preferido remove o binding de `text/plain` e falha; com
    fallback, `text/plain` ainda é renderizado nesta chamada, mas não
    nas seguintes.
    """
    _require_imports()
    engine = RenderMime(fallback_on_error=True)

    class Mutating:
        safety = "safe"

        def render(self, value, options):
            engine.remove_renderer("text/plain")
            raise RuntimeError("mutated")

    engine.add_renderer("text/foo", Mutating())
    bundle = {"text/foo": 1, "text/plain": "still here"}

    assert engine.render(bundle).text == "still here"
    assert "text/plain" not in list(engine.mimetypes())
    assert engine.render(bundle) is None
