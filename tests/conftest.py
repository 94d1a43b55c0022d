"""
Fixtures compartilhados para testes do Atlas RenderMime.

Este módulo define fixtures reutilizáveis que fornecem:
- Engines construídos com o Registry padrão
- Renderers dummy duck-typed com classificação configurável
- bundles e payloads determinísticos
- configurações YAML mínimas para o loader

Decisões arquiteturais:
    - Renderers dummy utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O (exceto via `tmp_path` nos testes)
    - Nenhuma fixture depende de estado global
    - Cada fixture devolve instâncias novas

Limites explícitos:
    - Não substituir testes de integração com UI
    - Não conter lógica condicional complexa
"""

import pytest


# GIF 1x1 em base64
PIXEL_B64 = "R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7"


# =====================================================
# Engine
# =====================================================

@pytest.fixture
def rendermime():
    """
    Fixture que fornece um Engine com o Registry padrão.

    O Engine é criado com `log_level="DEBUG"` para que todos os eventos
    estruturados fiquem disponíveis às asserções.

    Returns:
        RenderMime: Engine novo, independente de qualquer outro teste.
    """
    from atlas_rendermime.core.engine.engine import RenderMime

    return RenderMime(log_level="DEBUG")


@pytest.fixture
def pixel_b64() -> str:
    return PIXEL_B64


# =====================================================
# Renderers dummy
# =====================================================

@pytest.fixture
def DummyRenderer():
    """
    Fixture factory que fornece uma implementação mínima e duck-typed de Renderer.

    A implementação retornada:
    - respeita o protocolo de Renderer (atributo `safety` + `render`)
    - registra cada chamada em `calls` como (value, options)
    - pode ser configurada para falhar com uma exceção fixa

    Invariantes:
        - Sem `fail_with`, sempre retorna RenderResult com html `<dummy>`
        - Não executa I/O

    Returns:
        type: Classe _DummyRenderer que pode ser instanciada pelos testes.
    """
    from atlas_rendermime.core.registry.types import RenderResult, Safety

    class _DummyRenderer:
        def __init__(self, safety=Safety.SAFE, fail_with=None, label="dummy"):
            self.safety = safety
            self.fail_with = fail_with
            self.label = label
            self.calls = []

        def render(self, value, options):
            self.calls.append((value, options))
            if self.fail_with is not None:
                raise self.fail_with
            return RenderResult(
                mimetype=options.mimetype,
                html=f"<{self.label}>",
                text=str(value),
                trusted=options.trusted,
            )

    return _DummyRenderer


@pytest.fixture
def InjectionRenderer():
    """
    Fixture factory de um Renderer que publica representações companheiras.

    Ao renderizar, publica via injector:
        - `text/plain` → "foo"
        - `application/json` → {"foo": 1}
    independentemente do mimetype para o qual foi registrado.

    Returns:
        type: Classe _InjectionRenderer.
    """
    from atlas_rendermime.core.registry.types import RenderResult, Safety

    class _InjectionRenderer:
        safety = Safety.SAFE

        def render(self, value, options):
            if options.injector is not None:
                options.injector("text/plain", "foo")
                options.injector("application/json", {"foo": 1})
            return RenderResult(
                mimetype=options.mimetype,
                html=None,
                text=str(value),
                trusted=options.trusted,
            )

    return _InjectionRenderer


# =====================================================
# Config Loader fixtures
# =====================================================

@pytest.fixture
def config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) reduzido.

    Returns:
        str: Conteúdo YAML representando defaults.
    """
    return """\
engine:
  fallback_on_error: false
  log_level: INFO
registry:
  order:
    - text/html
    - application/json
    - text/plain
  disabled: []
"""


@pytest.fixture
def config_local_yaml() -> str:
    """
    YAML de configuração local (override).

    Returns:
        str: Conteúdo YAML com overrides locais.
    """
    return """\
engine:
  fallback_on_error: true
registry:
  order:
    - application/json
    - text/plain
"""
