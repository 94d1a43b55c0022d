# src/atlas_rendermime/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas RenderMime.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, validação estrutural e aplicação da configuração
(ordem de precedência, Renderers desabilitados, política do Engine
e do Sanitizer).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de configuração são falhas fatais no momento da construção
    - Nenhum erro de configuração ocorre durante `render`

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`

Limites explícitos:
    - Não representa falha de renderização (ver `core.errors`)
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do RenderMime.

    Permite captura genérica de erros de configuração e distinção
    clara entre falhas de construção e falhas de renderização.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) não encontrado.

    Limites explícitos:
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato do arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz da configuração não é um dicionário (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"engine": {"fallback_on_error": false}}
        - override: {"engine": "strict"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidConfigValueError(ConfigError):
    """Valor de configuração com tipo ou domínio inválido."""


class UnknownMimetypeError(ConfigError):
    """
    Mimetype declarado na configuração não possui Renderer embutido.

    Renderers adicionais devem ser registrados via `add_renderer`,
    nunca declarados apenas na configuração.
    """
