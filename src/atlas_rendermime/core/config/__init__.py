# src/atlas_rendermime/core/config/__init__.py

"""
Camada de configuração do Atlas RenderMime.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar e validar estruturalmente a configuração usada na construção
de Engines: ordem de precedência, Renderers desabilitados, política de
erro do Engine e política do Sanitizer.

A configuração no Atlas RenderMime é:
    - declarativa
    - determinística
    - um valor explícito passado à construção (nunca estado global)

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Validação estrutural de tipos e domínios

Limites explícitos:
    - Não constrói Engines
    - Não renderiza conteúdo
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnknownMimetypeError,
    UnsupportedConfigFormatError,
)
from .loader import DEFAULTS_PATH, load_config
from .merge import deep_merge
from .validation import LOG_LEVELS, validate_config

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DEFAULTS_PATH",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidConfigValueError",
    "LOG_LEVELS",
    "UnknownMimetypeError",
    "UnsupportedConfigFormatError",
    "deep_merge",
    "load_config",
    "validate_config",
]
