# src/atlas_rendermime/core/config/validation.py
"""
Validação estrutural da configuração resolvida.

Verifica apenas tipos e domínios das chaves conhecidas; chaves
desconhecidas são preservadas sem interpretação. A existência de
Renderers para os mimetypes declarados é verificada na construção
do Registry (`core.engine.defaults`).
"""

from typing import Any, Dict, Mapping

from .errors import InvalidConfigValueError


LOG_LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


def _section(config: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = config.get(name, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise InvalidConfigValueError(
            f"Seção '{name}' deve ser dict, recebido: {type(section).__name__}"
        )
    return section


def _require_str_list(value: Any, key: str, *, unique: bool = False) -> None:
    if not isinstance(value, list) or not all(isinstance(v, str) and v.strip() for v in value):
        raise InvalidConfigValueError(f"'{key}' deve ser lista de strings não vazias")
    if unique and len(set(value)) != len(value):
        raise InvalidConfigValueError(f"'{key}' contém valores duplicados")


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida a configuração e a devolve inalterada.

    Raises:
        InvalidConfigValueError: Se alguma chave conhecida possuir valor inválido.
    """
    engine = _section(config, "engine")
    if "fallback_on_error" in engine and not isinstance(engine["fallback_on_error"], bool):
        raise InvalidConfigValueError("'engine.fallback_on_error' deve ser bool")
    if "log_level" in engine and str(engine["log_level"]).upper() not in LOG_LEVELS:
        raise InvalidConfigValueError(
            f"'engine.log_level' inválido: {engine['log_level']!r} "
            f"(esperado um de {sorted(LOG_LEVELS)})"
        )

    registry = _section(config, "registry")
    if "order" in registry:
        _require_str_list(registry["order"], "registry.order", unique=True)
    if "disabled" in registry:
        _require_str_list(registry["disabled"], "registry.disabled")

    sanitizer = _section(config, "sanitizer")
    for key in ("strip_tags", "allowed_tags", "allowed_attributes", "url_attributes", "blocked_schemes"):
        if key in sanitizer:
            _require_str_list(sanitizer[key], f"sanitizer.{key}")

    return config
