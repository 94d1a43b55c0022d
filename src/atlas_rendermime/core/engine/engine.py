# src/atlas_rendermime/core/engine/engine.py
"""
Engine de renderização do Atlas RenderMime.

Fachada que combina Registry, Selector e política de segurança:
- Seleciona o mimetype preferido de um bundle (snapshot na entrada).
- Entrega o Sanitizer ao Renderer somente quando a renderização não é confiável.
- Repassa Resolver e injector ao Renderer selecionado.

Guardrails:
- Nenhuma falha de Renderer propaga para a UI; exceções são convertidas
  em RenderErrorPayload (serializável, acionável) e expostas em `last_error`.
- Política padrão: sem fallback em tempo de renderização. Com
  `fallback_on_error=True`, o próximo candidato admissível é tentado.
- Falhas do injector são registradas e não abortam a renderização.

Política do injector:
- Com injector presente, o Engine publica primeiro as formas cruas do
  bundle para `COMPANION_MIMETYPES` (`text/plain`, `application/json`),
  quando presentes, independentemente do mimetype selecionado e mesmo
  quando nada é renderizável.
- Em seguida o injector é repassado ao Renderer selecionado
  (`RenderOptions.injector`), que pode publicar companheiras derivadas;
  mimetypes já publicados a partir do bundle não são sobrescritos.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Tuple
import uuid

from atlas_rendermime.core.config.errors import InvalidConfigValueError
from atlas_rendermime.core.config.validation import LOG_LEVELS, validate_config
from atlas_rendermime.core.errors import (
    MALFORMED_BUNDLE_ENTRY,
    UNSAFE_RENDER_REFUSED,
    RenderErrorPayload,
    invalid_render_result,
    renderer_failed,
)
from atlas_rendermime.core.exceptions import (
    MalformedBundleEntry,
    RenderMimeException,
    UnsafeRenderRefused,
)
from atlas_rendermime.core.registry.registry import RendererRegistry
from atlas_rendermime.core.registry.renderer import Renderer
from atlas_rendermime.core.registry.types import (
    Bundle,
    Injector,
    RenderOptions,
    RenderResult,
)
from atlas_rendermime.core.resolver import Resolver
from atlas_rendermime.core.sanitizer import Sanitizer

from .defaults import default_registry, registry_from_config
from .selector import iter_candidates, select_mimetype


_EXCEPTION_CODES = {
    MalformedBundleEntry: MALFORMED_BUNDLE_ENTRY,
    UnsafeRenderRefused: UNSAFE_RENDER_REFUSED,
}

# formas cruas do bundle publicadas ao injector antes da renderização
COMPANION_MIMETYPES: Tuple[str, ...] = ("text/plain", "application/json")


class RenderMime:
    """Engine canônico do Atlas RenderMime (registry + selector + política)."""

    def __init__(
        self,
        registry: Optional[RendererRegistry] = None,
        *,
        resolver: Optional[Resolver] = None,
        sanitizer: Optional[Sanitizer] = None,
        fallback_on_error: bool = False,
        log_level: str = "INFO",
    ):
        level = str(log_level).upper()
        if level not in LOG_LEVELS:
            raise InvalidConfigValueError(f"log_level inválido: {log_level!r}")

        self._registry: RendererRegistry = (
            registry.copy() if registry is not None else default_registry()
        )
        self._resolver: Optional[Resolver] = resolver
        self._sanitizer: Sanitizer = sanitizer if sanitizer is not None else Sanitizer()
        self.fallback_on_error: bool = bool(fallback_on_error)
        self.log_level: str = level

        self.engine_id: str = uuid.uuid4().hex
        self.events: List[Dict[str, Any]] = []
        self.last_error: Optional[RenderErrorPayload] = None

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        *,
        resolver: Optional[Resolver] = None,
    ) -> "RenderMime":
        """Constrói um Engine a partir de uma configuração resolvida (ver `load_config`)."""
        cfg = validate_config(dict(config))
        engine_cfg = cfg.get("engine") or {}
        return cls(
            registry_from_config(cfg),
            resolver=resolver,
            sanitizer=Sanitizer.from_config(cfg.get("sanitizer") or {}),
            fallback_on_error=engine_cfg.get("fallback_on_error", False),
            log_level=engine_cfg.get("log_level", "INFO"),
        )

    # ------------------------------------------------------------------
    # Colaboradores
    # ------------------------------------------------------------------

    @property
    def resolver(self) -> Optional[Resolver]:
        return self._resolver

    @resolver.setter
    def resolver(self, value: Optional[Resolver]) -> None:
        self._resolver = value

    @property
    def sanitizer(self) -> Sanitizer:
        return self._sanitizer

    @sanitizer.setter
    def sanitizer(self, value: Sanitizer) -> None:
        self._sanitizer = value

    # ------------------------------------------------------------------
    # Registry (pass-through)
    # ------------------------------------------------------------------

    def add_renderer(self, mimetype: str, renderer: Renderer, index: Optional[int] = None) -> None:
        if not self._registry.add(mimetype, renderer, index):
            self.log(
                level="WARNING",
                message="binding malformado ignorado",
                mimetype=mimetype if isinstance(mimetype, str) else repr(mimetype),
                renderer_type=type(renderer).__name__,
            )

    def remove_renderer(self, mimetype: str) -> None:
        self._registry.remove(mimetype)

    def get_renderer(self, mimetype: str) -> Optional[Renderer]:
        return self._registry.get(mimetype)

    def mimetypes(self) -> Iterator[str]:
        return self._registry.order()

    def clone(self) -> "RenderMime":
        """Novo Engine com Registry próprio; Renderers, Resolver e Sanitizer compartilhados."""
        return RenderMime(
            self._registry,
            resolver=self._resolver,
            sanitizer=self._sanitizer,
            fallback_on_error=self.fallback_on_error,
            log_level=self.log_level,
        )

    # ------------------------------------------------------------------
    # Seleção e renderização
    # ------------------------------------------------------------------

    def preferred_mimetype(self, bundle: Bundle, trusted: bool = False) -> Optional[str]:
        if not isinstance(bundle, Mapping):
            return None
        return select_mimetype(bundle, self._registry.snapshot(), trusted)

    def render(
        self,
        bundle: Bundle,
        trusted: bool = False,
        injector: Optional[Injector] = None,
    ) -> Optional[RenderResult]:
        self.last_error = None

        if not isinstance(bundle, Mapping):
            self.log(
                level="WARNING",
                message="bundle ignorado: não é um mapeamento",
                bundle_type=type(bundle).__name__,
            )
            return None

        # snapshot: mutações do Registry durante esta renderização não são observadas
        bindings = self._registry.snapshot()
        guarded = None
        if injector is not None:
            published = self._publish_companions(bundle, injector)
            guarded = self._guard_injector(injector, skip=published)
        sanitizer = None if trusted else self._sanitizer

        attempted = 0
        for mimetype, renderer in iter_candidates(bundle, bindings, trusted):
            attempted += 1
            options = RenderOptions(
                mimetype=mimetype,
                trusted=trusted,
                resolver=self._resolver,
                sanitizer=sanitizer,
                injector=guarded,
            )
            result = self._invoke(renderer, bundle[mimetype], options)
            if result is not None:
                self.log(level="DEBUG", message="bundle renderizado", mimetype=mimetype, trusted=trusted)
                return result
            if not self.fallback_on_error:
                return None

        if attempted == 0:
            self.log(
                level="DEBUG",
                message="nenhum mimetype renderizável",
                bundle_mimetypes=list(bundle),
                trusted=trusted,
            )
        return None

    def _invoke(self, renderer: Renderer, value: Any, options: RenderOptions) -> Optional[RenderResult]:
        try:
            result = renderer.render(value, options)
        except Exception as e:
            self._record_error(self._exception_to_error(e, options.mimetype))
            return None

        if not isinstance(result, RenderResult):
            self._record_error(
                invalid_render_result(mimetype=options.mimetype, received=type(result).__name__)
            )
            return None
        return result

    # ------------------------------------------------------------------
    # Guardrails: exceção -> RenderErrorPayload
    # ------------------------------------------------------------------

    def _exception_to_error(self, exc: Exception, mimetype: str) -> RenderErrorPayload:
        """Converte exceções de Renderers em RenderErrorPayload.

        Regras:
        - RenderMimeException: já vem com message/details/hint; o código vem
          do catálogo ou, na ausência, do nome da classe.
        - Outras exceções: encapsular como RENDERER_FAILED sem expor stack trace.
        """
        if isinstance(exc, RenderMimeException):
            code = _EXCEPTION_CODES.get(type(exc), exc.__class__.__name__)
            details = dict(exc.details or {})
            details.setdefault("mimetype", mimetype)
            return RenderErrorPayload(
                type=code,
                message=exc.message,
                details=details,
                hint=exc.hint,
            )

        return renderer_failed(
            mimetype=mimetype,
            exc_type=exc.__class__.__name__,
            exc_message=str(exc),
        )

    def _record_error(self, error: RenderErrorPayload) -> None:
        self.last_error = error
        self.log(
            level="ERROR",
            message=error.message,
            mimetype=error.details.get("mimetype"),
            error=error.to_dict(),
        )

    def _publish_companions(self, bundle: Bundle, injector: Injector) -> FrozenSet[str]:
        published = [mt for mt in COMPANION_MIMETYPES if mt in bundle]
        for mimetype in published:
            self._inject(injector, mimetype, bundle[mimetype])
        return frozenset(published)

    def _guard_injector(self, injector: Injector, skip: FrozenSet[str] = frozenset()) -> Injector:
        def guarded(mimetype: str, value: Any) -> None:
            if mimetype in skip:
                return
            self._inject(injector, mimetype, value)

        return guarded

    def _inject(self, injector: Injector, mimetype: str, value: Any) -> None:
        try:
            injector(mimetype, value)
        except Exception as e:
            self.log(
                level="WARNING",
                message="injector falhou",
                mimetype=mimetype,
                exc_type=e.__class__.__name__,
                exc_message=str(e),
            )

    # ------------------------------------------------------------------
    # Logging estruturado
    # ------------------------------------------------------------------

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        level = level.upper()
        if LOG_LEVELS.get(level, 0) < LOG_LEVELS[self.log_level]:
            return
        event = {
            "engine_id": self.engine_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
