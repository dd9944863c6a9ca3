"""Logging, structured events and profiling spans backed by telelog.

Every layer of the engine reports through the module-level helpers, which
delegate to one shared ``Telemetry`` hub:

``configure(...)`` -- pick a preset or hand over an explicit telelog config
``get_logger(name)`` -- cached logger bound to the active config
``record_event(name, ...)`` -- structured ``event::<name>`` record
``span(name, ...)`` -- profiled block, optionally tracked as a component

Environment (prefix ``FORMAT_ENGINE_``): ``LOGGER``, ``LOG_LEVEL``,
``LOG_FILE``, ``LOG_JSON``, ``LOG_BUFFERED``, ``LOG_BUFFER_SIZE``,
``DISABLE_CONSOLE``, ``NO_COLOR``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    ContextManager,
    Dict,
    Iterator,
    Mapping,
    Optional,
    cast,
)

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "FORMAT_ENGINE_"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool = False) -> bool:
    raw = env(name)
    return default if raw is None else raw.strip().lower() in _TRUTHY


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _preset(
    level: str,
    *,
    console: bool,
    json: bool = False,
    buffered: bool = False,
    log_file: Optional[str] = None,
) -> Callable[[], Any]:
    def build() -> Any:
        config = tl.Config()
        config.with_min_level(level)
        config.with_console_output(console)
        if console:
            config.with_colored_output(True)
        config.with_json_format(json)
        if buffered:
            config.with_buffering(True)
        if log_file:
            config.with_file_output(env("LOG_FILE") or log_file)
        return config

    return build


PRESETS: Dict[str, Callable[[], Any]] = {
    "development": _preset("DEBUG", console=True),
    "production": _preset(
        "INFO", console=False, buffered=True, log_file="format_engine.log"
    ),
    "performance": _preset(
        "DEBUG",
        console=False,
        json=True,
        buffered=True,
        log_file="format_engine-performance.log",
    ),
}


def config_from_env() -> Any:
    """Build a telelog config from ``FORMAT_ENGINE_*`` variables."""

    config = tl.Config()
    config.with_min_level((env("LOG_LEVEL") or "INFO").upper())
    console = not env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not env_flag("NO_COLOR"))
    if env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    if env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(env("LOG_BUFFER_SIZE") or "2048"))
    return config


def _write(logger: Any, level: str, message: str, data: Mapping[str, Any]) -> None:
    """Use ``<level>_with`` for structured pairs, else fold data into the text."""

    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(key), _text(value)) for key, value in data.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(data)}")


@dataclass
class SpanHandle:
    """Yielded by ``span``; collects metadata and reports failures."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        self._report("error", "span::fail", reason)

    def cancel(self, reason: Optional[str] = None) -> None:
        self._report("warning", "span::cancel", reason)

    def _report(self, level: str, message: str, reason: Optional[str]) -> None:
        data: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            data["component"] = self.component_name
        if reason:
            data["reason"] = reason
        _write(self.logger, level, message, data)


class Telemetry:
    """Active telelog config plus the loggers created from it."""

    def __init__(self, default_logger: Optional[str] = None) -> None:
        self.default_logger = default_logger or env("LOGGER") or "format_engine"
        self._config: Optional[Any] = None
        self._loggers: Dict[str, Any] = {}

    def configure(
        self, *, config: Optional[Any] = None, preset: Optional[str] = None
    ) -> Any:
        if config is not None and preset:
            raise ValueError("Provide either `config` or `preset`, not both.")
        if preset:
            try:
                config = PRESETS[preset.lower()]()
            except KeyError:
                raise ValueError(f"Unknown preset '{preset}'.") from None
        elif config is None:
            config = config_from_env()
        config.with_profiling(True)
        self._config = config
        self._loggers.clear()
        return config

    def logger(self, name: Optional[str] = None) -> Any:
        key = name or self.default_logger
        if key not in self._loggers:
            if self._config is None:
                self.configure()
            self._loggers[key] = tl.Logger.with_config(key, self._config)
        return self._loggers[key]

    def event(
        self,
        name: str,
        *,
        level: str = "info",
        data: Optional[Mapping[str, Any]] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        _write(
            self.logger(logger_name),
            level,
            f"event::{name}",
            {"event": name, **(data or {})},
        )

    @contextmanager
    def span(
        self,
        name: str,
        *,
        logger_name: Optional[str] = None,
        component: Optional[str | bool] = None,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> Iterator[SpanHandle]:
        log = self.logger(logger_name)
        if component is True:
            component_name: Optional[str] = name
        elif isinstance(component, str):
            component_name = component
        else:
            component_name = None
        context = {key: _text(value) for key, value in (metadata or {}).items()}
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(context),
        )
        for key, value in context.items():
            log.add_context(key, value)
        try:
            with ExitStack() as stack:
                if handle.component_name:
                    stack.enter_context(log.track_component(handle.component_name))
                stack.enter_context(log.profile(name))
                try:
                    yield handle
                except Exception as exc:
                    handle.fail(str(exc))
                    raise
        finally:
            for key in context:
                log.remove_context(key)


hub = Telemetry()


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> Any:
    """Replace the active telelog configuration.

    Parameters
    ----------
    config:
        Explicit ``telelog.Config`` to adopt.
    preset:
        One of ``PRESETS`` (``"development"``, ``"production"``,
        ``"performance"``). Mutually exclusive with ``config``.
    """

    return hub.configure(config=config, preset=preset)


def get_logger(name: Optional[str] = None) -> Any:
    return hub.logger(name)


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Mapping[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    hub.event(name, level=level, data=data, logger_name=logger_name)


def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Mapping[str, Any]] = None,
) -> ContextManager[SpanHandle]:
    """Profile a block and optionally track it as a component.

    ``component=True`` reuses ``name`` as the component id; a string sets it
    explicitly. ``metadata`` is pushed as logger context for the duration of
    the block and copied onto the handle.
    """

    return hub.span(
        name, logger_name=logger_name, component=component, metadata=metadata
    )


__all__ = [
    "ENV_PREFIX",
    "PRESETS",
    "SpanHandle",
    "Telemetry",
    "config_from_env",
    "configure",
    "env",
    "env_flag",
    "get_logger",
    "hub",
    "record_event",
    "span",
]
