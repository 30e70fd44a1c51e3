from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_SUPPORTED_BACKENDS = {"linked", "arena"}
_SUPPORTED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _infer_backend_from_env() -> str:
    backend = os.getenv("PBSTREE_BACKEND", "linked").strip().lower()
    if backend not in _SUPPORTED_BACKENDS:
        raise ValueError(f"Unsupported backend '{backend}'. Expected one of {_SUPPORTED_BACKENDS}.")
    return backend


def _normalise_log_level(value: str | None) -> str:
    if value is None or value.strip() == "":
        return "INFO"
    level = value.strip().upper()
    if level not in _SUPPORTED_LOG_LEVELS:
        raise ValueError(f"Unsupported log level '{value}'. Expected one of {_SUPPORTED_LOG_LEVELS}.")
    return level


@dataclass(frozen=True)
class RuntimeConfig:
    backend: str
    log_level: str
    validate_inserts: bool

    @property
    def uses_arena(self) -> bool:
        return self.backend == "arena"


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("pbstree")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    backend = _infer_backend_from_env()
    log_level = _normalise_log_level(os.getenv("PBSTREE_LOG_LEVEL"))
    validate_inserts = _bool_from_env(os.getenv("PBSTREE_VALIDATE"), default=False)

    config = RuntimeConfig(
        backend=backend,
        log_level=log_level,
        validate_inserts=validate_inserts,
    )
    _configure_logging(config.log_level)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
