"""
Observability utilities for the API Gateway adapter.

The base logger is an AWS Lambda Powertools ``Logger`` built from the adapter
configuration. Per-invocation loggers are ``ContextLogger`` instances that carry
their keys on every record instead of appending them to the shared base logger,
so concurrent invocations never see each other's request ids.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import Logger

from api_adapter.handlers.models.env_vars import AdapterEnvVars, get_adapter_env_vars


def build_logger(env: Optional[AdapterEnvVars] = None) -> Logger:
    """Create the process-wide base logger. JSON output, service name and level from config."""
    env = env or get_adapter_env_vars()
    return Logger(service=env.POWERTOOLS_SERVICE_NAME, level=env.LOG_LEVEL)


class ContextLogger:
    """Logger bound to a set of keys that are attached to every record it emits."""

    def __init__(self, base: Logger, **keys: Any):
        self._base = base
        self._keys = keys

    @property
    def base(self) -> Logger:
        return self._base

    @property
    def keys(self) -> Dict[str, Any]:
        return dict(self._keys)

    def child(self, **keys: Any) -> 'ContextLogger':
        """Derive a logger carrying this logger's keys plus ``keys``."""
        return ContextLogger(self._base, **{**self._keys, **keys})

    def _log(self, level: str, msg: object, *args: Any, extra: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        # caller -> level method -> _log -> base logger
        kwargs.setdefault('stacklevel', 4)
        getattr(self._base, level)(msg, *args, extra={**self._keys, **(extra or {})}, **kwargs)

    def debug(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._log('debug', msg, *args, **kwargs)

    def info(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._log('info', msg, *args, **kwargs)

    def warning(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._log('warning', msg, *args, **kwargs)

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._log('error', msg, *args, **kwargs)

    def exception(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at error level with the current exception's traceback."""
        self._log('exception', msg, *args, **kwargs)


def child_logger(base: Logger, **keys: Any) -> ContextLogger:
    """Derive a per-invocation logger from the base logger."""
    return ContextLogger(base, **keys)


_default_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Base logger used when none is injected, built from the environment on first use."""
    global _default_logger
    if _default_logger is None:
        _default_logger = build_logger()
    return _default_logger
