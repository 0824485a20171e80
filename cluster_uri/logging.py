"""Logging configuration helpers for cluster_uri."""

from __future__ import annotations

import logging

import structlog


_CONFIGURED = False


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    *,
    cache_loggers: bool = True,
    force: bool = False,
) -> None:
    """Configure structlog if it hasn't been configured yet.

    Applications embedding the parser usually configure logging themselves;
    this helper is for scripts and services that don't.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    logging.basicConfig(format="%(message)s", level=level.upper(), force=force)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_loggers,
    )
    _CONFIGURED = True


def reset_logging() -> None:
    """Undo :func:`configure_logging`, restoring structlog defaults."""
    global _CONFIGURED
    structlog.reset_defaults()
    _CONFIGURED = False


def is_configured() -> bool:
    return _CONFIGURED


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger ``name``.

    Events pass through stdlib level filtering, so the parser stays silent
    until the embedding application enables its logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or "cluster_uri"),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


__all__ = ["configure_logging", "reset_logging", "is_configured", "get_logger"]
