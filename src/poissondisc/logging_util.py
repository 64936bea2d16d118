# -*- coding: utf-8 -*-
from __future__ import annotations
import json, logging, os, sys
from typing import Any, Dict, Tuple

_TEXT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


class _JSONFormatter(logging.Formatter):
    def format(self, record):
        base = {"level": record.levelname, "name": record.name, "msg": record.getMessage()}
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            base.update(extra)
        return json.dumps(base, ensure_ascii=False)


def resolve_logging(cfg: Dict[str, Any] | None = None) -> Tuple[int, str]:
    """Return ``(level, format)`` from ``cfg["logging"]``.

    ``POISSONDISC_LOG_LEVEL`` and ``POISSONDISC_LOG_FORMAT`` win over ``cfg``.
    Unknown level names fall back to ``WARNING``.
    """
    level = "WARNING"
    fmt = "text"
    if cfg:
        lg = cfg.get("logging", {}) or {}
        level = lg.get("level", level)
        fmt = lg.get("format", fmt)
    level = os.getenv("POISSONDISC_LOG_LEVEL", level)
    fmt = os.getenv("POISSONDISC_LOG_FORMAT", fmt)
    return getattr(logging, str(level).upper(), logging.WARNING), str(fmt).lower()


def make_handler(fmt: str = "text") -> logging.Handler:
    """A stdout handler using the text or json record layout."""
    h = logging.StreamHandler(stream=sys.stdout)
    h.setFormatter(_JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT))
    return h


def get_logger(name: str, cfg: Dict[str, Any] | None = None) -> logging.Logger:
    """Return a standalone stdout logger configured from ``cfg`` and env vars.

    Handlers are installed once per logger name.
    """
    level, fmt = resolve_logging(cfg)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(make_handler(fmt))
    return logger
