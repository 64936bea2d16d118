"""Package-wide logger.

Every ``poissondisc.*`` module logs through children of :data:`logger`.
It is silent by default (a ``NullHandler`` is installed); the CLI and other
entry points switch it on with :func:`configure_logging_from_cfg`.
"""

import logging

from poissondisc.logging_util import make_handler, resolve_logging


logger = logging.getLogger("poissondisc")
logger.addHandler(logging.NullHandler())


def configure_logging(enabled: bool = True, level=logging.INFO, fmt: str = "text") -> None:
    """Configure the ``poissondisc`` logger.

    Parameters
    ----------
    enabled:
        Install a stdout handler when ``True``; suppress all output when
        ``False``.
    level:
        ``int`` or level name. Seed choice and per-run point counts from the
        sampler are emitted at ``DEBUG``.
    fmt:
        ``"text"`` or ``"json"``.
    """

    logger.handlers.clear()

    if enabled:
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.WARNING)
        logger.addHandler(make_handler(fmt))
        logger.setLevel(level)
    else:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)


def configure_logging_from_cfg(cfg) -> None:
    """Apply ``cfg["logging"]`` (plus env overrides) to the package logger."""
    level, fmt = resolve_logging(cfg)
    configure_logging(True, level, fmt)


__all__ = ["logger", "configure_logging", "configure_logging_from_cfg"]
