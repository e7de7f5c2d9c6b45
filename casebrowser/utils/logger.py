"""Logging configuration for casebrowser."""

import logging
import sys
from pathlib import Path

ROOT_LOGGER = "casebrowser"


def _resolve_level(level: str) -> int:
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logger(
    name: str = ROOT_LOGGER,
    level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure and return a logger instance.

    Handlers live on the ``casebrowser`` logger only. Module loggers
    (``casebrowser.*``) carry no handler or level of their own and propagate
    to it, so raising the package level later, e.g. from the CLI, reaches
    loggers created at import time.

    Args:
        name: Logger name.
        level: Log level string (DEBUG, INFO, WARNING, ERROR). Left as is
            when omitted; a fresh ``casebrowser`` logger starts at INFO.
        log_file: Optional file path for log output.

    Returns:
        Configured logger.
    """
    if name.startswith(ROOT_LOGGER + "."):
        setup_logger(ROOT_LOGGER)
        logger = logging.getLogger(name)
        logger.propagate = True
        if level is not None:
            logger.setLevel(_resolve_level(level))
        return logger

    logger = logging.getLogger(name)
    if logger.handlers:
        if level is not None:
            logger.setLevel(_resolve_level(level))
        return logger

    logger.setLevel(_resolve_level(level or "INFO"))
    logger.propagate = False

    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # stderr keeps CLI stdout clean for JSON output
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
