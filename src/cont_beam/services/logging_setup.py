# path: src/cont_beam/services/logging_setup.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

PACKAGE_LOGGER = "cont_beam"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _has_handler(logger: logging.Logger, kind: type) -> bool:
    return any(type(h) is kind for h in logger.handlers)


def setup_logging(
    log_dir: Optional[str] = "logs",
    log_name: str = "cont_beam.log",
    level: int = logging.INFO,
    *,
    console: bool = True,
    max_bytes: int = 2_000_000,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Configura el logger del paquete ("cont_beam").

    log_dir=None desactiva el archivo rotativo; console=False la salida por
    consola. Los módulos del motor piden logging.getLogger(__name__) y
    propagan hasta acá. Llamadas repetidas solo ajustan el nivel y agregan
    el handler que falte.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT)

    if log_dir is not None and not _has_handler(logger, RotatingFileHandler):
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, log_name)
        fh = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)
        logger.info("Log del motor en %s", log_path)

    if console and not _has_handler(logger, logging.StreamHandler):
        sh = logging.StreamHandler()
        sh.setFormatter(fmt)
        logger.addHandler(sh)

    for h in logger.handlers:
        h.setLevel(level)
    return logger
