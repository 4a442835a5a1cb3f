"""Registro (logging) de la calculadora.

Todos los módulos escriben bajo el logger ``calculadora``; configurarlo
no toca el logger raíz ni los handlers de quien aloje la aplicación.
"""

import logging
import sys
from typing import Optional


LOGGER_NAME = "calculadora"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def get_logger(module_name: str) -> logging.Logger:
    """Logger hijo de ``calculadora`` para el módulo dado."""
    return logging.getLogger(f"{LOGGER_NAME}.{module_name}")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Envía el registro de la calculadora a consola y, si se indica, a archivo.

    Llamarla otra vez sustituye solo los handlers que instaló antes.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, "_calculadora", False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler._calculadora = True
        logger.addHandler(handler)

    logger.debug("Logging inicializado (nivel %s).", logging.getLevelName(level))
    return logger
