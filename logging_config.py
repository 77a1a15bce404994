"""
messagely-api/logging_config.py
Configuration du logging
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers reconfigurés explicitement (uvicorn installe les siens)
MANAGED_LOGGERS = ["uvicorn", "uvicorn.access", "uvicorn.error", "messagely"]


class ColoredFormatter(logging.Formatter):
    """Formatter avec couleurs pour le terminal"""
    
    COLORS = {
        'DEBUG': '\033[0;36m',    # Cyan
        'INFO': '\033[0;32m',     # Vert
        'WARNING': '\033[0;33m',  # Jaune
        'ERROR': '\033[0;31m',    # Rouge
        'CRITICAL': '\033[1;31m', # Rouge gras
    }
    RESET = '\033[0m'
    
    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def _build_handlers(numeric_level: int, console_formatter: logging.Formatter,
                    log_file: Optional[str]) -> List[logging.Handler]:
    """Handler console, plus un handler fichier (sans couleurs) si demandé"""
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    handlers: List[logging.Handler] = [console_handler]
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        handlers.append(file_handler)
    
    return handlers


def _apply(numeric_level: int, handlers: List[logging.Handler]) -> logging.Logger:
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True
    )
    
    for logger_name in MANAGED_LOGGERS:
        log = logging.getLogger(logger_name)
        log.setLevel(numeric_level)
        log.handlers.clear()
        for handler in handlers:
            log.addHandler(handler)
        log.propagate = False
    
    # Réduire la verbosité de watchfiles
    logging.getLogger("watchfiles").setLevel(logging.WARNING)
    
    return logging.getLogger("messagely")


def setup_logging(log_level: str = "INFO", log_file: str = None) -> logging.Logger:
    """Configure le logging standard"""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    handlers = _build_handlers(
        numeric_level, logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT), log_file
    )
    logger = _apply(numeric_level, handlers)
    logger.info("✅ Logging configured")
    return logger


def setup_colored_logging(log_level: str = "INFO", log_file: str = None) -> logging.Logger:
    """Configure le logging avec couleurs"""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    handlers = _build_handlers(
        numeric_level, ColoredFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT), log_file
    )
    logger = _apply(numeric_level, handlers)
    logger.info("✅ Colored logging configured")
    return logger


def get_uvicorn_log_config(log_level: str = "INFO") -> dict:
    """Configuration de logging pour Uvicorn"""
    level = log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
                "datefmt": LOG_DATE_FORMAT,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            name: {"handlers": ["default"], "level": level, "propagate": False}
            for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
        } | {
            "watchfiles": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        },
    }
