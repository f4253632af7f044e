"""
Logging Configuration for Spatial Trail
Console logging with an optional rotating log file
"""

import logging
import logging.config
import sys
from typing import Any, Dict

from ..config import TrailSettings


def build_logging_config(settings: TrailSettings) -> Dict[str, Any]:
    """Build a dictConfig mapping for the given settings"""

    handlers: Dict[str, Dict[str, Any]] = {
        'console': {
            'level': settings.log_level,
            'class': 'logging.StreamHandler',
            'formatter': 'detailed',
            'stream': sys.stdout
        }
    }

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers['file'] = {
            'level': settings.log_level,
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'detailed',
            'filename': str(settings.log_file),
            'maxBytes': 10 * 1024 * 1024,  # 10MB
            'backupCount': 5,
            'encoding': 'utf-8'
        }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'detailed': {
                'format': '[%(asctime)s] %(levelname)s [%(name)s:%(lineno)d] %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            }
        },
        'handlers': handlers,
        'loggers': {
            'spatial_trail': {
                'level': settings.log_level,
                'handlers': list(handlers),
                'propagate': False
            }
        }
    }


def setup_logging(settings: TrailSettings) -> None:
    """Apply logging configuration for the spatial_trail package"""
    logging.config.dictConfig(build_logging_config(settings))

    logger = logging.getLogger(__name__)
    logger.info(f"Spatial trail logging initialized - Level: {settings.log_level}")
