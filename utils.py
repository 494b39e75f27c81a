"""
utils.py - Utility Functions and Helpers
=========================================
Common utility functions used throughout the system.
"""

import json
import logging
import sys
import time
from functools import wraps
from pathlib import Path
from typing import Dict, Optional, Union


logger = logging.getLogger(__name__)


# ============================================================================
# FILE OPERATIONS
# ============================================================================

def ensure_directory(path: Union[str, Path]) -> Path:
    """Ensure directory exists, create if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_json(data: Dict, filepath: Union[str, Path], indent: int = 2):
    """Save data to JSON file."""
    filepath = Path(filepath)
    ensure_directory(filepath.parent)

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=indent, default=str)

    logger.debug(f"Saved JSON to {filepath}")


# ============================================================================
# DECORATORS
# ============================================================================

def timer(func):
    """Decorator to time function execution."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        end = time.perf_counter()
        logger.debug(f"{func.__name__} took {end - start:.2f} seconds")
        return result
    return wrapper


# ============================================================================
# LOGGING
# ============================================================================

def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Setup logging configuration.

    Console output goes to stderr; stdout is reserved for the solution.
    """
    from config import Config

    log_config = Config.LOGGING

    level_name = log_level or log_config.get('level', 'INFO')
    level = getattr(logging, level_name.upper(), logging.INFO)

    formatter = logging.Formatter(
        log_config['format'],
        datefmt=log_config['date_format']
    )

    handlers = []

    if log_config.get('console_output', True):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if log_file or log_config.get('file'):
        file_path = log_file or log_config['file']
        ensure_directory(Path(file_path).parent)

        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=log_config.get('max_bytes', 10*1024*1024),
            backupCount=log_config.get('backup_count', 5)
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True
    )

    logger.debug(f"Logging configured: level={level_name}")
