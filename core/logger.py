"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           core/logger.py
Version:        1.0.0
Description:    Centralized logging for RouteFlux. Supports console/file
                output and component-specific levels (tree builder,
                visibility signals, routes menu).
------------------------------------------------------------------------------
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict

# Root logger for the entire application
APP_LOGGER_NAME = "routeflux"

# Default format for log messages
DEFAULT_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, str]] = None
) -> None:
    """
    Sets up the global logging configuration.

    Args:
        level: The default logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to a file where logs should be saved.
        component_levels: Dict mapping component names to levels, e.g.
            {"tree": "DEBUG", "gui.visibility": "INFO"}.
    """
    root = logging.getLogger(APP_LOGGER_NAME)

    # Remove existing handlers to avoid duplicates on re-setup
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    # 1. Console Handler (Stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # 3. Apply Component Overrides
    if component_levels:
        for component, cmp_level in component_levels.items():
            set_component_level(component, cmp_level)

def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger instance for a specific component.
    Namespaced under 'routeflux.<name>', e.g. 'tree' (lookup misses,
    cycles), 'config', 'gui.visibility' and 'gui.routes_menu'.
    """
    if name == APP_LOGGER_NAME or name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")

def set_component_level(component: str, level: str) -> None:
    """
    Dynamically changes the log level for a specific component.
    """
    logger = get_logger(component)
    numeric_level = getattr(logging, level.upper(), None)
    if numeric_level is not None:
        logger.setLevel(numeric_level)
        logger.propagate = True
