"""
CLI helper utilities.

This module provides shared utilities for CLI commands including:
- Configuration loading
- Logging setup
- JSON file reading for contexts and frames
"""

import json
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict, Literal, Optional

# Type alias for log levels
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(
    level: LogLevel = "WARNING",
    log_file: Optional[str] = None
) -> Optional[str]:
    """
    Setup logging configuration with fallback locations.

    If the primary log file location fails (permission denied, disk full, etc.),
    attempts to write to fallback locations in order:
    1. Requested location
    2. System temp directory
    3. User home directory
    4. Console-only (final fallback)

    Console logging goes to stderr so that JSON-LD written to stdout
    stays clean.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path. If None, logs to console only.

    Returns:
        The actual log file path used, or None if logging to console only.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers = [logging.StreamHandler(sys.stderr)]
    actual_log_file = None

    if log_file:
        log_filename = os.path.basename(log_file) or "jsonld_writer.log"
        fallback_locations = [
            log_file,
            os.path.join(tempfile.gettempdir(), log_filename),
            os.path.join(Path.home(), log_filename),
        ]

        for fallback_path in fallback_locations:
            try:
                log_dir = os.path.dirname(fallback_path)
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
                handlers.append(logging.FileHandler(fallback_path, encoding='utf-8'))
                actual_log_file = fallback_path

                if fallback_path != log_file:
                    print(f"Note: Using fallback log file: {fallback_path}", file=sys.stderr)
                break
            except OSError as e:
                print(f"  Could not create log at {fallback_path}: {e}", file=sys.stderr)
                continue

        if not actual_log_file:
            print("Warning: Could not write log file to any location", file=sys.stderr)
            print(f"  Requested: {log_file}", file=sys.stderr)
            print("  Logging to console only", file=sys.stderr)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if actual_log_file:
        logger.info(f"Logging to: {actual_log_file}")

    return actual_log_file


def load_json_file(path: str, description: str = "JSON file") -> Any:
    """
    Read a JSON document from disk.

    Args:
        path: File path.
        description: Used in error messages ("context file", "frame file").

    Returns:
        The parsed JSON value.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file does not contain valid JSON.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"{description.capitalize()} not found: {path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {description} {file_path} at line {e.lineno}, column {e.colno}: {e.msg}"
        ) from e
    except UnicodeDecodeError as e:
        raise ValueError(f"File encoding error in {file_path}: {e}") from e


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Recognized top-level keys are "log_level", "log_file",
    "remote_context_timeout" and "serialization" (serialization settings
    such as "JSONLD_CONTEXT" or "prefer_prefixed_properties").

    Args:
        config_path: Path to the configuration file.

    Returns:
        Dictionary containing the configuration.

    Raises:
        ValueError: If config_path is empty or file contains invalid JSON.
        FileNotFoundError: If the configuration file doesn't exist.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    if Path(config_path).suffix.lower() != '.json':
        raise ValueError(f"Configuration file must have a .json extension: {config_path}")

    config = load_json_file(config_path, "configuration file")

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(config).__name__}")

    return config
