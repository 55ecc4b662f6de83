"""
Common utilities shared across the JSON-LD writer.

Exports the exception hierarchy used by the converters, the writer
and the CLI.
"""

from .exceptions import (
    JsonLDWriterError,
    ConfigurationError,
    TransformError,
)

__all__ = [
    'JsonLDWriterError',
    'ConfigurationError',
    'TransformError',
]
