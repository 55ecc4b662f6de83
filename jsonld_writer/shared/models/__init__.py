"""
Shared data models for the JSON-LD writer.

This module contains the value types passed between the context builder,
the options resolver, the format dispatcher and the writer.

Usage:
    from jsonld_writer.shared.models import (
        OutputForm,
        JsonLdVariant,
        SerializationConfig,
    )
"""

from .serialization import (
    JsonValue,
    JsonObject,
    PrefixMapping,
    OutputForm,
    JsonLdVariant,
    SerializationConfig,
    UNSET,
    parse_json_text,
)
from .base import TransformerProtocol

__all__ = [
    # JSON values
    "JsonValue",
    "JsonObject",
    "PrefixMapping",
    # Output selection
    "OutputForm",
    "JsonLdVariant",
    # Configuration
    "SerializationConfig",
    "UNSET",
    "parse_json_text",
    # Collaborators
    "TransformerProtocol",
]
