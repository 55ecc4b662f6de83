"""JSON-LD writer for rdflib datasets."""

__version__ = "1.0.0"
__author__ = "RDF JSON-LD Writer Contributors"

from .common.exceptions import (
    JsonLDWriterError,
    ConfigurationError,
    TransformError,
)
from .shared.models import (
    OutputForm,
    JsonLdVariant,
    SerializationConfig,
)
from .converters import build_context
from .formats.jsonld import JsonLDWriter, PyLdTransformer, register_plugin

register_plugin()

__all__ = [
    # Writer
    "JsonLDWriter",
    "PyLdTransformer",
    "build_context",
    # Configuration
    "OutputForm",
    "JsonLdVariant",
    "SerializationConfig",
    # Errors
    "JsonLDWriterError",
    "ConfigurationError",
    "TransformError",
]
