"""
rdflib serializer plugin.

Registers the writer with rdflib so it can be reached through
``Graph.serialize``:

    graph.serialize(format="jsonld-writer", variant="flatten-flat")

Keyword arguments other than ``variant`` are read as serialization
settings (``context``, ``frame``, ``JSONLD_CONTEXT_SUBSTITUTION``, ...).
"""

import logging
from typing import IO, Any, Optional

from rdflib import plugin
from rdflib.serializer import Serializer

from ...shared.models import JsonLdVariant, SerializationConfig
from .writer import JsonLDWriter

logger = logging.getLogger(__name__)


PLUGIN_NAME = "jsonld-writer"


class JsonLDWriterSerializer(Serializer):
    """rdflib ``Serializer`` delegating to ``JsonLDWriter``."""

    def serialize(
        self,
        stream: IO[bytes],
        base: Optional[str] = None,
        encoding: Optional[str] = None,
        variant: str = str(JsonLdVariant.COMPACT_PRETTY),
        **args: Any,
    ) -> None:
        if encoding not in (None, "utf-8", "utf8", "UTF-8"):
            logger.warning(f"JSON-LD is always written as UTF-8, ignoring encoding={encoding}")

        config = SerializationConfig.from_mapping(args)
        JsonLDWriter(variant).write_binary(stream, self.store, base_uri=base, config=config)


def register_plugin() -> None:
    """Register the serializer with rdflib under ``PLUGIN_NAME``."""
    plugin.register(
        PLUGIN_NAME,
        Serializer,
        "jsonld_writer.formats.jsonld.serializer",
        "JsonLDWriterSerializer",
    )
