"""
JSON-LD Output Package

Components:
- transformer: PyLdTransformer, the JSON-LD processor binding
- writer: JsonLDWriter for the compact / expand / flatten / frame variants
- serializer: rdflib serializer plugin ("jsonld-writer")
"""

from .transformer import PyLdTransformer
from .writer import JsonLDWriter
from .serializer import JsonLDWriterSerializer, PLUGIN_NAME, register_plugin

__all__ = [
    'PyLdTransformer',
    'JsonLDWriter',
    'JsonLDWriterSerializer',
    'PLUGIN_NAME',
    'register_plugin',
]
