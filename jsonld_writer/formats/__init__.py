"""
Format-Specific Packages

- rdf: reading RDF input and adapting rdflib datasets
- jsonld: the JSON-LD transformer, writer and rdflib serializer plugin
"""

from . import rdf
from . import jsonld

__all__ = ['rdf', 'jsonld']
