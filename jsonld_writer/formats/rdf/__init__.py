"""
RDF Format Support Package

Components:
- rdf_parser: RDFGraphParser for loading RDF files and strings with rdflib
- dataset_adapter: DatasetAdapter converting rdflib graphs to the
  JSON-LD processor's RDF dataset form

Usage:
    from jsonld_writer.formats.rdf import RDFGraphParser, DatasetAdapter

    graph, triple_count = RDFGraphParser.parse_file("data.ttl")
    rdf_dataset = DatasetAdapter().to_rdf_dataset(graph)
"""

from .rdf_parser import RDFGraphParser
from .dataset_adapter import DatasetAdapter, DEFAULT_GRAPH_KEY

__all__ = [
    'RDFGraphParser',
    'DatasetAdapter',
    'DEFAULT_GRAPH_KEY',
]
