"""
RDF Parser Module

This module loads RDF input for the writer: it resolves the serialization
format from an explicit name, an alias or the file extension, and parses
into an rdflib ``Graph`` or, for formats that carry named graphs, an
rdflib ``Dataset``.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from rdflib import Dataset, Graph
from rdflib.namespace import NamespaceManager
from rdflib.util import guess_format

from ...converters.context_builder import ContextBuilder

logger = logging.getLogger(__name__)


class RDFGraphParser:
    """
    Handles RDF parsing and format resolution.

    Parse failures are reported as ``ValueError`` with the parser message.
    """

    SUPPORTED_FORMATS = {
        "turtle",
        "xml",       # RDF/XML & OWL
        "nt",        # N-Triples
        "n3",        # Notation3
        "trig",      # TriG dataset
        "nquads",    # N-Quads dataset
        "trix",      # TriX dataset
        "json-ld",   # JSON-LD
        "hext",      # HexTuples dataset
    }

    DATASET_FORMATS = {
        "trig",
        "nquads",
        "trix",
        "hext",
        "json-ld",
    }

    FORMAT_ALIASES = {
        "ttl": "turtle",
        "turtle": "turtle",
        "rdf": "xml",
        "rdfxml": "xml",
        "rdf-xml": "xml",
        "owl": "xml",
        "xml": "xml",
        "nt": "nt",
        "ntriples": "nt",
        "n-triples": "nt",
        "n3": "n3",
        "trig": "trig",
        "nq": "nquads",
        "nquad": "nquads",
        "nquads": "nquads",
        "trix": "trix",
        "jsonld": "json-ld",
        "json_ld": "json-ld",
        "json-ld": "json-ld",
        "hext": "hext",
        "hextuples": "hext",
    }

    DEFAULT_FORMAT = "turtle"

    @classmethod
    def normalize_format(cls, rdf_format: Optional[str]) -> Optional[str]:
        """Normalize user-provided format/alias to an rdflib format."""
        if not rdf_format:
            return None
        fmt = rdf_format.strip().lower()
        return cls.FORMAT_ALIASES.get(fmt, fmt)

    @classmethod
    def infer_format_from_path(cls, file_path: Union[str, Path]) -> Optional[str]:
        """Infer RDF format from file extension using rdflib's guess_format."""
        return cls.normalize_format(guess_format(str(file_path)))

    @classmethod
    def resolve_format(
        cls,
        rdf_format: Optional[str],
        file_path: Optional[Union[str, Path]] = None
    ) -> str:
        """Resolve the effective RDF format using explicit input or file hints."""
        normalized = cls.normalize_format(rdf_format)
        if not normalized and file_path is not None:
            normalized = cls.infer_format_from_path(file_path)
        if not normalized:
            normalized = cls.DEFAULT_FORMAT
        if normalized not in cls.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported RDF serialization format '{rdf_format or normalized}'. "
                f"Supported formats: {sorted(cls.SUPPORTED_FORMATS)}"
            )
        return normalized

    @classmethod
    def is_dataset_format(cls, format_name: str) -> bool:
        """Return True when the serialization may contain multiple named graphs."""
        return format_name in cls.DATASET_FORMATS

    @classmethod
    def create_graph(cls, format_name: str) -> Graph:
        """
        Instantiate the correct rdflib graph implementation for a format.

        No namespaces are pre-bound, so after parsing the graph's prefix
        mapping holds only the prefixes declared in the input.
        """
        if not cls.is_dataset_format(format_name):
            return Graph(bind_namespaces="none")

        dataset = Dataset()
        namespace_manager = NamespaceManager(dataset, bind_namespaces="none")
        dataset.namespace_manager = namespace_manager
        # the parser binds prefixes through the default graph, which shares the store
        ContextBuilder.default_graph(dataset).namespace_manager = namespace_manager
        return dataset

    @classmethod
    def parse_content(
        cls,
        content: str,
        rdf_format: Optional[str] = None,
        source_path: Optional[Union[str, Path]] = None,
    ) -> Tuple[Graph, int]:
        """
        Parse RDF content into a graph or dataset.

        Args:
            content: The RDF content as a string
            rdf_format: Optional explicit serialization name/alias
            source_path: Optional source path used for format inference

        Returns:
            Tuple of (parsed Graph or Dataset, triple count)

        Raises:
            ValueError: If the content is empty, the format unsupported or
                the syntax invalid
        """
        if not content or not content.strip():
            raise ValueError("Empty RDF content provided")

        format_name = cls.resolve_format(rdf_format, source_path)
        logger.info(f"Parsing RDF content ({format_name})...")

        graph = cls.create_graph(format_name)
        try:
            graph.parse(data=content, format=format_name)
        except Exception as e:
            logger.error(f"Failed to parse RDF content: {e}")
            raise ValueError(f"Invalid RDF syntax ({format_name}): {e}") from e

        return graph, cls._log_result(graph, format_name)

    @classmethod
    def parse_file(
        cls,
        file_path: Union[str, Path],
        rdf_format: Optional[str] = None,
    ) -> Tuple[Graph, int]:
        """
        Parse an RDF file into a graph or dataset.

        Args:
            file_path: Path to the RDF file
            rdf_format: Optional explicit serialization name/alias

        Returns:
            Tuple of (parsed Graph or Dataset, triple count)

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the format is unsupported or the syntax invalid
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        file_size_mb = path.stat().st_size / (1024 * 1024)
        logger.info(f"File size: {file_size_mb:.2f} MB")

        format_name = cls.resolve_format(rdf_format, path)

        graph = cls.create_graph(format_name)
        try:
            graph.parse(str(path), format=format_name)
        except Exception as e:
            logger.error(f"Failed to parse RDF file: {e}")
            raise ValueError(f"Invalid RDF syntax in {path.name} ({format_name}): {e}") from e

        return graph, cls._log_result(graph, format_name)

    @classmethod
    def _log_result(cls, graph: Graph, format_name: str) -> int:
        triple_count = len(graph)
        if cls.is_dataset_format(format_name):
            context_count = len({ctx.identifier for ctx in graph.contexts()})
            logger.info(
                f"Successfully parsed dataset with {triple_count} quads "
                f"across {context_count} graph contexts"
            )
        else:
            logger.info(f"Successfully parsed {triple_count} triples")

        if triple_count == 0:
            logger.warning("Parsed graph is empty - no triples found")
        return triple_count
