"""
Dataset Adapter - rdflib datasets in the JSON-LD processor's RDF form.

The processor's ``from_rdf`` accepts an RDF dataset as a dict of graph
name to triple list; the default graph is keyed "@default":

    {
        "@default": [
            {
                "subject": {"type": "IRI", "value": "http://example.org/a"},
                "predicate": {"type": "IRI", "value": "http://example.org/p"},
                "object": {"type": "literal", "value": "x",
                           "datatype": "http://www.w3.org/2001/XMLSchema#string"}
            }
        ],
        "http://example.org/g1": [...]
    }

Blank nodes are written as "_:" + identifier.
"""

import logging
from typing import Any, Dict, Iterator, List, Tuple

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import RDF, XSD
from rdflib.term import Node
from tqdm import tqdm

from ...common.exceptions import TransformError
from ...converters.context_builder import ContextBuilder

logger = logging.getLogger(__name__)


DEFAULT_GRAPH_KEY = "@default"

RdfTerm = Dict[str, str]
RdfTriple = Dict[str, RdfTerm]
RdfDataset = Dict[str, List[RdfTriple]]


class DatasetAdapter:
    """
    Converts rdflib graphs and datasets to the processor's dataset form.

    Args:
        progress: Show a tqdm progress bar while triples are converted.
    """

    def __init__(self, progress: bool = False):
        self.progress = progress

    def to_rdf_dataset(self, dataset: Graph) -> RdfDataset:
        """
        Convert an rdflib Graph, ConjunctiveGraph or Dataset.

        Args:
            dataset: Source graph; named graphs of a context-aware store
                are kept as named graphs.

        Returns:
            Dataset dict keyed by graph name.

        Raises:
            TransformError: If a triple contains a term with no RDF 1.1
                representation (variables, quoted graphs).
        """
        result: RdfDataset = {DEFAULT_GRAPH_KEY: []}
        quads = tqdm(
            self._quads(dataset),
            total=len(dataset),
            desc="Converting triples",
            unit="triple",
            disable=not self.progress,
        )
        for subject, predicate, obj, graph_name in quads:
            result.setdefault(graph_name, []).append({
                "subject": self.term(subject),
                "predicate": self.term(predicate),
                "object": self.term(obj),
            })

        logger.debug(
            f"Converted {sum(len(t) for t in result.values())} triples "
            f"in {len(result)} graphs"
        )
        return result

    def _quads(self, dataset: Graph) -> Iterator[Tuple[Node, Node, Node, str]]:
        if not getattr(dataset, "context_aware", False):
            for s, p, o in dataset.triples((None, None, None)):
                yield s, p, o, DEFAULT_GRAPH_KEY
            return

        default_id = ContextBuilder.default_graph(dataset).identifier
        for s, p, o, context in dataset.quads((None, None, None, None)):
            # rdflib yields either the context graph or its identifier
            identifier = getattr(context, "identifier", context)
            if identifier is None or identifier == default_id:
                yield s, p, o, DEFAULT_GRAPH_KEY
            else:
                yield s, p, o, self.node_value(identifier)

    @staticmethod
    def node_value(node: Node) -> str:
        """Get the identifier string of an IRI or blank node."""
        if isinstance(node, BNode):
            return f"_:{node}"
        return str(node)

    @classmethod
    def term(cls, node: Node) -> RdfTerm:
        """Convert one rdflib term."""
        if isinstance(node, BNode):
            return {"type": "blank node", "value": cls.node_value(node)}
        if isinstance(node, URIRef):
            return {"type": "IRI", "value": str(node)}
        if isinstance(node, Literal):
            if node.language:
                return {
                    "type": "literal",
                    "value": str(node),
                    "datatype": str(RDF.langString),
                    "language": node.language,
                }
            return {
                "type": "literal",
                "value": str(node),
                "datatype": str(node.datatype or XSD.string),
            }
        raise TransformError(
            f"Cannot represent {type(node).__name__} term {node!r} in JSON-LD",
            operation="from_rdf",
        )


def describe_dataset(rdf_dataset: Dict[str, Any]) -> str:
    """One-line summary of a converted dataset, for log messages."""
    named = [name for name in rdf_dataset if name != DEFAULT_GRAPH_KEY]
    default_count = len(rdf_dataset.get(DEFAULT_GRAPH_KEY, []))
    return f"{default_count} default-graph triples, {len(named)} named graphs"
