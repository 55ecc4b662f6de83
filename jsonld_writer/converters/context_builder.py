"""
Context Builder - derives a default JSON-LD @context from an RDF graph.

Every predicate of the default graph (except rdf:type) becomes a term:

    "name": "http://example.org/name"                          plain/lang strings
    "knows": {"@id": "http://example.org/knows", "@type": "@id"}  IRIs, blank nodes
    "age": {"@id": "http://example.org/age", "@type": xsd:integer}  typed literals

followed by one entry per declared prefix. The first triple seen for a key
decides its definition; prefixes never overwrite a property key.
"""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import RDF, XSD
from rdflib.term import Node

from ..shared.models import JsonObject, PrefixMapping
from .uri_utils import URIUtils

logger = logging.getLogger(__name__)


Triple = Tuple[Node, Node, Node]

# Literal datatypes that compact as plain strings
PLAIN_STRING_DATATYPES = frozenset({RDF.langString, XSD.string})


class ContextBuilder:
    """
    Builds the default ``@context`` used for compact and flatten output.

    Instances are immutable; ``build`` returns a new mapping on every call.

    Example:
        >>> builder = ContextBuilder(prefer_prefixed_properties=True)
        >>> context = builder.build(graph, {"ex": "http://example.org/"})
    """

    def __init__(self, prefer_prefixed_properties: bool = False, sort_triples: bool = False):
        """
        Args:
            prefer_prefixed_properties: Use "ex:p" rather than "p" as the key
                when a prefix covers the predicate.
            sort_triples: Visit triples ordered by predicate, object and
                subject instead of store order.
        """
        self._prefer_prefixed_properties = prefer_prefixed_properties
        self._sort_triples = sort_triples

    @property
    def prefer_prefixed_properties(self) -> bool:
        return self._prefer_prefixed_properties

    @property
    def sort_triples(self) -> bool:
        return self._sort_triples

    def build(self, graph: Graph, prefixes: Optional[PrefixMapping] = None) -> JsonObject:
        """
        Derive a context from the triples of ``graph``.

        Args:
            graph: Graph whose triples are scanned (the default graph of a
                dataset).
            prefixes: Prefix mapping; defaults to the graph's namespace
                bindings.

        Returns:
            Ordered context mapping, properties first, then prefixes.
        """
        if prefixes is None:
            prefixes = self.namespace_bindings(graph)

        context: Dict[str, Any] = {}
        for subject, predicate, obj in self._triples(graph):
            if predicate == RDF.type or not isinstance(predicate, URIRef):
                continue

            key = self.property_key(predicate, prefixes)
            if key in context:
                continue

            definition = self.term_definition(predicate, obj)
            if definition is not None:
                context[key] = definition

        property_count = len(context)
        for prefix, namespace in prefixes.items():
            # JSON-LD does not allow "" as a term
            if not prefix:
                continue
            context.setdefault(prefix, str(namespace))

        logger.debug(
            f"Derived context with {property_count} properties and "
            f"{len(context) - property_count} prefixes"
        )
        return context

    def property_key(self, predicate: URIRef, prefixes: PrefixMapping) -> str:
        """Get the context key for a predicate."""
        iri = str(predicate)
        if self._prefer_prefixed_properties:
            abbreviated = URIUtils.abbreviate(iri, prefixes)
            if abbreviated is not None:
                return abbreviated
        return URIUtils.local_name(iri)

    @staticmethod
    def term_definition(predicate: URIRef, obj: Node) -> Any:
        """
        Get the context value for a predicate given one of its objects.

        Returns:
            The predicate IRI for plain strings, a ``{"@id", "@type"}``
            mapping for IRIs, blank nodes and typed literals, or None for
            terms that are neither.
        """
        iri = str(predicate)
        if isinstance(obj, (URIRef, BNode)):
            return {"@id": iri, "@type": "@id"}
        if isinstance(obj, Literal):
            datatype = obj.datatype
            if datatype is None or obj.language or datatype in PLAIN_STRING_DATATYPES:
                return iri
            return {"@id": iri, "@type": str(datatype)}
        return None

    def _triples(self, graph: Graph) -> Iterable[Triple]:
        triples = graph.triples((None, None, None))
        if not self._sort_triples:
            return triples
        return sorted(triples, key=lambda t: (t[1].n3(), t[2].n3(), t[0].n3()))

    @staticmethod
    def namespace_bindings(graph: Graph) -> Dict[str, str]:
        """
        Get the prefix mapping bound on a graph's namespace manager.

        A ``Graph()`` created with rdflib's defaults already binds dozens of
        well-known prefixes (brick, dcat, schema, ...), and all of them end
        up in a derived context. Create graphs with
        ``Graph(bind_namespaces="none")``, or pass ``prefixes`` explicitly,
        to keep only the prefixes you declared.
        """
        return {prefix: str(namespace) for prefix, namespace in graph.namespace_manager.namespaces()}

    @staticmethod
    def default_graph(dataset: Graph) -> Graph:
        """Get the default graph of a dataset; a plain graph is its own default graph."""
        if not getattr(dataset, "context_aware", False):
            return dataset
        # newer rdflib releases deprecate default_context in favour of default_graph
        default = getattr(dataset, "default_graph", None)
        if isinstance(default, Graph):
            return default
        return dataset.default_context


def build_context(
    graph: Graph,
    prefixes: Optional[PrefixMapping] = None,
    prefer_prefixed_properties: bool = False,
    sort_triples: bool = False,
) -> JsonObject:
    """
    Derive a default JSON-LD context for ``graph``.

    Convenience wrapper around ``ContextBuilder``; useful to start a
    hand-written context from the one the writer would generate.

    Args:
        graph: Graph or dataset; for a dataset only the default graph is used.
        prefixes: Prefix mapping; defaults to the graph's namespace bindings.
        prefer_prefixed_properties: Use "ex:p" rather than "p" as keys.
        sort_triples: Derive from triples in a store-independent order.

    Returns:
        Ordered context mapping.
    """
    if prefixes is None:
        prefixes = ContextBuilder.namespace_bindings(graph)
    builder = ContextBuilder(prefer_prefixed_properties, sort_triples)
    return builder.build(ContextBuilder.default_graph(graph), prefixes)
