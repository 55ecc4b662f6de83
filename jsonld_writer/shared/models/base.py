"""
Transformer protocol.

The JSON-LD algorithms (expansion, compaction, flattening, framing) are
provided by an external processor. The writer only talks to it through
this interface, so tests and alternative processors can be plugged in.
"""

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from .serialization import JsonValue


@runtime_checkable
class TransformerProtocol(Protocol):
    """
    Protocol for the JSON-LD processor used by the writer.
    
    Implementations must raise ``TransformError`` for any processing
    failure; other exception types are treated as programming errors.
    
    Example:
        >>> class EchoTransformer:
        ...     def to_internal_form(self, dataset, options):
        ...         return []
        ...     def compact(self, representation, context, options):
        ...         return {"@context": context}
        ...     def expand(self, representation, options):
        ...         return representation
        ...     def flatten(self, representation, context, options):
        ...         return {"@context": context, "@graph": []}
        ...     def frame(self, representation, frame, options):
        ...         return {"@graph": []}
    """
    
    def to_internal_form(self, dataset: Any, options: Dict[str, Any]) -> JsonValue:
        """
        Convert an RDF dataset into the processor's expanded JSON-LD form.
        
        Args:
            dataset: rdflib Graph, ConjunctiveGraph or Dataset.
            options: Processor options.
        
        Returns:
            Expanded JSON-LD document.
        """
        ...
    
    def compact(
        self,
        representation: JsonValue,
        context: JsonValue,
        options: Dict[str, Any],
    ) -> JsonValue:
        """Compact ``representation`` with ``context``."""
        ...
    
    def expand(self, representation: JsonValue, options: Dict[str, Any]) -> JsonValue:
        """Expand ``representation``."""
        ...
    
    def flatten(
        self,
        representation: JsonValue,
        context: Optional[JsonValue],
        options: Dict[str, Any],
    ) -> JsonValue:
        """Flatten ``representation`` and compact it with ``context``."""
        ...
    
    def frame(
        self,
        representation: JsonValue,
        frame: JsonValue,
        options: Dict[str, Any],
    ) -> JsonValue:
        """Reshape ``representation`` according to ``frame``."""
        ...
