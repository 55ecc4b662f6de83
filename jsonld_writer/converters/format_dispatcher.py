"""
Format Dispatcher - applies the transformation selected by the output form.

    EXPAND   -> the processor's expanded form, unchanged
    FRAME    -> transformer.frame(representation, config.frame)
    COMPACT  -> transformer.compact(representation, context)
    FLATTEN  -> transformer.flatten(representation, context)

For COMPACT and FLATTEN the context is the caller's explicit context or
one derived by ``ContextBuilder``; afterwards the ``@context`` value of the
result may be replaced by ``config.context_substitution``.
"""

import logging
from typing import Any, Dict, Optional

from rdflib import Graph

from ..common.exceptions import ConfigurationError
from ..shared.models import (
    JsonValue,
    OutputForm,
    PrefixMapping,
    SerializationConfig,
    TransformerProtocol,
)
from .context_builder import ContextBuilder

logger = logging.getLogger(__name__)


class FormatDispatcher:
    """
    Runs the transformer step for one output form.

    Holds no per-call state; a single dispatcher can serve concurrent writes.
    """

    def __init__(self, transformer: TransformerProtocol):
        self._transformer = transformer

    @staticmethod
    def check(form: Any, config: SerializationConfig) -> None:
        """
        Validate that ``form`` can be produced with ``config``.

        Called before any transformation so that configuration errors never
        reach the transformer.

        Raises:
            ConfigurationError: If the form is unknown or the frame form
                has no frame.
        """
        if not isinstance(form, OutputForm):
            raise ConfigurationError(f"Unexpected output form: {form!r}")
        if form is OutputForm.FRAME and not config.has_frame:
            raise ConfigurationError("No frame object found in the serialization config")

    def dispatch(
        self,
        form: OutputForm,
        representation: JsonValue,
        config: SerializationConfig,
        options: Dict[str, Any],
        graph: Optional[Graph] = None,
        prefixes: Optional[PrefixMapping] = None,
    ) -> JsonValue:
        """
        Transform the expanded representation into the requested form.

        Args:
            form: Output form.
            representation: Expanded JSON-LD from the transformer.
            config: Serialization settings.
            options: Transformer options.
            graph: Default graph, scanned when a context must be derived.
            prefixes: Prefix mapping used for a derived context.

        Returns:
            The JSON value to serialize.

        Raises:
            ConfigurationError: See ``check``.
            TransformError: If the transformer fails.
        """
        self.check(form, config)
        logger.debug(f"Dispatching JSON-LD output form: {form}")

        if form is OutputForm.EXPAND:
            return representation

        if form is OutputForm.FRAME:
            return self._transformer.frame(representation, config.frame, options)

        if not form.needs_context:
            raise ConfigurationError(f"Unexpected output form: {form!r}")

        context = self.resolve_context(config, graph, prefixes)
        if form is OutputForm.COMPACT:
            result = self._transformer.compact(representation, context, options)
        else:
            result = self._transformer.flatten(representation, context, options)

        if config.has_context_substitution:
            result = self.substitute_context(result, config.context_substitution)
        return result

    @staticmethod
    def resolve_context(
        config: SerializationConfig,
        graph: Optional[Graph],
        prefixes: Optional[PrefixMapping],
    ) -> JsonValue:
        """Get the explicit context, or derive one from the default graph."""
        if config.has_context:
            logger.debug("Using explicit JSON-LD context")
            return config.context
        if graph is None:
            raise ConfigurationError("A graph is required to derive a default context")

        builder = ContextBuilder(
            prefer_prefixed_properties=config.prefer_prefixed_properties,
            sort_triples=config.sort_triples,
        )
        return builder.build(graph, prefixes)

    @staticmethod
    def substitute_context(result: JsonValue, substitution: JsonValue) -> JsonValue:
        """
        Replace the ``@context`` value of an object result.

        Arrays, scalars and objects without ``@context`` are returned
        unchanged. The key keeps its position; sibling entries are untouched.
        """
        match result:
            case {"@context": _}:
                substituted = dict(result)
                substituted["@context"] = substitution
                return substituted
            case _:
                logger.debug("Result has no @context to substitute")
                return result
