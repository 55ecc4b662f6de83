"""
JSON-LD writer.

Serializes an rdflib dataset as JSON-LD in one of four forms (compact,
expand, flatten, frame), pretty-printed or on a single line:

    writer = JsonLDWriter("jsonld-compact-pretty")
    text = writer.serialize(graph, prefixes={"ex": "http://example.org/"})

For compact and flatten output a default ``@context`` is derived from the
graph unless ``SerializationConfig.context`` is given. The complete
document is built before anything is written, so a failed transformation
never leaves partial output behind.
"""

import io
import json
import logging
from typing import BinaryIO, Optional, TextIO, Union

from rdflib import Graph

from ...common.exceptions import TransformError
from ...converters import ContextBuilder, FormatDispatcher, OptionsResolver
from ...shared.models import (
    JsonLdVariant,
    JsonValue,
    OutputForm,
    PrefixMapping,
    SerializationConfig,
    TransformerProtocol,
)
from .transformer import PyLdTransformer

logger = logging.getLogger(__name__)


class JsonLDWriter:
    """
    Writer for one JSON-LD variant.

    The variant (output form and pretty flag) is fixed at construction and
    the writer keeps no per-call state, so one instance can be shared
    between threads as long as the transformer and graphs allow
    concurrent reads.

    Args:
        variant: Variant or variant name, e.g. "jsonld-flatten-flat".
        transformer: JSON-LD processor; defaults to PyLD.
    """

    def __init__(
        self,
        variant: Union[JsonLdVariant, str] = JsonLdVariant.COMPACT_PRETTY,
        transformer: Optional[TransformerProtocol] = None,
    ):
        self._variant = JsonLdVariant.resolve(variant)
        self._transformer = transformer or PyLdTransformer()
        self._dispatcher = FormatDispatcher(self._transformer)

    def __repr__(self) -> str:
        return f"JsonLDWriter({str(self._variant)!r})"

    @property
    def variant(self) -> JsonLdVariant:
        return self._variant

    @property
    def output_form(self) -> OutputForm:
        return self._variant.output_form

    @property
    def pretty(self) -> bool:
        return self._variant.pretty

    def to_json(
        self,
        dataset: Graph,
        prefixes: Optional[PrefixMapping] = None,
        base_uri: Optional[str] = None,
        config: Optional[SerializationConfig] = None,
    ) -> JsonValue:
        """
        Build the JSON-LD document without serializing it.

        Args:
            dataset: rdflib Graph, ConjunctiveGraph or Dataset.
            prefixes: Prefix mapping for the derived context; defaults to
                the dataset's namespace bindings.
            base_uri: Base IRI; overrides ``config.base_uri``.
            config: Serialization settings.

        Returns:
            The JSON value of the document.

        Raises:
            ConfigurationError: Before any transformation, for an unusable
                configuration.
            TransformError: If the transformer fails.
        """
        config = config or SerializationConfig()
        if base_uri is None:
            base_uri = config.base_uri

        form = self.output_form
        FormatDispatcher.check(form, config)

        graph = None
        if form.needs_context and not config.has_context:
            graph = ContextBuilder.default_graph(dataset)
            if prefixes is None:
                prefixes = ContextBuilder.namespace_bindings(dataset)

        options = OptionsResolver.resolve(base_uri, config.options)
        representation = self._transformer.to_internal_form(dataset, options)

        return self._dispatcher.dispatch(
            form,
            representation,
            config,
            options,
            graph=graph,
            prefixes=prefixes,
        )

    def serialize(
        self,
        dataset: Graph,
        prefixes: Optional[PrefixMapping] = None,
        base_uri: Optional[str] = None,
        config: Optional[SerializationConfig] = None,
    ) -> str:
        """Return the JSON-LD document as text, ending with a newline."""
        return self.render(self.to_json(dataset, prefixes, base_uri, config))

    def write(
        self,
        out: TextIO,
        dataset: Graph,
        prefixes: Optional[PrefixMapping] = None,
        base_uri: Optional[str] = None,
        config: Optional[SerializationConfig] = None,
    ) -> None:
        """
        Write the JSON-LD document to a text stream.

        Raises:
            ConfigurationError, TransformError: Nothing has been written.
            OSError: If the stream rejects the output.
        """
        text = self.serialize(dataset, prefixes, base_uri, config)
        out.write(text)

    def write_binary(
        self,
        out: BinaryIO,
        dataset: Graph,
        prefixes: Optional[PrefixMapping] = None,
        base_uri: Optional[str] = None,
        config: Optional[SerializationConfig] = None,
    ) -> None:
        """
        Write the JSON-LD document to a binary stream as UTF-8.

        The stream is flushed but left open.
        """
        text = self.serialize(dataset, prefixes, base_uri, config)
        wrapper = io.TextIOWrapper(out, encoding="utf-8", newline="")
        try:
            wrapper.write(text)
            wrapper.flush()
        finally:
            wrapper.detach()

    def render(self, value: JsonValue) -> str:
        """Serialize a JSON value, pretty or compact, with a trailing newline."""
        try:
            if self.pretty:
                text = json.dumps(value, indent=2, ensure_ascii=False)
            else:
                text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise TransformError(
                f"Result is not serializable as JSON: {e}",
                operation="serialize",
                cause=e,
            ) from e
        return text + "\n"
