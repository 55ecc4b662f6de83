"""
PyLD transformer.

Wraps ``pyld.jsonld`` behind the transformer protocol. Every
``JsonLdError`` raised by the processor is re-raised as
``TransformError``; remote contexts and frames are fetched with the
requests-based document loader.
"""

import logging
from typing import Any, Callable, Dict, Optional

from pyld import jsonld
from rdflib import Graph

from ...common.exceptions import TransformError
from ...shared.models import JsonValue
from ..rdf.dataset_adapter import DatasetAdapter, describe_dataset

logger = logging.getLogger(__name__)


DEFAULT_REMOTE_CONTEXT_TIMEOUT = 30.0


class PyLdTransformer:
    """
    JSON-LD transformer backed by PyLD.

    Args:
        adapter: Converts rdflib datasets to PyLD's RDF dataset form.
        remote_context_timeout: Timeout in seconds for fetching remote
            contexts and frames.
        document_loader: Loader used when the options do not set
            "documentLoader"; defaults to PyLD's requests loader.
    """

    def __init__(
        self,
        adapter: Optional[DatasetAdapter] = None,
        remote_context_timeout: float = DEFAULT_REMOTE_CONTEXT_TIMEOUT,
        document_loader: Optional[Callable[..., Any]] = None,
    ):
        self.adapter = adapter or DatasetAdapter()
        self._document_loader = document_loader or jsonld.requests_document_loader(
            timeout=remote_context_timeout
        )

    def to_internal_form(self, dataset: Graph, options: Dict[str, Any]) -> JsonValue:
        """Convert an rdflib dataset to expanded JSON-LD."""
        rdf_dataset = self.adapter.to_rdf_dataset(dataset)
        logger.debug(f"Converting {describe_dataset(rdf_dataset)} to JSON-LD")
        return self._run("from_rdf", jsonld.from_rdf, rdf_dataset, self._options(options))

    def compact(self, representation: JsonValue, context: JsonValue, options: Dict[str, Any]) -> JsonValue:
        return self._run("compact", jsonld.compact, representation, context, self._options(options))

    def expand(self, representation: JsonValue, options: Dict[str, Any]) -> JsonValue:
        return self._run("expand", jsonld.expand, representation, self._options(options))

    def flatten(
        self,
        representation: JsonValue,
        context: Optional[JsonValue],
        options: Dict[str, Any],
    ) -> JsonValue:
        return self._run("flatten", jsonld.flatten, representation, context, self._options(options))

    def frame(self, representation: JsonValue, frame: JsonValue, options: Dict[str, Any]) -> JsonValue:
        return self._run("frame", jsonld.frame, representation, frame, self._options(options))

    def _options(self, options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        # Copy so that caller-supplied options are never modified
        merged = dict(options or {})
        merged.setdefault("documentLoader", self._document_loader)
        return merged

    @staticmethod
    def _run(operation: str, func: Callable[..., JsonValue], *args: Any) -> JsonValue:
        try:
            return func(*args)
        except jsonld.JsonLdError as e:
            message = e.args[0] if e.args else str(e)
            # PyLD 2 keeps the nested error in .cause, PyLD 3 only chains it
            inner = getattr(e, "cause", None) or e.__cause__
            code = getattr(e, "code", None) or getattr(inner, "code", None)
            logger.error(f"JSON-LD {operation} failed: {message} [{e.type}]")
            raise TransformError(
                message,
                operation=operation,
                error_type=e.type,
                code=code,
                cause=e,
            ) from e
