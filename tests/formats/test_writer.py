"""
Tests for the JSON-LD writer.

Unit tests run against the recording transformer from conftest; the
integration tests run PyLD end to end on small graphs.

Run with: python -m pytest tests/formats/test_writer.py -v
"""

import io
import json

import pytest
from rdflib import Dataset, Literal, Namespace, URIRef
from rdflib.namespace import RDF

from jsonld_writer import (
    ConfigurationError,
    JsonLDWriter,
    JsonLdVariant,
    OutputForm,
    PyLdTransformer,
    SerializationConfig,
    TransformError,
)
from jsonld_writer.shared.models import TransformerProtocol

EX = Namespace("http://example.org/")
PREFIXES = {"ex": "http://example.org/"}


class BrokenStream(io.StringIO):
    def write(self, s):
        raise OSError("No space left on device")


class FailingTransformer:
    """Transformer whose compaction always fails."""

    def __init__(self):
        self.calls = []

    def to_internal_form(self, dataset, options):
        self.calls.append("to_internal_form")
        return []

    def compact(self, representation, context, options):
        raise TransformError("Could not process context before compaction.", operation="compact")

    def expand(self, representation, options):
        return representation

    def flatten(self, representation, context, options):
        raise TransformError("flatten failed", operation="flatten")

    def frame(self, representation, frame, options):
        raise TransformError("frame failed", operation="frame")


# =============================================================================
# Unit tests
# =============================================================================

@pytest.mark.unit
class TestWriterSetup:

    def test_default_variant(self, recording_transformer):
        writer = JsonLDWriter(transformer=recording_transformer)

        assert writer.variant is JsonLdVariant.COMPACT_PRETTY
        assert writer.output_form is OutputForm.COMPACT
        assert writer.pretty is True

    def test_variant_by_name(self, recording_transformer):
        writer = JsonLDWriter("jsonld-flatten-flat", transformer=recording_transformer)

        assert writer.output_form is OutputForm.FLATTEN
        assert writer.pretty is False
        assert repr(writer) == "JsonLDWriter('jsonld-flatten-flat')"

    def test_unknown_variant(self, recording_transformer):
        with pytest.raises(ConfigurationError):
            JsonLDWriter("jsonld-rainbow", transformer=recording_transformer)

    def test_transformers_satisfy_protocol(self, recording_transformer):
        assert isinstance(PyLdTransformer(), TransformerProtocol)
        assert isinstance(recording_transformer, TransformerProtocol)


@pytest.mark.unit
class TestWriterPipeline:
    """Options, prefixes and dispatch as seen by the transformer."""

    def test_default_options_with_base(self, recording_transformer, alice_graph):
        writer = JsonLDWriter("jsonld-expand-flat", transformer=recording_transformer)

        writer.to_json(alice_graph, base_uri="http://example.org/base/")

        name, dataset, options = recording_transformer.calls[0]
        assert name == "to_internal_form"
        assert dataset is alice_graph
        assert options == {
            "useNativeTypes": True,
            "compactArrays": True,
            "base": "http://example.org/base/",
        }

    def test_base_uri_from_config(self, recording_transformer, alice_graph):
        writer = JsonLDWriter("jsonld-expand-flat", transformer=recording_transformer)
        config = SerializationConfig(base_uri="http://example.org/config/")

        writer.to_json(alice_graph, config=config)

        assert recording_transformer.calls[0][2]["base"] == "http://example.org/config/"

    def test_base_uri_argument_overrides_config(self, recording_transformer, alice_graph):
        writer = JsonLDWriter("jsonld-expand-flat", transformer=recording_transformer)
        config = SerializationConfig(base_uri="http://example.org/config/")

        writer.to_json(alice_graph, base_uri="http://example.org/arg/", config=config)

        assert recording_transformer.calls[0][2]["base"] == "http://example.org/arg/"

    def test_caller_options_are_passed_unmodified(self, recording_transformer, alice_graph):
        caller = {"compactArrays": False}
        writer = JsonLDWriter("jsonld-compact-flat", transformer=recording_transformer)

        writer.to_json(alice_graph, prefixes=PREFIXES, config=SerializationConfig(options=caller))

        assert [call[-1] for call in recording_transformer.calls] == [caller, caller]
        assert caller == {"compactArrays": False}

    def test_expand_skips_context_derivation(self, recording_transformer, alice_graph):
        writer = JsonLDWriter("jsonld-expand-pretty", transformer=recording_transformer)

        result = writer.to_json(alice_graph)

        assert result == recording_transformer.representation
        assert recording_transformer.call_names() == ["to_internal_form"]

    def test_compact_derives_context_from_graph_prefixes(self, recording_transformer, alice_graph):
        alice_graph.bind("ex", EX)
        writer = JsonLDWriter("jsonld-compact-flat", transformer=recording_transformer)

        writer.to_json(alice_graph)

        context = recording_transformer.calls[1][2]
        assert context["name"] == "http://example.org/name"
        assert context["ex"] == "http://example.org/"

    def test_dataset_context_uses_default_graph(self, recording_transformer):
        ds = Dataset()
        ds.add((EX.Alice, EX.name, Literal("Alice")))
        ds.graph(URIRef("http://example.org/g1")).add((EX.Bob, EX.nick, Literal("bob")))
        writer = JsonLDWriter("jsonld-compact-flat", transformer=recording_transformer)

        writer.to_json(ds, prefixes=PREFIXES)

        context = recording_transformer.calls[1][2]
        assert "name" in context
        assert "nick" not in context

    def test_frame_without_frame_never_reaches_transformer(self, recording_transformer, alice_graph):
        writer = JsonLDWriter("jsonld-frame-pretty", transformer=recording_transformer)
        out = io.StringIO()

        with pytest.raises(ConfigurationError):
            writer.write(out, alice_graph)

        assert recording_transformer.calls == []
        assert out.getvalue() == ""


@pytest.mark.unit
class TestWriterOutput:
    """Text rendering and stream handling."""

    def test_flat_output_is_one_line(self, recording_transformer, alice_graph):
        recording_transformer.result = {"@context": {"name": "http://example.org/name"}, "name": "Zoë"}
        writer = JsonLDWriter("jsonld-compact-flat", transformer=recording_transformer)

        text = writer.serialize(alice_graph, prefixes=PREFIXES)

        assert text == '{"@context":{"name":"http://example.org/name"},"name":"Zoë"}\n'

    def test_pretty_output_is_indented(self, recording_transformer, alice_graph):
        recording_transformer.result = {"@context": {"name": "http://example.org/name"}, "name": "Alice"}
        writer = JsonLDWriter("jsonld-compact-pretty", transformer=recording_transformer)

        text = writer.serialize(alice_graph, prefixes=PREFIXES)

        assert text.startswith('{\n  "@context": {\n    "name"')
        assert text.endswith("}\n")
        assert not text.endswith("\n\n")
        assert json.loads(text) == recording_transformer.result

    def test_write_to_text_stream(self, recording_transformer, alice_graph):
        writer = JsonLDWriter("jsonld-expand-flat", transformer=recording_transformer)
        out = io.StringIO()

        writer.write(out, alice_graph)

        assert out.getvalue() == '[{"@id":"http://example.org/Alice"}]\n'

    def test_write_binary_is_utf8(self, recording_transformer, alice_graph):
        recording_transformer.result = {"@context": {}, "name": "Zoë"}
        writer = JsonLDWriter("jsonld-compact-flat", transformer=recording_transformer)
        out = io.BytesIO()

        writer.write_binary(out, alice_graph, prefixes=PREFIXES)

        assert not out.closed
        assert out.getvalue() == '{"@context":{},"name":"Zoë"}\n'.encode("utf-8")

    def test_stream_errors_propagate(self, recording_transformer, alice_graph):
        writer = JsonLDWriter("jsonld-expand-flat", transformer=recording_transformer)

        with pytest.raises(OSError, match="No space left"):
            writer.write(BrokenStream(), alice_graph)

    def test_transform_error_leaves_no_output(self, alice_graph):
        writer = JsonLDWriter("jsonld-compact-pretty", transformer=FailingTransformer())
        out = io.StringIO()

        with pytest.raises(TransformError) as exc_info:
            writer.write(out, alice_graph, prefixes=PREFIXES)

        assert exc_info.value.operation == "compact"
        assert out.getvalue() == ""

    def test_unserializable_result_is_transform_error(self, recording_transformer, alice_graph):
        recording_transformer.result = {"@context": {}, "value": object()}
        writer = JsonLDWriter("jsonld-compact-flat", transformer=recording_transformer)

        with pytest.raises(TransformError) as exc_info:
            writer.serialize(alice_graph, prefixes=PREFIXES)

        assert exc_info.value.operation == "serialize"


# =============================================================================
# Integration tests (PyLD)
# =============================================================================

@pytest.mark.integration
class TestPyLdOutput:
    """End-to-end output through the PyLD processor."""

    def test_compact_pretty(self, alice_graph):
        text = JsonLDWriter("jsonld-compact-pretty").serialize(alice_graph, prefixes=PREFIXES)
        result = json.loads(text)

        assert result["@context"] == {
            "name": "http://example.org/name",
            "ex": "http://example.org/",
        }
        assert result["name"] == "Alice"
        assert result["@id"] in ("ex:Alice", "http://example.org/Alice")
        assert text.endswith("}\n")

    def test_compact_flat_is_one_line(self, alice_graph):
        text = JsonLDWriter("jsonld-compact-flat").serialize(alice_graph, prefixes=PREFIXES)

        assert text.count("\n") == 1
        assert text.endswith("\n")

    def test_expand_uses_native_types(self, person_graph):
        result = json.loads(JsonLDWriter("jsonld-expand-flat").serialize(person_graph))

        alice = next(node for node in result if node.get("@id") == "http://example.org/Alice")
        assert alice["@type"] == ["http://example.org/Person"]
        assert alice["http://example.org/name"] == [{"@value": "Alice"}]
        assert alice["http://example.org/age"] == [{"@value": 42}]

    def test_expand_keeps_named_graphs(self):
        ds = Dataset()
        ds.add((EX.Alice, EX.name, Literal("Alice")))
        ds.graph(URIRef("http://example.org/g1")).add((EX.Bob, EX.name, Literal("Bob")))

        result = json.loads(JsonLDWriter("jsonld-expand-flat").serialize(ds))

        assert any(
            node.get("@id") == "http://example.org/g1" and "@graph" in node
            for node in result
        )

    def test_flatten_has_graph(self, alice_graph):
        result = json.loads(JsonLDWriter("jsonld-flatten-flat").serialize(alice_graph, prefixes=PREFIXES))

        assert "@context" in result
        assert isinstance(result["@graph"], list)
        assert result["@graph"][0]["name"] == "Alice"

    def test_flatten_with_context_substitution(self, alice_graph):
        config = SerializationConfig(context_substitution="http://example.org/context.jsonld")

        result = json.loads(
            JsonLDWriter("jsonld-flatten-pretty").serialize(alice_graph, prefixes=PREFIXES, config=config)
        )

        assert result["@context"] == "http://example.org/context.jsonld"
        assert result["@graph"][0]["name"] == "Alice"

    def test_frame(self, alice_graph):
        alice_graph.add((EX.Alice, RDF.type, EX.Person))
        config = SerializationConfig(frame={
            "@context": {"ex": "http://example.org/"},
            "@type": "ex:Person",
        })

        text = JsonLDWriter("jsonld-frame-pretty").serialize(alice_graph, config=config)
        result = json.loads(text)

        assert result["@context"] == {"ex": "http://example.org/"}
        assert "Alice" in text

    def test_invalid_context_is_transform_error(self, alice_graph):
        config = SerializationConfig(context=42)

        with pytest.raises(TransformError) as exc_info:
            JsonLDWriter("jsonld-compact-pretty").serialize(alice_graph, config=config)

        assert exc_info.value.operation == "compact"
        assert exc_info.value.cause is not None
