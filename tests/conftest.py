"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests, no JSON-LD processor involved
    pytest -m integration   # Tests running the PyLD processor end to end
"""

import os
import sys

import pytest
from rdflib import BNode, Graph, Literal, Namespace
from rdflib.namespace import RDF, XSD

# Add the repository root to the path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

EX = Namespace("http://example.org/")
PREFIXES = {"ex": "http://example.org/"}


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Tests running the JSON-LD processor")


class RecordingTransformer:
    """Transformer double that records every call and returns canned results."""

    def __init__(self, result=None, representation=None):
        self.calls = []
        self.result = result
        self.representation = representation if representation is not None else [
            {"@id": "http://example.org/Alice"}
        ]

    def call_names(self):
        return [call[0] for call in self.calls]

    def to_internal_form(self, dataset, options):
        self.calls.append(("to_internal_form", dataset, options))
        return self.representation

    def compact(self, representation, context, options):
        self.calls.append(("compact", representation, context, options))
        if self.result is not None:
            return self.result
        return {"@context": context, "@id": "ex:Alice"}

    def expand(self, representation, options):
        self.calls.append(("expand", representation, options))
        return representation

    def flatten(self, representation, context, options):
        self.calls.append(("flatten", representation, context, options))
        if self.result is not None:
            return self.result
        return {"@context": context, "@graph": [{"@id": "ex:Alice"}]}

    def frame(self, representation, frame, options):
        self.calls.append(("frame", representation, frame, options))
        if self.result is not None:
            return self.result
        return {"@context": frame.get("@context", {}), "@graph": []}


@pytest.fixture
def recording_transformer():
    """Transformer double with default canned results."""
    return RecordingTransformer()


@pytest.fixture
def alice_graph():
    """(ex:Alice, ex:name, "Alice") only."""
    g = Graph()
    g.add((EX.Alice, EX.name, Literal("Alice")))
    return g


@pytest.fixture
def person_graph():
    """A small graph mixing IRIs, blank nodes, typed and language-tagged literals."""
    g = Graph()
    g.bind("ex", EX)
    address = BNode()
    g.add((EX.Alice, RDF.type, EX.Person))
    g.add((EX.Alice, EX.name, Literal("Alice")))
    g.add((EX.Alice, EX.age, Literal("42", datatype=XSD.integer)))
    g.add((EX.Alice, EX.knows, EX.Bob))
    g.add((EX.Alice, EX.address, address))
    g.add((address, EX.city, Literal("Paris", lang="fr")))
    g.add((EX.Bob, EX.nick, Literal("bobby", datatype=XSD.string)))
    return g


@pytest.fixture
def sample_ttl_content():
    """Minimal valid Turtle content for testing."""
    return '''
        @prefix ex: <http://example.org/> .
        @prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

        ex:Alice a ex:Person ;
            ex:name "Alice" ;
            ex:age "42"^^xsd:integer ;
            ex:knows ex:Bob .
    '''


@pytest.fixture
def temp_ttl_file(tmp_path, sample_ttl_content):
    """Create a temporary Turtle file for testing."""
    ttl_file = tmp_path / "people.ttl"
    ttl_file.write_text(sample_ttl_content, encoding="utf-8")
    return str(ttl_file)
