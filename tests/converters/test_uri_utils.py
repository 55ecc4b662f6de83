"""
Unit tests for IRI splitting and prefix abbreviation.

Run with: python -m pytest tests/converters/test_uri_utils.py -v
"""

import pytest

from jsonld_writer.converters import URIUtils


@pytest.mark.unit
class TestLocalName:
    """Context keys for unprefixed properties."""

    @pytest.mark.parametrize("iri,expected", [
        ("http://example.org/name", "name"),
        ("http://example.org/vocab#name", "name"),
        ("http://example.org/a/b/c", "c"),
        ("http://example.org/vocab#a/b", "a/b"),
        ("urn:isbn", "urn:isbn"),
    ])
    def test_local_name(self, iri, expected):
        assert URIUtils.local_name(iri) == expected

    @pytest.mark.parametrize("iri", [
        "http://example.org/vocab#",
        "http://example.org/props/",
    ])
    def test_empty_local_name_falls_back_to_iri(self, iri):
        """JSON-LD has no empty term, so the whole IRI is the key."""
        assert URIUtils.local_name(iri) == iri


@pytest.mark.unit
class TestAbbreviate:
    """Prefix abbreviation with a prefix mapping."""

    def test_simple_abbreviation(self):
        prefixes = {"ex": "http://example.org/"}
        assert URIUtils.abbreviate("http://example.org/name", prefixes) == "ex:name"

    def test_longest_namespace_wins(self):
        prefixes = {
            "ex": "http://example.org/",
            "exv": "http://example.org/vocab/",
        }
        assert URIUtils.abbreviate("http://example.org/vocab/name", prefixes) == "exv:name"

    def test_no_matching_prefix(self):
        assert URIUtils.abbreviate("http://other.org/name", {"ex": "http://example.org/"}) is None

    def test_empty_prefix_is_not_used(self):
        assert URIUtils.abbreviate("http://example.org/name", {"": "http://example.org/"}) is None

    @pytest.mark.parametrize("iri", [
        "http://example.org/",
        "http://example.org/a/b",
        "http://example.org/a#b",
        "http://example.org/a?b",
    ])
    def test_unsafe_local_parts_are_rejected(self, iri):
        assert URIUtils.abbreviate(iri, {"ex": "http://example.org/"}) is None

    def test_shorter_namespace_used_when_longer_leaves_nothing(self):
        prefixes = {
            "ex": "http://example.org/",
            "exv": "http://example.org/vocab",
        }
        assert URIUtils.abbreviate("http://example.org/vocab", prefixes) == "ex:vocab"
