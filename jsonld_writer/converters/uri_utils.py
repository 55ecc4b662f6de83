"""
URI Utilities - local names and prefix abbreviation for context keys.

This module turns predicate IRIs into the short keys used in a derived
JSON-LD ``@context``.
"""

import logging
from typing import Optional, Tuple

from ..shared.models import PrefixMapping

logger = logging.getLogger(__name__)


class URIUtils:
    """
    Utility class for IRI splitting and abbreviation.

    Handles:
    - Extracting local names from IRIs (fragment or last path segment)
    - Abbreviating IRIs to "prefix:local" with a prefix mapping
    """

    # Characters that may not appear in the local part of an abbreviation
    UNSAFE_LOCAL_CHARS = ('/', '#', '?', ':')

    @staticmethod
    def split_iri(iri: str) -> Tuple[str, str]:
        """
        Split an IRI into namespace and local name.

        Args:
            iri: Absolute IRI

        Returns:
            Tuple of (namespace, local name); the local name is empty when
            the IRI ends with '#' or '/'.
        """
        if '#' in iri:
            namespace, local = iri.rsplit('#', 1)
            return namespace + '#', local
        if '/' in iri:
            namespace, local = iri.rsplit('/', 1)
            return namespace + '/', local
        return '', iri

    @staticmethod
    def local_name(iri: str) -> str:
        """
        Get the context key for a property used without a prefix.

        The key is the fragment, or the last path segment when there is no
        fragment. JSON-LD forbids the empty key, so an IRI ending with
        '#' or '/' is used whole.

        Args:
            iri: Property IRI

        Returns:
            Local name of the IRI, or the IRI itself
        """
        _, local = URIUtils.split_iri(iri)
        if not local:
            logger.debug(f"No local name in {iri}, using the full IRI as key")
            return iri
        return local

    @classmethod
    def abbreviate(cls, iri: str, prefixes: PrefixMapping) -> Optional[str]:
        """
        Abbreviate an IRI to "prefix:local" using a prefix mapping.

        The longest matching namespace wins. The empty prefix is never
        used since it cannot be a context key.

        Args:
            iri: IRI to abbreviate
            prefixes: Mapping of prefix to namespace IRI

        Returns:
            The abbreviated form, or None if no prefix applies
        """
        best: Optional[Tuple[str, str]] = None
        for prefix, namespace in prefixes.items():
            namespace = str(namespace)
            if not prefix or not namespace or not iri.startswith(namespace):
                continue
            local = iri[len(namespace):]
            if not cls.is_safe_local_part(local):
                continue
            if best is None or len(namespace) > len(best[1]):
                best = (prefix, namespace)

        if best is None:
            return None
        prefix, namespace = best
        return f"{prefix}:{iri[len(namespace):]}"

    @classmethod
    def is_safe_local_part(cls, local: str) -> bool:
        """Check that a string can follow "prefix:" in an abbreviation."""
        if not local:
            return False
        return not any(c in local for c in cls.UNSAFE_LOCAL_CHARS)
