"""
Options Resolver - processor options for a single write.

Caller-supplied options are used unmodified. Otherwise the defaults aim
at idiomatic JSON rather than verbose expanded JSON-LD:

- useNativeTypes: xsd:integer, xsd:double and xsd:boolean literals
  become JSON numbers and booleans
- compactArrays: single-element arrays collapse to the bare value
- base: relative IRIs are computed against the base IRI, when one is given

Compact IRIs ("ex:name") need no extra flag: the processor uses any
context term ending in '/' or '#' as a prefix.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class OptionsResolver:
    """Produces the options passed to the JSON-LD transformer."""

    DEFAULT_OPTIONS: Dict[str, Any] = {
        "useNativeTypes": True,
        "compactArrays": True,
    }

    @classmethod
    def resolve(
        cls,
        base_uri: Optional[str],
        caller_options: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Resolve transformer options.

        Args:
            base_uri: Base IRI of the output, or None.
            caller_options: Options supplied by the caller. The caller is
                responsible for their coherence, including the base IRI.

        Returns:
            Options dict for the transformer.
        """
        if caller_options is not None:
            logger.debug("Using caller-supplied JSON-LD options")
            return caller_options

        options = dict(cls.DEFAULT_OPTIONS)
        if base_uri is not None:
            options["base"] = base_uri
        return options
