"""
Converters package - context derivation and output-form dispatch.

Components:
- uri_utils: local names and prefix abbreviation
- context_builder: default @context derived from an RDF graph
- options_resolver: JSON-LD processor options
- format_dispatcher: compact / expand / flatten / frame dispatch
"""

from .uri_utils import URIUtils
from .context_builder import ContextBuilder, build_context
from .options_resolver import OptionsResolver
from .format_dispatcher import FormatDispatcher

__all__ = [
    'URIUtils',
    'ContextBuilder',
    'build_context',
    'OptionsResolver',
    'FormatDispatcher',
]
