"""
Argument parsing configuration for the rdf-jsonld CLI.
"""

import argparse

from ..shared.models import JsonLdVariant


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('input', help='RDF input file')
    parser.add_argument(
        '--input-format',
        help='RDF serialization of the input (ttl, nt, trig, rdfxml, ...); inferred from the extension by default',
    )
    parser.add_argument('--config', help='JSON configuration file')
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Log level (default: WARNING, or "log_level" from the config file)',
    )
    parser.add_argument(
        '--prefer-prefixed',
        action='store_true',
        help='Use "ex:p" rather than "p" as context keys for properties',
    )
    parser.add_argument(
        '--sort-triples',
        action='store_true',
        help='Derive the default context from triples in a store-independent order',
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog='rdf-jsonld',
        description='Write RDF datasets as compacted, expanded, flattened or framed JSON-LD.',
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    convert = subparsers.add_parser('convert', help='Convert an RDF file to JSON-LD')
    _add_common_arguments(convert)
    convert.add_argument(
        '--variant', '-v',
        default=str(JsonLdVariant.COMPACT_PRETTY),
        help=(
            'Output variant: ' + ', '.join(str(v) for v in JsonLdVariant)
            + ' (default: %(default)s)'
        ),
    )
    convert.add_argument('--output', '-o', help='Output file (default: stdout)')
    convert.add_argument('--base', help='Base IRI for the output')
    convert.add_argument('--context', help='JSON file with the @context to compact with')
    convert.add_argument(
        '--context-substitution',
        help='JSON text that replaces @context in the output (quote bare IRIs: \'"http://..."\')',
    )
    convert.add_argument('--frame', help='JSON file with the frame (frame variants)')
    convert.add_argument('--progress', action='store_true', help='Show a progress bar')

    context = subparsers.add_parser('context', help='Print the default @context derived from an RDF file')
    _add_common_arguments(context)

    return parser
