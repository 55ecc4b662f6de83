#!/usr/bin/env python3
"""
RDF to JSON-LD command line entry point.

Usage:
    rdf-jsonld convert <input> [--variant <variant>] [--output <file>] [--config <config.json>]
    rdf-jsonld context <input> [--prefer-prefixed] [--sort-triples]
"""

import sys
from typing import List, Optional

from .cli import ContextCommand, ConvertCommand, ExitCode, create_argument_parser


# Command mapping from command name to Command class
COMMAND_MAP = {
    'convert': ConvertCommand,
    'context': ContextCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse command-line arguments and run the selected command.

    Returns:
        Process exit code.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.CONFIG_ERROR

    command_class = COMMAND_MAP[args.command]
    command = command_class(config_path=getattr(args, 'config', None))
    return int(command.execute(args))


if __name__ == '__main__':
    sys.exit(main())
