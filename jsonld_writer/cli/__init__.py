"""
CLI module for the RDF to JSON-LD writer.

- commands.py: Command implementations (convert, context)
- parsers.py: Argument parsing configuration
- helpers.py: Shared CLI utilities (logging, config loading)
"""

from .commands import (
    BaseCommand,
    ConvertCommand,
    ContextCommand,
    ExitCode,
)

from .parsers import create_argument_parser

from .helpers import (
    load_config,
    load_json_file,
    setup_logging,
)

__all__ = [
    # Commands
    'BaseCommand',
    'ConvertCommand',
    'ContextCommand',
    'ExitCode',
    # Parsers
    'create_argument_parser',
    # Helpers
    'load_config',
    'load_json_file',
    'setup_logging',
]
