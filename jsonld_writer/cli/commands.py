"""
CLI command implementations.

Commands:
- convert: RDF file -> JSON-LD document
- context: RDF file -> derived default @context
"""

import argparse
import json
import logging
import sys
from enum import IntEnum
from typing import Any, Dict, Optional

from ..common.exceptions import ConfigurationError, TransformError
from ..converters import build_context
from ..formats.jsonld import JsonLDWriter, PyLdTransformer
from ..formats.jsonld.transformer import DEFAULT_REMOTE_CONTEXT_TIMEOUT
from ..formats.rdf import DatasetAdapter, RDFGraphParser
from ..shared.models import SerializationConfig, parse_json_text
from .helpers import load_config, load_json_file, setup_logging

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Process exit codes."""
    SUCCESS = 0
    CONFIG_ERROR = 1
    INPUT_ERROR = 2
    TRANSFORM_ERROR = 3
    IO_ERROR = 4


def _status(message: str) -> None:
    # stdout may carry the JSON-LD document
    print(message, file=sys.stderr)


class BaseCommand:
    """
    Base class for CLI commands.

    Loads the optional JSON configuration file and sets up logging from it.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self._config: Optional[Dict[str, Any]] = None

    @property
    def config(self) -> Dict[str, Any]:
        if self._config is None:
            self._config = load_config(self.config_path) if self.config_path else {}
        return self._config

    def setup_logging_from_config(self, args: argparse.Namespace) -> None:
        level = getattr(args, 'log_level', None) or self.config.get('log_level', 'WARNING')
        setup_logging(level=level, log_file=self.config.get('log_file'))

    def build_serialization_config(self, args: argparse.Namespace) -> SerializationConfig:
        """
        Merge the "serialization" section of the config file with CLI flags.

        CLI flags win over the configuration file.
        """
        config = SerializationConfig.from_mapping(self.config.get('serialization'))

        overrides: Dict[str, Any] = {}
        if getattr(args, 'base', None):
            overrides['base_uri'] = args.base
        if getattr(args, 'context', None):
            overrides['context'] = load_json_file(args.context, "context file")
        if getattr(args, 'context_substitution', None):
            overrides['context_substitution'] = parse_json_text(
                'context_substitution', args.context_substitution
            )
        if getattr(args, 'frame', None):
            overrides['frame'] = load_json_file(args.frame, "frame file")
        if getattr(args, 'prefer_prefixed', False):
            overrides['prefer_prefixed_properties'] = True
        if getattr(args, 'sort_triples', False):
            overrides['sort_triples'] = True

        return config.with_overrides(**overrides) if overrides else config

    def execute(self, args: argparse.Namespace) -> int:
        raise NotImplementedError


class ConvertCommand(BaseCommand):
    """
    Convert an RDF file to JSON-LD.

    Usage:
        convert <input> [--variant jsonld-flatten-pretty] [--output out.jsonld]
    """

    def execute(self, args: argparse.Namespace) -> int:
        try:
            self.setup_logging_from_config(args)
            config = self.build_serialization_config(args)
            transformer = PyLdTransformer(
                DatasetAdapter(progress=getattr(args, 'progress', False)),
                remote_context_timeout=float(
                    self.config.get('remote_context_timeout', DEFAULT_REMOTE_CONTEXT_TIMEOUT)
                ),
            )
            writer = JsonLDWriter(args.variant, transformer=transformer)
        except (ConfigurationError, ValueError, FileNotFoundError) as e:
            _status(f"✗ Configuration error: {e}")
            return ExitCode.CONFIG_ERROR

        try:
            graph, triple_count = RDFGraphParser.parse_file(args.input, args.input_format)
        except (ValueError, FileNotFoundError) as e:
            _status(f"✗ Could not read RDF input: {e}")
            return ExitCode.INPUT_ERROR

        logger.info(f"Writing {triple_count} triples as {writer.variant}")

        try:
            text = writer.serialize(graph, config=config)
        except ConfigurationError as e:
            _status(f"✗ Configuration error: {e}")
            return ExitCode.CONFIG_ERROR
        except TransformError as e:
            _status(f"✗ JSON-LD transformation failed: {e}")
            return ExitCode.TRANSFORM_ERROR

        try:
            if args.output:
                with open(args.output, 'w', encoding='utf-8', newline='') as f:
                    f.write(text)
                _status(f"✓ Saved to: {args.output}")
            else:
                sys.stdout.write(text)
                sys.stdout.flush()
        except OSError as e:
            _status(f"✗ Error writing output: {e}")
            return ExitCode.IO_ERROR

        return ExitCode.SUCCESS


class ContextCommand(BaseCommand):
    """
    Print the default @context the writer would derive for an RDF file.

    Usage:
        context <input> [--prefer-prefixed] [--sort-triples]
    """

    def execute(self, args: argparse.Namespace) -> int:
        try:
            self.setup_logging_from_config(args)
            config = self.build_serialization_config(args)
        except (ConfigurationError, ValueError, FileNotFoundError) as e:
            _status(f"✗ Configuration error: {e}")
            return ExitCode.CONFIG_ERROR

        try:
            graph, _ = RDFGraphParser.parse_file(args.input, args.input_format)
        except (ValueError, FileNotFoundError) as e:
            _status(f"✗ Could not read RDF input: {e}")
            return ExitCode.INPUT_ERROR

        context = build_context(
            graph,
            prefer_prefixed_properties=config.prefer_prefixed_properties,
            sort_triples=config.sort_triples,
        )
        print(json.dumps({"@context": context}, indent=2, ensure_ascii=False))
        return ExitCode.SUCCESS
