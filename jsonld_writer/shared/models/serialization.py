"""
Serialization data types.

This module defines the output selection (form and variant) and the
typed configuration consumed by the writer.
"""

import json
import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from ...common.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
JsonObject = Dict[str, Any]

# prefix -> namespace IRI, in declaration order
PrefixMapping = Mapping[str, str]


class OutputForm(str, Enum):
    """JSON-LD document forms the writer can produce."""
    EXPAND = "expand"
    COMPACT = "compact"
    FLATTEN = "flatten"
    FRAME = "frame"

    def __str__(self) -> str:
        return self.value

    @property
    def needs_context(self) -> bool:
        """True when the form is compacted against a ``@context``."""
        return self in (OutputForm.COMPACT, OutputForm.FLATTEN)


class JsonLdVariant(Enum):
    """
    Caller-facing serialization variants.

    Each variant fixes an output form and whether the JSON text is
    pretty-printed. Names can be resolved from strings with ``resolve``:

        >>> JsonLdVariant.resolve("jsonld-flatten-flat")
        <JsonLdVariant.FLATTEN_FLAT: ...>
        >>> JsonLdVariant.resolve("jsonld").output_form
        <OutputForm.COMPACT: 'compact'>
    """
    COMPACT_PRETTY = ("compact-pretty", OutputForm.COMPACT, True)
    COMPACT_FLAT = ("compact-flat", OutputForm.COMPACT, False)
    EXPAND_PRETTY = ("expand-pretty", OutputForm.EXPAND, True)
    EXPAND_FLAT = ("expand-flat", OutputForm.EXPAND, False)
    FLATTEN_PRETTY = ("flatten-pretty", OutputForm.FLATTEN, True)
    FLATTEN_FLAT = ("flatten-flat", OutputForm.FLATTEN, False)
    FRAME_PRETTY = ("frame-pretty", OutputForm.FRAME, True)
    FRAME_FLAT = ("frame-flat", OutputForm.FRAME, False)

    def __init__(self, label: str, output_form: OutputForm, pretty: bool):
        self.label = label
        self.output_form = output_form
        self.pretty = pretty

    def __str__(self) -> str:
        return f"jsonld-{self.label}"

    @classmethod
    def resolve(cls, name: Union[str, "JsonLdVariant"]) -> "JsonLdVariant":
        """
        Resolve a variant from its name or an alias.

        Accepts "jsonld-compact-pretty", "compact-pretty", "COMPACT_PRETTY"
        and the short aliases "jsonld", "jsonld-pretty", "jsonld-flat".

        Raises:
            ConfigurationError: If the name matches no variant.
        """
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower().replace("_", "-")
        if normalized in _VARIANT_ALIASES:
            return _VARIANT_ALIASES[normalized]
        if normalized.startswith("jsonld-"):
            normalized = normalized[len("jsonld-"):]
        for variant in cls:
            if variant.label == normalized:
                return variant
        raise ConfigurationError(
            f"Unknown JSON-LD variant '{name}'. "
            f"Supported variants: {sorted(str(v) for v in cls)}"
        )


_VARIANT_ALIASES: Dict[str, JsonLdVariant] = {
    "jsonld": JsonLdVariant.COMPACT_PRETTY,
    "json-ld": JsonLdVariant.COMPACT_PRETTY,
    "jsonld-pretty": JsonLdVariant.COMPACT_PRETTY,
    "jsonld-flat": JsonLdVariant.COMPACT_FLAT,
}


# Symbol names accepted by the generic configuration side-channel
CONFIG_SYMBOLS: Dict[str, str] = {
    "JSONLD_CONTEXT": "context",
    "JSONLD_CONTEXT_SUBSTITUTION": "context_substitution",
    "JSONLD_FRAME": "frame",
    "JSONLD_OPTIONS": "options",
    "JSONLD_PREFER_PREFIXED_PROPS": "prefer_prefixed_properties",
}

JSON_TEXT_FIELDS = ("context", "context_substitution", "frame")


class _Unset:
    """Marker for a setting that was not given, distinct from JSON null."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def parse_json_text(field_name: str, text: str) -> JsonValue:
    """
    Parse a JSON text setting.

    Raises:
        ConfigurationError: If ``text`` is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON for '{field_name}' at line {e.lineno}, column {e.colno}: {e.msg}. "
            f"To use a bare IRI, pass it as a quoted JSON string."
        ) from e


@dataclass(frozen=True)
class SerializationConfig:
    """
    Per-call settings for the JSON-LD writer.

    Values are used as given. JSON text (from a configuration file, the
    CLI or ``Graph.serialize`` keywords) is parsed by ``from_mapping``
    before it gets here, so a bare IRI string is simply an IRI.

    Attributes:
        base_uri: Base IRI; relative IRIs in the output are computed
            against it. Overridden by the ``base_uri`` argument of a write.
        context: Explicit ``@context`` used for compact and flatten output
            instead of the derived one.
        context_substitution: Value that replaces ``@context`` in compact
            and flatten output after the transformation ran. ``None``
            writes ``"@context": null``; ``UNSET`` leaves it alone.
        frame: Frame object, required for the frame form.
        options: Processor options used unmodified instead of the defaults.
        prefer_prefixed_properties: Use "ex:p" rather than "p" as the
            context key for properties.
        sort_triples: Derive the default context from triples sorted by
            predicate, object and subject instead of store order.
    """
    base_uri: Optional[str] = None
    context: JsonValue = None
    context_substitution: Any = UNSET
    frame: JsonValue = None
    options: Optional[Dict[str, Any]] = None
    prefer_prefixed_properties: bool = False
    sort_triples: bool = False

    def __post_init__(self) -> None:
        if self.options is not None and not isinstance(self.options, dict):
            logger.warning(
                f"Processor options of type {type(self.options).__name__} are passed "
                f"through unchanged; the JSON-LD processor expects a dict"
            )

    @property
    def has_context(self) -> bool:
        return self.context is not None

    @property
    def has_context_substitution(self) -> bool:
        return self.context_substitution is not UNSET

    @property
    def has_frame(self) -> bool:
        return self.frame is not None

    def with_overrides(self, **changes: Any) -> "SerializationConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "SerializationConfig":
        """
        Build a configuration from a generic key/value mapping.

        Keys may be the symbol names (``JSONLD_CONTEXT``, ``JSONLD_FRAME``,
        ...) or the field names of this class. Unknown keys are ignored
        with a warning. String values of ``context``,
        ``context_substitution`` and ``frame`` are JSON text:

            >>> SerializationConfig.from_mapping(
            ...     {"JSONLD_CONTEXT_SUBSTITUTION": '"http://example.org/ctx.jsonld"'}
            ... ).context_substitution
            'http://example.org/ctx.jsonld'

        Args:
            mapping: Settings, e.g. the "serialization" section of a
                JSON configuration file.

        Returns:
            SerializationConfig with the recognized values.

        Raises:
            ConfigurationError: If a JSON text value does not parse.
        """
        if not mapping:
            return cls()

        field_names = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in mapping.items():
            name = CONFIG_SYMBOLS.get(key, key)
            if name not in field_names:
                logger.warning(f"Ignoring unknown serialization setting: {key}")
                continue
            if name in JSON_TEXT_FIELDS and isinstance(value, str):
                value = parse_json_text(name, value)
            values[name] = value

        for flag in ("prefer_prefixed_properties", "sort_triples"):
            if flag in values:
                values[flag] = bool(values[flag])

        return cls(**values)
