"""
Exception types raised while producing JSON-LD output.

Write failures on the output stream are not wrapped: they surface as the
``OSError`` raised by the stream itself.
"""

from typing import Optional


class JsonLDWriterError(Exception):
    """Base class for all errors raised by the JSON-LD writer."""


class ConfigurationError(JsonLDWriterError):
    """Raised when the serialization settings cannot produce any output.
    
    Examples are a frame variant without a frame object, an unknown
    variant name, or configuration values that are not valid JSON.
    Always raised before the dataset is handed to the transformer.
    """


class TransformError(JsonLDWriterError):
    """Exception raised when the JSON-LD transformer fails.
    
    Attributes:
        operation: Transformer step that failed ("from_rdf", "compact", ...)
        error_type: Processor error type, e.g. "jsonld.CompactError"
        code: JSON-LD error code when the processor reports one
        cause: Original exception
    """
    
    def __init__(
        self,
        message: str,
        operation: str = "",
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.operation = operation
        self.error_type = error_type
        self.code = code
        self.cause = cause
        detail = f" ({code})" if code else ""
        prefix = f"[{operation}] " if operation else ""
        super().__init__(f"{prefix}{message}{detail}")
