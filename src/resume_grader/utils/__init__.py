"""Shared utility functions.

This subpackage provides common utility functions used across
the application with no dependencies on other subpackages.

Key modules:
    - parsing: Code fence removal and JSON decoding
    - logging: Logging configuration and credential masking
    - protocols: Protocol definitions for dependency injection
"""

from .parsing import (
    strip_code_fences,
    parse_json_payload,
    strip_wrapping_quotes,
)
from .logging import configure_logging, get_logger, sanitize_text
from .protocols import ChatClientProtocol, TextExtractorProtocol

__all__ = [
    # parsing
    "strip_code_fences",
    "parse_json_payload",
    "strip_wrapping_quotes",
    # logging
    "configure_logging",
    "get_logger",
    "sanitize_text",
    # protocols
    "ChatClientProtocol",
    "TextExtractorProtocol",
]
