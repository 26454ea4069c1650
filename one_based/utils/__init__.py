"""Utility modules."""

from .int_parser import parse_nonzero, parse_unsigned
from .logger_setup import get_logger, LoggerManager
from .schemas import one_based_core_schema, one_based_json_schema, serialize_one_based

__all__ = [
    # Parsing utilities
    "parse_nonzero",
    "parse_unsigned",
    # Logging utilities
    "get_logger",
    "LoggerManager",
    # Pydantic integration
    "one_based_core_schema",
    "one_based_json_schema",
    "serialize_one_based",
]
