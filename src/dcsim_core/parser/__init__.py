# src/dcsim_core/parser/__init__.py
from .raw_data import ParsedComponentRecord, ParsedNetlist
from .text_format import (
    format_circuit_lines,
    parse_circuit_lines,
    parse_text_netlist,
    save_circuit_text,
)
from .yaml_format import NetlistParser
from .exceptions import FileIOError, ParsingError, SchemaValidationError

__all__ = [
    # IR Data Structures
    "ParsedComponentRecord",
    "ParsedNetlist",
    # Readers and Writers
    "NetlistParser",
    "parse_circuit_lines",
    "parse_text_netlist",
    "format_circuit_lines",
    "save_circuit_text",
    # Exceptions
    "FileIOError",
    "ParsingError",
    "SchemaValidationError",
]
