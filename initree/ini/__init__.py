"""
INI reading, tree building, lookup resolution and writing.
"""

from .errors import (
    IniError,
    IniFileError,
    IniLookupError,
    IniSyntaxError,
    MissingKeyError,
    MissingSectionError,
)
from .format import IniFormat, ReaderConfig, ReaderFlags
from .loader import load_file, load_stream, load_string
from .lookups import resolve_lookups
from .parser import IniParser, parse_string
from .reader import KeyValue, Reader, SectionHeader, Token, tokenize
from .section import Section
from .siphon import bool_value, siphon
from .writer import dumps, save

__all__ = [
    "IniError",
    "IniFileError",
    "IniLookupError",
    "IniSyntaxError",
    "MissingKeyError",
    "MissingSectionError",
    "IniFormat",
    "ReaderConfig",
    "ReaderFlags",
    "Reader",
    "Token",
    "SectionHeader",
    "KeyValue",
    "tokenize",
    "Section",
    "IniParser",
    "parse_string",
    "resolve_lookups",
    "load_file",
    "load_stream",
    "load_string",
    "dumps",
    "save",
    "siphon",
    "bool_value",
]
