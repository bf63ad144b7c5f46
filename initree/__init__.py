"""
initree - hierarchical INI documents with section inheritance and lookups.
"""

from .const import APP_VERSION
from .ini import (
    IniError,
    IniLookupError,
    IniSyntaxError,
    MissingKeyError,
    MissingSectionError,
    ReaderConfig,
    ReaderFlags,
    Section,
    dumps,
    load_file,
    load_string,
    parse_string,
    save,
)

__version__ = APP_VERSION

__all__ = [
    "__version__",
    "IniError",
    "IniLookupError",
    "IniSyntaxError",
    "MissingKeyError",
    "MissingSectionError",
    "ReaderConfig",
    "ReaderFlags",
    "Section",
    "dumps",
    "load_file",
    "load_string",
    "parse_string",
    "save",
]
