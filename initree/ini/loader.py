"""
Loading INI documents from files, streams and strings.
"""

import codecs
from pathlib import Path
from typing import TextIO

import chardet

from ..const import DEFAULT_ENCODING, ENCODING_CONFIDENCE
from ..logging import get_logger
from .errors import IniFileError
from .format import ReaderConfig
from .parser import parse_string
from .section import Section


logger = get_logger("loader")


def decode(raw: bytes, encoding: str | None = None) -> str:
    """
    Decode raw file contents.

    The requested encoding (UTF-8 by default) is tried first. When it fails,
    the encoding is detected with chardet; a low-confidence guess falls back
    to latin-1, which accepts any byte sequence.

    Args:
        raw: File contents
        encoding: Preferred encoding

    Returns:
        Decoded text without a byte order mark
    """
    encoding = encoding or DEFAULT_ENCODING

    if raw.startswith(codecs.BOM_UTF8) and codecs.lookup(encoding).name == "utf-8":
        raw = raw[len(codecs.BOM_UTF8):]

    try:
        return raw.decode(encoding)
    except UnicodeDecodeError:
        logger.debug(f"Input is not valid {encoding}, detecting encoding")

    detected = chardet.detect(raw)
    guess = detected.get("encoding")
    confidence = detected.get("confidence") or 0.0

    if guess and confidence >= ENCODING_CONFIDENCE:
        try:
            text = raw.decode(guess)
            logger.debug(f"Decoded input as {guess} (confidence {confidence:.2f})")
            return text
        except (UnicodeDecodeError, LookupError):
            pass

    logger.debug("Falling back to latin-1")
    return raw.decode("latin-1")


def load_string(
    source: str,
    *,
    root: Section | None = None,
    lookups: bool = True,
    config: ReaderConfig | None = None,
    filename: str = "<string>",
) -> Section:
    """
    Load a document from a string.

    Args:
        source: INI source text
        root: Tree to parse into (a new root section if None)
        lookups: Resolve `%path%` markers after building
        config: Reader configuration
        filename: Filename for error messages

    Returns:
        The root section
    """
    return parse_string(source, root=root, lookups=lookups, config=config, filename=filename)


def load_stream(
    stream: TextIO,
    *,
    root: Section | None = None,
    lookups: bool = True,
    config: ReaderConfig | None = None,
) -> Section:
    """
    Load a document from an open text stream.

    The stream is read to the end; its `name` attribute, when present, is
    used in error messages.
    """
    filename = str(getattr(stream, "name", "<stream>"))

    try:
        source = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IniFileError(f"Failed to read {filename}: {e}") from e

    return parse_string(source, root=root, lookups=lookups, config=config, filename=filename)


def load_file(
    path: str | Path,
    *,
    encoding: str | None = None,
    root: Section | None = None,
    lookups: bool = True,
    config: ReaderConfig | None = None,
) -> Section:
    """
    Load a document from a file.

    Args:
        path: Path to the INI file
        encoding: Preferred encoding (UTF-8 if None)
        root: Tree to parse into (a new root section if None)
        lookups: Resolve `%path%` markers after building
        config: Reader configuration

    Returns:
        The root section

    Raises:
        IniFileError: If the file cannot be read
        IniSyntaxError: If the file is malformed
        IniLookupError: If a lookup or inheritance target does not resolve
    """
    path = Path(path)

    if not path.exists():
        raise IniFileError(f"File not found: {path}")

    if not path.is_file():
        raise IniFileError(f"Not a file: {path}")

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise IniFileError(f"Failed to read {path}: {e}") from e

    try:
        source = decode(raw, encoding)
    except LookupError as e:
        raise IniFileError(f"Unknown encoding: {encoding}") from e

    logger.debug(f"Loaded {len(raw)} bytes from {path}")
    return parse_string(source, root=root, lookups=lookups, config=config, filename=str(path))
