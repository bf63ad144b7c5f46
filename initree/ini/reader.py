"""
Reader (tokenizer) for INI-like documents.

Supports:
- Full-line comments (# and ; by default, only when leading)
- Section headers with optional inheritance: [name] and [name : parent.path]
- Bare and double-quoted keys
- Quoted values with escape sequences (\\n, \\t, \\\\, \\")
- Verbatim multi-line values delimited by triple quotes
- Line continuation with a trailing backslash
"""

import re
from dataclasses import dataclass
from typing import Iterator

from ..logging import get_logger
from .errors import IniSyntaxError
from .format import DEFAULT_CONFIG, ReaderConfig, ReaderFlags


logger = get_logger("reader")

# Only CR, LF and CRLF end a line
LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass
class SectionHeader:
    """A `[name]` or `[name : parent.path]` line."""

    name: str
    inherits: str | None = None
    line: int = 0
    raw: str = ""

    def __repr__(self) -> str:
        if self.inherits:
            return f"SectionHeader({self.name!r} : {self.inherits!r}, line {self.line})"
        return f"SectionHeader({self.name!r}, line {self.line})"


@dataclass
class KeyValue:
    """A fully decoded `key = value` assignment."""

    key: str
    value: str
    line: int = 0
    raw: str = ""

    def __repr__(self) -> str:
        return f"KeyValue({self.key!r}, {self.value!r}, line {self.line})"


Token = SectionHeader | KeyValue


class Reader:
    """
    Line-oriented tokenizer parameterized by a ReaderConfig.

    The reader scans forward only; each token is produced once, in order.

    Example:
        for token in Reader('[server]\\nhost = "localhost"'):
            print(token)
    """

    ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}

    def __init__(
        self,
        source: str,
        config: ReaderConfig | None = None,
        filename: str = "<string>",
    ):
        self.source = source
        self.config = config or DEFAULT_CONFIG
        self.format = self.config.format
        self.filename = filename
        self.lines = LINE_BREAK.split(source)
        self.pos = 0    # index of the next unread line
        self.line = 0   # 1-based number of the line last read

    def _error(self, message: str, line: int, raw: str) -> IniSyntaxError:
        return IniSyntaxError(message, line, raw, self.filename)

    def _next_line(self) -> str | None:
        """Consume the next line, or return None at end of input."""
        if self.pos >= len(self.lines):
            return None
        text = self.lines[self.pos]
        self.pos += 1
        self.line = self.pos
        return text

    def _read_section(self, text: str, line: int, raw: str) -> SectionHeader:
        fmt = self.format
        if (
            not text.endswith(fmt.section_close)
            or len(text) < len(fmt.section_open) + len(fmt.section_close)
        ):
            raise self._error("Malformed section header, missing closing bracket", line, raw)

        inner = text[len(fmt.section_open):-len(fmt.section_close)]
        # [a : b : c] inherits from b; later segments are ignored
        parts = inner.split(fmt.inherit_separator)
        name = parts[0].strip()
        parent = parts[1].strip() if len(parts) > 1 else ""

        if not name:
            raise self._error("Empty section name", line, raw)
        if len(parts) > 1 and not parent:
            raise self._error("Missing inheritance target after separator", line, raw)

        return SectionHeader(name=name, inherits=parent or None, line=line, raw=raw)

    def _split_key(self, text: str, line: int, raw: str) -> tuple[str, str]:
        """Split an assignment line into key and undecoded value text."""
        fmt = self.format
        marker = fmt.assignment_marker

        if self.config.has(ReaderFlags.QUOTED_KEYS) and text.startswith(fmt.quote):
            end = text.find(fmt.quote, 1)
            if end == -1:
                raise self._error("Unterminated quoted key", line, raw)
            key = text[1:end]
            rest = text[end + 1:].lstrip()
            if not rest:
                return key, ""
            if not rest.startswith(marker):
                raise self._error("Expected assignment after quoted key", line, raw)
            return key, rest[len(marker):]

        index = text.find(marker)
        if index == -1:
            # Bare key without a value
            key, value = text.strip(), ""
        else:
            key, value = text[:index].strip(), text[index + len(marker):]

        if not key:
            raise self._error("Missing key name", line, raw)
        return key, value

    def _read_multiline(self, rest: str, line: int, raw: str) -> str:
        """Read a triple-quoted block; rest follows the opening delimiter."""
        delimiter = self.format.multiline_quote
        parts = []
        current = rest

        while True:
            end = current.find(delimiter)
            if end != -1:
                parts.append(current[:end])
                if current[end + len(delimiter):].strip():
                    raise self._error(
                        "Unexpected text after multi-line value", self.line, current
                    )
                return "\n".join(parts)

            parts.append(current)
            following = self._next_line()
            if following is None:
                raise self._error("Unterminated multi-line value", line, raw)
            current = following

    def _read_quoted(self, value: str, line: int, raw: str) -> str:
        """Decode a single-line quoted value; value starts with the quote."""
        quote = self.format.quote
        escapes = self.config.has(ReaderFlags.PROCESS_ESCAPES)
        result = []
        i = 1

        while i < len(value):
            char = value[i]

            if escapes and char == "\\":
                if i + 1 >= len(value):
                    break
                escape_char = value[i + 1]
                if escape_char == quote:
                    result.append(quote)
                elif escape_char in self.ESCAPES:
                    result.append(self.ESCAPES[escape_char])
                else:
                    # Unknown escapes are kept as written
                    result.append(char + escape_char)
                i += 2
                continue

            if char == quote:
                if value[i + 1:].strip():
                    raise self._error("Unexpected text after quoted value", line, raw)
                return "".join(result)

            result.append(char)
            i += 1

        raise self._error("Unterminated quoted value", line, raw)

    def _read_continued(self, value: str) -> str:
        """Join continuation lines onto an unquoted value."""
        marker = self.format.continuation_marker

        while value.endswith(marker):
            value = value[:-len(marker)].rstrip()
            following = self._next_line()
            if following is None:
                break
            value = f"{value} {following.strip()}"

        return value.strip()

    def _read_value(self, text: str, line: int, raw: str) -> str:
        fmt = self.format
        value = text.strip()

        if self.config.has(ReaderFlags.MULTILINE_QUOTES) and value.startswith(fmt.multiline_quote):
            rest = text.lstrip()[len(fmt.multiline_quote):]
            return self._read_multiline(rest, line, raw)

        if value.startswith(fmt.quote):
            return self._read_quoted(value, line, raw)

        if self.config.has(ReaderFlags.LINE_CONTINUATION):
            return self._read_continued(value)

        return value

    def next_token(self) -> Token | None:
        """Get the next token, or None when the input is exhausted."""
        fmt = self.format

        while True:
            raw = self._next_line()
            if raw is None:
                return None

            line = self.line
            text = raw.strip()

            if not text or fmt.is_comment(text[0]):
                continue

            if text.startswith(fmt.section_open):
                return self._read_section(text, line, raw)

            # Trailing whitespace may belong to a multi-line value
            key, value_text = self._split_key(raw.lstrip(), line, raw)
            value = self._read_value(value_text, line, raw)
            return KeyValue(key=key, value=value, line=line, raw=raw)

    def tokenize(self) -> Iterator[Token]:
        """Generate all tokens from the source."""
        count = 0
        while True:
            token = self.next_token()
            if token is None:
                break
            count += 1
            yield token

        logger.debug(f"Read {count} tokens from {self.filename}")

    def __iter__(self) -> Iterator[Token]:
        """Allow iteration over tokens."""
        return self.tokenize()


def tokenize(
    source: str,
    config: ReaderConfig | None = None,
    filename: str = "<string>",
) -> list[Token]:
    """Convenience function to tokenize a source string."""
    return list(Reader(source, config, filename))
