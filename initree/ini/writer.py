"""
Serialization of a Section tree back to INI text.

Only what the format can express is written: root keys, then one block per
child section. Formatting, comments and inheritance declarations are not
preserved; inherited keys are written as plain keys of the child.
"""

from pathlib import Path

from ..const import DEFAULT_ENCODING
from ..logging import get_logger
from .errors import IniError
from .format import DEFAULT_CONFIG, ReaderConfig, ReaderFlags
from .section import Section


logger = get_logger("writer")


def _quote_value(value: str, config: ReaderConfig) -> str:
    quote = config.format.quote
    escaped = (
        value.replace("\\", "\\\\")
        .replace(quote, "\\" + quote)
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f"{quote}{escaped}{quote}"


def _multiline_value(value: str, config: ReaderConfig) -> str:
    fmt = config.format
    delimiter = fmt.multiline_quote
    if (
        not config.has(ReaderFlags.MULTILINE_QUOTES)
        or delimiter in value
        or value.endswith(fmt.quote)
    ):
        raise IniError(f"Cannot write value without escape sequences: {value!r}")
    return f"{delimiter}{value}{delimiter}"


def format_value(value: str, config: ReaderConfig | None = None) -> str:
    """Render a value so that the reader decodes it back unchanged."""
    config = config or DEFAULT_CONFIG
    fmt = config.format

    if "\r" in value:
        raise IniError(f"Cannot write value containing a carriage return: {value!r}")

    needs_quotes = (
        value != value.strip()
        or "\n" in value
        or value.startswith(fmt.quote)
        or (
            config.has(ReaderFlags.LINE_CONTINUATION)
            and value.endswith(fmt.continuation_marker)
        )
    )
    if not needs_quotes:
        return value

    if config.has(ReaderFlags.PROCESS_ESCAPES):
        return _quote_value(value, config)

    # Without escapes a quoted value ends at the first quote character
    if "\n" in value or fmt.quote in value:
        return _multiline_value(value, config)
    return f"{fmt.quote}{value}{fmt.quote}"


def format_key(key: str, config: ReaderConfig | None = None) -> str:
    """Render a key, quoting it when a bare key would not read back."""
    config = config or DEFAULT_CONFIG
    fmt = config.format

    if "\n" in key or "\r" in key:
        raise IniError(f"Cannot write key {key!r}")

    needs_quotes = (
        not key
        or key != key.strip()
        or fmt.assignment_marker in key
        or fmt.is_comment(key[0])
        or key.startswith(fmt.section_open)
        or key.startswith(fmt.quote)
    )
    if not needs_quotes:
        return key

    # Quoted keys have no escapes, the first quote closes them
    if fmt.quote in key or not config.has(ReaderFlags.QUOTED_KEYS):
        raise IniError(f"Cannot write key {key!r}")
    return f"{fmt.quote}{key}{fmt.quote}"


def _write_keys(section: Section, lines: list[str], config: ReaderConfig) -> None:
    marker = config.format.assignment_marker
    for key, value in section.keys.items():
        lines.append(f"{format_key(key, config)} {marker} {format_value(value, config)}")


def dumps(section: Section, config: ReaderConfig | None = None) -> str:
    """
    Serialize a tree to text.

    Args:
        section: Root of the tree to write
        config: Reader configuration the output is meant for

    Returns:
        INI text
    """
    config = config or DEFAULT_CONFIG
    fmt = config.format
    blocks: list[list[str]] = []

    if section.keys:
        lines: list[str] = []
        _write_keys(section, lines, config)
        blocks.append(lines)

    for child in section.sections.values():
        if (
            not child.name.strip()
            or child.name != child.name.strip()
            or fmt.inherit_separator in child.name
            or "\n" in child.name
        ):
            raise IniError(f"Cannot write section name {child.name!r}")

        lines = [f"{fmt.section_open}{child.name}{fmt.section_close}"]
        _write_keys(child, lines, config)
        blocks.append(lines)

        for nested in child.sections.values():
            logger.warning(
                f"Skipping nested section [{child.name}].[{nested.name}], "
                "the flat format cannot express it"
            )

    return "\n\n".join("\n".join(lines) for lines in blocks) + ("\n" if blocks else "")


def save(
    section: Section,
    path: str | Path,
    config: ReaderConfig | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Write a tree to a file, replacing its contents."""
    path = Path(path)
    text = dumps(section, config)
    path.write_text(text, encoding=encoding)
    logger.debug(f"Saved {len(section.sections)} sections to {path}")
