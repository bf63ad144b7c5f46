"""
Tests for the reader (tokenizer).
"""

import pytest

from initree.ini import IniFormat, IniSyntaxError, ReaderConfig, ReaderFlags
from initree.ini.reader import KeyValue, Reader, SectionHeader, tokenize


def values(source: str, config: ReaderConfig | None = None) -> dict[str, str]:
    return {t.key: t.value for t in tokenize(source, config) if isinstance(t, KeyValue)}


def test_sample_tokens(sample_source: str) -> None:
    tokens = tokenize(sample_source)

    headers = [t.name for t in tokens if isinstance(t, SectionHeader)]
    assert headers == ["section 1", "various"]

    assert tokens[0] == KeyValue("key1", "value", line=2, raw="key1 = value")


def test_comments_and_blank_lines_are_skipped() -> None:
    tokens = tokenize("# one\n   ; two\n\n   \nkey = value\n")

    assert len(tokens) == 1
    assert tokens[0].key == "key"
    assert tokens[0].line == 5


def test_inline_comment_markers_are_literal() -> None:
    result = values("test = bar ; comment\nother = a # b")

    assert result["test"] == "bar ; comment"
    assert result["other"] == "a # b"


def test_value_whitespace_is_trimmed() -> None:
    assert values("  key   =    some value   ") == {"key": "some value"}


def test_split_on_first_assignment_marker() -> None:
    assert values("url = a=b=c") == {"url": "a=b=c"}


def test_bare_key_has_empty_value() -> None:
    assert values("empty\n") == {"empty": ""}
    assert values("blank =") == {"blank": ""}


def test_quoted_key() -> None:
    assert values('"quoted key"= VALUE 123') == {"quoted key": "VALUE 123"}
    assert values('"a = b" = c') == {"a = b": "c"}


def test_quoted_keys_disabled() -> None:
    config = ReaderConfig().without(ReaderFlags.QUOTED_KEYS)

    assert values('"quoted"= x', config) == {'"quoted"': "x"}


def test_section_header() -> None:
    (header,) = tokenize("[ various   ]")

    assert header == SectionHeader("various", None, line=1, raw="[ various   ]")


def test_section_header_with_inheritance() -> None:
    (header,) = tokenize("[foo : a.b ]")

    assert header.name == "foo"
    assert header.inherits == "a.b"


def test_multiline_value() -> None:
    source = 'quote_multiline = """\n  this is value\n"""\nnext = 1'

    assert values(source) == {
        "quote_multiline": "\n  this is value\n",
        "next": "1",
    }


def test_multiline_value_keeps_content_verbatim() -> None:
    source = 'text = """first\n# not a comment\n[not a section]\nlast"""'

    assert values(source) == {"text": "first\n# not a comment\n[not a section]\nlast"}


def test_multiline_on_one_line() -> None:
    assert values('v = """inline"""') == {"v": "inline"}


def test_escape_sequences() -> None:
    result = values(r'escape_sequences = "yay\nboo"' + "\n" + r'all = "a\tb\\c\"d"')

    assert result["escape_sequences"] == "yay\nboo"
    assert result["all"] == 'a\tb\\c"d'


def test_unknown_escape_is_kept() -> None:
    assert values(r'v = "a\qb"') == {"v": r"a\qb"}


def test_escapes_disabled() -> None:
    config = ReaderConfig().without(ReaderFlags.PROCESS_ESCAPES)

    assert values(r'v = "yay\nboo"', config) == {"v": r"yay\nboo"}
    assert values(r"path=C:\Path", config) == {"path": r"C:\Path"}


def test_quoted_value_preserves_whitespace() -> None:
    assert values('v = "  padded  "') == {"v": "  padded  "}


def test_line_continuation() -> None:
    assert values("escaped_newlines = abcd \\\nefg") == {"escaped_newlines": "abcd efg"}


def test_line_continuation_repeats() -> None:
    source = "v = one \\\n    two\\\n\tthree\nnext = x"

    assert values(source) == {"v": "one two three", "next": "x"}


def test_line_continuation_at_end_of_input() -> None:
    assert values("v = dangling \\") == {"v": "dangling"}


def test_line_continuation_disabled() -> None:
    config = ReaderConfig().without(ReaderFlags.LINE_CONTINUATION)

    assert values("v = abcd \\\nefg", config) == {"v": "abcd \\", "efg": ""}


def test_custom_format() -> None:
    config = ReaderConfig(format=IniFormat(comment_markers="!", assignment_marker=":"))

    assert values("! comment\nname: x\n#hash: y", config) == {"name": "x", "#hash": "y"}


def test_invalid_format_is_rejected() -> None:
    with pytest.raises(ValueError):
        IniFormat(quote="''")
    with pytest.raises(ValueError):
        IniFormat(assignment_marker=";")


def test_reader_is_lazy() -> None:
    reader = Reader("a = 1\n[broken")
    tokens = iter(reader)

    assert next(tokens).key == "a"
    with pytest.raises(IniSyntaxError):
        next(tokens)


@pytest.mark.parametrize(
    "source, line",
    [
        ("[unterminated", 1),
        ("a = 1\n[]", 2),
        ("[child : ]", 1),
        ('v = """\nnever closed', 1),
        ('v = "open', 1),
        ('v = "closed" trailing', 1),
        ('"key = value', 1),
        ('"key" value', 1),
        ("= value", 1),
        ('v = """a""" extra', 1),
    ],
)
def test_syntax_errors(source: str, line: int) -> None:
    with pytest.raises(IniSyntaxError) as exc_info:
        tokenize(source, filename="test.ini")

    assert exc_info.value.line == line
    assert exc_info.value.filename == "test.ini"
    assert "test.ini" in str(exc_info.value)


def test_syntax_error_carries_raw_line() -> None:
    with pytest.raises(IniSyntaxError) as exc_info:
        tokenize("ok = 1\n  [unterminated  \n")

    assert exc_info.value.line == 2
    assert exc_info.value.raw == "  [unterminated  "


@pytest.mark.parametrize("char", ["\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"])
def test_only_cr_and_lf_end_lines(char: str) -> None:
    result = values(f"[s]\nk = a{char}b\nm = x")

    assert result == {"k": f"a{char}b", "m": "x"}


def test_crlf_and_cr_line_endings() -> None:
    tokens = tokenize("a = 1\r\nb = 2\rc = 3\n")

    assert [(t.key, t.value, t.line) for t in tokens] == [("a", "1", 1), ("b", "2", 2), ("c", "3", 3)]


def test_multiline_keeps_trailing_whitespace_of_first_line() -> None:
    assert values('v = """first  \nsecond"""') == {"v": "first  \nsecond"}


def test_section_header_with_several_separators() -> None:
    (header,) = tokenize("[a : b : c]")

    assert header.name == "a"
    assert header.inherits == "b"
