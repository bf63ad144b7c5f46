"""
Tests for mapping sections onto records.
"""

from dataclasses import dataclass

import pytest

from initree.ini import IniError, parse_string, siphon
from initree.ini.siphon import bool_value


@dataclass
class Server:
    host: str = "localhost"
    port: int = 80
    debug: bool = False


FIELDS = {"host": str, "port": int, "debug": bool_value}


def test_siphon_section_named_after_type() -> None:
    ini = parse_string("[Server]\nhost = example.org\nport = 8080\ndebug = on")

    assert siphon(ini, Server, FIELDS) == Server("example.org", 8080, True)


def test_siphon_keeps_defaults_for_missing_keys() -> None:
    ini = parse_string("[Server]\nport = 3")

    assert siphon(ini, Server, FIELDS) == Server(port=3)


def test_siphon_missing_section_gives_defaults() -> None:
    assert siphon(parse_string(""), Server, FIELDS) == Server()


def test_siphon_explicit_section_name() -> None:
    ini = parse_string("[web]\nhost = w\nextra = ignored")

    assert siphon(ini, Server, FIELDS, section="web").host == "w"


def test_siphon_only_reads_listed_fields() -> None:
    ini = parse_string("[Server]\nhost = h\nport = 1")

    assert siphon(ini, Server, {"host": str}).port == 80


def test_siphon_invalid_value() -> None:
    ini = parse_string("[Server]\nport = eighty")

    with pytest.raises(IniError, match=r"\[Server\] port"):
        siphon(ini, Server, FIELDS)


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("Yes", True), ("on", True), ("1", True),
     ("false", False), ("NO", False), (" off ", False), ("0", False)],
)
def test_bool_value(value: str, expected: bool) -> None:
    assert bool_value(value) is expected


def test_bool_value_rejects_other_text() -> None:
    with pytest.raises(ValueError):
        bool_value("maybe")
