"""
Mapping a section onto a record type.

Fields are listed explicitly with one converter per field:

    @dataclass
    class Server:
        host: str = "localhost"
        port: int = 80

    server = siphon(ini, Server, {"host": str, "port": int})

Keys missing from the section leave the record's own defaults in place.
"""

from typing import Any, Callable, Mapping, TypeVar

from .errors import IniError
from .section import Section


T = TypeVar("T")

Converter = Callable[[str], Any]

TRUE_VALUES = {"true", "yes", "on", "1"}
FALSE_VALUES = {"false", "no", "off", "0"}


def bool_value(value: str) -> bool:
    """Convert true/false, yes/no, on/off or 1/0 to bool."""
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"Not a boolean: {value!r}")


def siphon(
    root: Section,
    factory: Callable[..., T],
    fields: Mapping[str, Converter],
    section: str | None = None,
) -> T:
    """
    Build a record from the keys of one section.

    Args:
        root: Section containing the section to read
        factory: Record type (or any callable accepting keyword arguments)
        fields: Field name -> converter applied to the key's string value
        section: Section name (defaults to factory.__name__)

    Returns:
        factory(**converted_values)

    Raises:
        IniError: If a converter rejects a value
    """
    if section is None:
        section = factory.__name__

    values: dict[str, Any] = {}
    source = root.get_section(section, None)

    if source is not None:
        for name, convert in fields.items():
            if not source.has_key(name):
                continue
            raw = source.get_key(name)
            try:
                values[name] = convert(raw)
            except (TypeError, ValueError) as e:
                raise IniError(f"Invalid value for [{section}] {name}: {raw!r} ({e})") from e

    return factory(**values)
