"""
Post-parse `%path%` substitution.

A marker is replaced by the current value of the key it names:
    %name%          key in the same section
    %a.b.name%      key in nested section a.b below the same section
    %.a.name%       key in section a below the document root

Substitution is a single depth-first pass. Inserted text is not scanned
again, so a referenced value that still contains markers is copied as is.
"""

from ..logging import get_logger
from .errors import IniLookupError, MissingKeyError, MissingSectionError
from .section import Section


logger = get_logger("lookups")

MARKER = "%"


def lookup(section: Section, path: str, key: str | None = None) -> str:
    """
    Resolve a dotted key path relative to section.

    Args:
        section: Section the path is relative to
        path: Dotted path; a leading "." anchors it at the document root
        key: Key being resolved, for error reporting

    Returns:
        Value of the referenced key

    Raises:
        IniLookupError: If the path is empty or does not resolve
    """
    anchor = section
    relative = path
    if relative.startswith("."):
        anchor = section.root
        relative = relative[1:]

    if not relative:
        raise IniLookupError("Empty lookup path", path, section.name, key)

    section_path, _, key_name = relative.rpartition(".")
    try:
        return anchor.get_section_ex(section_path).get_key(key_name)
    except MissingSectionError as e:
        raise IniLookupError(
            f"Unresolved lookup, no section '{e.name}'", path, section.name, key
        ) from e
    except MissingKeyError as e:
        raise IniLookupError(
            f"Unresolved lookup, no key '{e.name}'", path, section.name, key
        ) from e


def substitute(section: Section, value: str, key: str | None = None) -> str:
    """Replace every closed `%path%` marker in value; an unclosed marker stays literal."""
    if MARKER not in value:
        return value

    result = []
    start = -1
    buffer = []

    for i, char in enumerate(value):
        if char == MARKER:
            if start == -1:
                start = i
                buffer = []
            else:
                result.append(lookup(section, "".join(buffer), key))
                start = -1
        elif start != -1:
            buffer.append(char)
        else:
            result.append(char)

    if start != -1:
        result.append(value[start:])

    return "".join(result)


def resolve_lookups(section: Section) -> None:
    """
    Resolve markers in section and all of its descendants, in place.

    Keys are processed in insertion order, children depth-first after the
    section's own keys.
    """
    count = 0

    for current in section.walk():
        for name, value in list(current.keys.items()):
            resolved = substitute(current, value, name)
            if resolved != value:
                current.set_key(name, resolved)
                count += 1
                logger.debug(f"Resolved [{current.name}] {name} = {resolved!r}")

    logger.debug(f"Resolved lookups in {count} keys below [{section.name}]")
