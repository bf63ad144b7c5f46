"""
Document tree for parsed INI files.

A Section owns its keys and child sections. The link back to the parent is a
weak reference: the parent -> child edge is the only owning relation, so a
section never keeps its parent alive.
"""

import weakref
from types import MappingProxyType
from typing import Iterator, Mapping, overload

from ..const import DEFAULT_ROOT_NAME
from .errors import IniError, MissingKeyError, MissingSectionError


_MISSING = object()


class Section:
    """
    A named node holding keys and child sections.

    Example:
        ini = parse_string("[server]\\nhost = localhost")
        ini["server"].get_key("host")     # 'localhost'
        ini["server"]("port", "8080")     # '8080'
    """

    def __init__(self, name: str = DEFAULT_ROOT_NAME, parent: "Section | None" = None):
        self._name = name
        self._keys: dict[str, str] = {}
        self._sections: dict[str, Section] = {}
        self._parent: weakref.ref[Section] | None = None

        if parent is not None:
            parent.add_section(self)

    def __repr__(self) -> str:
        return f"Section({self._name!r}, keys={len(self._keys)}, sections={len(self._sections)})"

    @property
    def name(self) -> str:
        """Section name."""
        return self._name

    @property
    def keys(self) -> Mapping[str, str]:
        """Read-only view of the section's own keys."""
        return MappingProxyType(self._keys)

    @property
    def sections(self) -> Mapping[str, "Section"]:
        """Read-only view of the child sections."""
        return MappingProxyType(self._sections)

    # Keys

    def set_key(self, name: str, value: str) -> None:
        """Set a key, overwriting any existing value."""
        self._keys[name] = value

    def has_key(self, name: str) -> bool:
        return name in self._keys

    @overload
    def get_key(self, name: str) -> str: ...

    @overload
    def get_key(self, name: str, default: str) -> str: ...

    @overload
    def get_key(self, name: str, default: None) -> str | None: ...

    def get_key(self, name, default=_MISSING):
        """
        Get a key value.

        Args:
            name: Key name
            default: Value returned when the key does not exist

        Returns:
            Key value, or default

        Raises:
            MissingKeyError: If the key does not exist and no default is given
        """
        if name in self._keys:
            return self._keys[name]
        if default is _MISSING:
            raise MissingKeyError(name, self._name)
        return default

    __call__ = get_key

    def remove_key(self, name: str) -> None:
        self._keys.pop(name, None)

    # Sections

    def add_section(self, section: "Section | str") -> "Section":
        """
        Attach a child section.

        If a child with the same name already exists, the keys of section are
        merged into it (last write wins) and the existing child is returned.
        A section owned by another parent is detached from it first.

        Args:
            section: Section instance, or a name for a new empty section

        Returns:
            The child section now present in this section
        """
        if isinstance(section, str):
            section = Section(section)

        if section is self or section._is_ancestor_of(self):
            raise IniError(f"Cannot add section [{section.name}] under its own subtree")

        existing = self._sections.get(section.name)
        if existing is section:
            return existing

        section._detach()

        if existing is not None:
            existing._keys.update(section._keys)
            return existing

        self._sections[section.name] = section
        section._parent = weakref.ref(self)
        return section

    def has_section(self, name: str) -> bool:
        return name in self._sections

    @overload
    def get_section(self, name: str) -> "Section": ...

    @overload
    def get_section(self, name: str, default: None) -> "Section | None": ...

    def get_section(self, name, default=_MISSING):
        """
        Get a child section.

        Raises:
            MissingSectionError: If the section does not exist and no default is given
        """
        if name in self._sections:
            return self._sections[name]
        if default is _MISSING:
            raise MissingSectionError(name, self._name)
        return default

    __getitem__ = get_section

    def remove_section(self, name: str) -> None:
        section = self._sections.pop(name, None)
        if section is not None:
            section._parent = None

    def get_section_ex(self, path: str) -> "Section":
        """
        Get a nested section by dotted path.

        `get_section_ex("a.b")` is `self["a"]["b"]`; an empty path is self.

        Raises:
            MissingSectionError: If any path segment does not exist
        """
        section = self
        if not path:
            return section
        for part in path.split("."):
            section = section.get_section(part)
        return section

    def inherit(self, other: "Section") -> None:
        """Copy every key of other into this section."""
        self._keys.update(other._keys)

    # Navigation

    @property
    def parent(self) -> "Section | None":
        """Owning section, or None for a root or detached section."""
        if self._parent is None:
            return None
        return self._parent()

    def has_parent(self) -> bool:
        return self.parent is not None

    @property
    def root(self) -> "Section":
        """Topmost ancestor (self when there is no parent)."""
        section = self
        while (parent := section.parent) is not None:
            section = parent
        return section

    def set_parent(self, parent: "Section") -> "Section":
        """
        Move this section under another parent.

        Detaching from the old parent, attaching to the new one and updating
        the back-reference happen in one step. If the new parent already has a
        child with this name, the keys are merged into that child and this
        section is left detached.

        Returns:
            The child section now present in parent
        """
        return parent.add_section(self)

    def walk(self) -> Iterator["Section"]:
        """Iterate over this section and all descendants, depth-first."""
        yield self
        for child in list(self._sections.values()):
            yield from child.walk()

    def _detach(self) -> None:
        parent = self.parent
        if parent is not None and parent._sections.get(self._name) is self:
            del parent._sections[self._name]
        self._parent = None

    def _is_ancestor_of(self, other: "Section") -> bool:
        section = other.parent
        while section is not None:
            if section is self:
                return True
            section = section.parent
        return False
