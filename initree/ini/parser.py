"""
Tree builder for INI documents.

Consumes reader tokens into a Section tree:
- Section headers are always relative to the document root; `[a]` followed
  by `[b]` declares two siblings
- `[child : parent.path]` copies the keys of the section found at
  parent.path (from the root) into child
- Re-declaring a section merges into the existing one, last write wins
- Keys before the first header belong to the root
"""

from ..logging import get_logger
from .errors import IniLookupError, MissingSectionError
from .format import ReaderConfig
from .lookups import resolve_lookups
from .reader import KeyValue, Reader, SectionHeader
from .section import Section


logger = get_logger("parser")


class IniParser:
    """
    Builds a Section tree from INI source text.

    Usage:
        root = IniParser(source).parse()
        # or into a pre-populated tree
        IniParser(source).parse(root=existing)
    """

    def __init__(
        self,
        source: str,
        config: ReaderConfig | None = None,
        filename: str = "<string>",
    ):
        self.reader = Reader(source, config, filename)
        self.filename = filename

    def _open_section(self, root: Section, header: SectionHeader) -> Section:
        child = Section(header.name)

        if header.inherits is not None:
            try:
                base = root.get_section_ex(header.inherits)
            except MissingSectionError as e:
                raise IniLookupError(
                    f"Cannot inherit [{header.name}], no section '{e.name}'",
                    header.inherits,
                    header.name,
                    line=header.line,
                ) from e
            child.inherit(base)

        return root.add_section(child)

    def parse(self, root: Section | None = None, lookups: bool = True) -> Section:
        """
        Parse the whole document.

        Args:
            root: Tree to parse into (a new root section if None)
            lookups: Resolve `%path%` markers after building

        Returns:
            The root section

        Raises:
            IniSyntaxError: If the source is malformed
            IniLookupError: If an inheritance target or lookup does not resolve
        """
        if root is None:
            root = Section()

        section = root
        sections = 0
        keys = 0

        for token in self.reader:
            if isinstance(token, SectionHeader):
                section = self._open_section(root, token)
                sections += 1
            elif isinstance(token, KeyValue):
                section.set_key(token.key, token.value)
                keys += 1

        logger.debug(f"Built {sections} sections and {keys} keys from {self.filename}")

        if lookups:
            resolve_lookups(root)

        return root


def parse_string(
    source: str,
    *,
    root: Section | None = None,
    lookups: bool = True,
    config: ReaderConfig | None = None,
    filename: str = "<string>",
) -> Section:
    """
    Convenience function to parse a configuration string.

    Args:
        source: INI source text
        root: Tree to parse into (a new root section if None)
        lookups: Resolve `%path%` markers after building
        config: Reader configuration (defaults if None)
        filename: Filename for error messages

    Returns:
        The root section
    """
    return IniParser(source, config, filename).parse(root=root, lookups=lookups)
