"""
Reader configuration.

A reader is parameterized by two things:
- IniFormat: the characters that carry meaning (comments, assignment,
  quoting, continuation, section brackets)
- ReaderFlags: which optional behaviours are active

Both are bundled in an immutable ReaderConfig chosen when a Reader is
constructed.
"""

from dataclasses import dataclass, field, replace
from enum import Flag, auto

from ..const import (
    DEFAULT_ASSIGNMENT_MARKER,
    DEFAULT_COMMENT_MARKERS,
    DEFAULT_CONTINUATION_MARKER,
    DEFAULT_QUOTE,
)


class ReaderFlags(Flag):
    """Optional reader behaviours."""

    NONE = 0
    PROCESS_ESCAPES = auto()    # \n \t \\ \" inside quoted values
    MULTILINE_QUOTES = auto()   # """ ... """ verbatim blocks
    LINE_CONTINUATION = auto()  # trailing marker joins the next line
    QUOTED_KEYS = auto()        # "quoted key" = value

    DEFAULT = PROCESS_ESCAPES | MULTILINE_QUOTES | LINE_CONTINUATION | QUOTED_KEYS


@dataclass(frozen=True)
class IniFormat:
    """Characters recognized by the reader."""

    comment_markers: str = DEFAULT_COMMENT_MARKERS
    assignment_marker: str = DEFAULT_ASSIGNMENT_MARKER
    quote: str = DEFAULT_QUOTE
    continuation_marker: str = DEFAULT_CONTINUATION_MARKER
    section_open: str = "["
    section_close: str = "]"
    inherit_separator: str = ":"

    def __post_init__(self) -> None:
        if not self.comment_markers:
            raise ValueError("At least one comment marker is required")
        if not self.assignment_marker:
            raise ValueError("Assignment marker cannot be empty")
        if self.assignment_marker in self.comment_markers:
            raise ValueError(
                f"Assignment marker {self.assignment_marker!r} is also a comment marker"
            )
        if len(self.quote) != 1:
            raise ValueError(f"Quote must be a single character, got {self.quote!r}")
        if not self.continuation_marker:
            raise ValueError("Continuation marker cannot be empty")
        if not self.section_open or not self.section_close:
            raise ValueError("Section brackets cannot be empty")
        if not self.inherit_separator:
            raise ValueError("Inherit separator cannot be empty")

    @property
    def multiline_quote(self) -> str:
        """Delimiter of verbatim multi-line values."""
        return self.quote * 3

    def is_comment(self, char: str) -> bool:
        return bool(char) and char in self.comment_markers


@dataclass(frozen=True)
class ReaderConfig:
    """
    Immutable reader configuration.

    Example:
        config = ReaderConfig().without(ReaderFlags.PROCESS_ESCAPES)
        ini = parse_string(r"path = C:\\Path", config=config)
    """

    format: IniFormat = field(default_factory=IniFormat)
    flags: ReaderFlags = ReaderFlags.DEFAULT

    def has(self, flag: ReaderFlags) -> bool:
        """Check whether every behaviour in flag is enabled."""
        return (self.flags & flag) == flag

    def with_flags(self, flags: ReaderFlags) -> "ReaderConfig":
        """Return a copy with additional flags enabled."""
        return replace(self, flags=self.flags | flags)

    def without(self, flags: ReaderFlags) -> "ReaderConfig":
        """Return a copy with the given flags disabled."""
        return replace(self, flags=self.flags & ~flags)


DEFAULT_CONFIG = ReaderConfig()
