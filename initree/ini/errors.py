"""
Exceptions raised while reading, building and querying INI documents.
"""


class IniError(Exception):
    """Base class for all INI errors."""

    pass


class IniSyntaxError(IniError):
    """Exception raised by the reader for malformed input."""

    def __init__(self, message: str, line: int, raw: str = "", filename: str = "<string>"):
        self.message = message
        self.line = line
        self.raw = raw
        self.filename = filename
        text = f"{filename}, line {line}: {message}"
        if raw:
            text += f": {raw!r}"
        super().__init__(text)


class IniLookupError(IniError, LookupError):
    """
    Exception raised when a dotted path does not resolve.

    Covers both `%path%` substitutions and `[child : parent.path]`
    inheritance targets.
    """

    def __init__(
        self,
        message: str,
        path: str,
        section: str | None = None,
        key: str | None = None,
        line: int | None = None,
    ):
        self.path = path
        self.section = section
        self.key = key
        self.line = line

        where = []
        if line is not None:
            where.append(f"line {line}")
        if section is not None:
            where.append(f"section [{section}]")
        if key is not None:
            where.append(f"key '{key}'")

        text = f"{message}: '{path}'"
        if where:
            text += f" ({', '.join(where)})"
        super().__init__(text)


class MissingKeyError(IniError, KeyError):
    """Exception raised by strict key accessors."""

    def __init__(self, name: str, section: str):
        self.name = name
        self.section = section
        super().__init__(f"Key '{name}' does not exist in section [{section}]")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class MissingSectionError(IniError, KeyError):
    """Exception raised by strict section accessors."""

    def __init__(self, name: str, section: str):
        self.name = name
        self.section = section
        super().__init__(f"Section '{name}' does not exist in section [{section}]")

    def __str__(self) -> str:
        return str(self.args[0])


class IniFileError(IniError):
    """Exception raised when a document cannot be read or decoded."""

    pass
