"""Exceptions raised by the generator. Every one of them ends the run."""


class CrudGenError(Exception):
    """Base class for generator errors."""


class UsageError(CrudGenError):
    """Missing or unusable command-line input."""


class EmptySpec(UsageError):
    """The field specification string is empty."""

    def __init__(self):
        super().__init__("Field specification is empty")


class MalformedFieldSpec(CrudGenError):
    """A field token could not be parsed."""

    def __init__(self, token: str, index: int, reason: str = "expected 'name:type'"):
        self.token = token
        self.index = index
        self.reason = reason
        super().__init__(f"Malformed field #{index} {token!r}: {reason}")


class InvalidEntityName(CrudGenError):
    """The entity name is empty or not a usable identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid entity name: {name!r}")


class FileSystemError(CrudGenError):
    """Directory creation or file write failed."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"File system error at {path}: {message}")
