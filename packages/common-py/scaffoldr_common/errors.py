"""
Scaffoldr Error Classes

All errors raised by scaffoldr packages derive from ScaffoldrError so that
callers (the CLI, scaffolding tools) can catch a single base class and
report a stable error code.

Usage:
    from scaffoldr_common.errors import UnsupportedVersionError

    raise UnsupportedVersionError("language_version", 7, supported=[8, 11, 17, 21])
"""

from typing import Any, Dict, List, Optional


class ScaffoldrError(Exception):
    """
    Base class for all scaffoldr errors.

    Attributes:
        message: Human readable description of the problem
        code: Stable machine readable error code
    """

    code = "SCAFFOLDR_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for JSON output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


class ValidationError(ScaffoldrError):
    """Raised when caller input fails structural validation."""

    code = "VALIDATION_ERROR"


class UnsupportedOptionError(ScaffoldrError):
    """
    Raised when an enumerated option has no known rendering.

    The failure is a caller-input problem: it is never retried and always
    names the offending option so the caller can report it.
    """

    code = "UNSUPPORTED_OPTION"

    def __init__(
        self,
        option: str,
        value: Any,
        supported: Optional[List[Any]] = None,
        message: Optional[str] = None,
    ):
        self.option = option
        self.value = value
        self.supported = list(supported) if supported is not None else []
        if message is None:
            message = f"Unsupported {option}: {value!r}"
            if self.supported:
                message += f". Supported values: {', '.join(str(s) for s in self.supported)}"
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["option"] = self.option
        data["value"] = self.value
        data["supported"] = self.supported
        return data


class UnsupportedVersionError(UnsupportedOptionError):
    """Raised when a requested language or framework version cannot be rendered."""

    code = "UNSUPPORTED_VERSION"


class ParseError(ScaffoldrError):
    """Raised when a build script cannot be read back into a descriptor."""

    code = "PARSE_ERROR"

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


__all__ = [
    "ScaffoldrError",
    "ValidationError",
    "UnsupportedOptionError",
    "UnsupportedVersionError",
    "ParseError",
]
