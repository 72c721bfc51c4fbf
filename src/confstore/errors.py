"""Error hierarchy for confstore."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfigStoreError",
    "InvalidArgumentError",
    "MissingOptionError",
    "InvalidOptionTypeError",
    "FileDoesNotExistError",
    "FileIsNotReadableError",
    "UnsupportedFormatError",
    "ConfigParseError",
    "ImportDirectiveError",
    "ConfigurationError",
    "ReadOnlyError",
    "UnsupportedStrategyError",
    "ErrorCodes",
]


class ConfigStoreError(Exception):
    """Base error for all confstore errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidArgumentError(ConfigStoreError):
    """Raised when an option or argument value is malformed."""

    def __init__(self, message: str, *, code: str = "INVALID_ARGUMENT", **kwargs: Any) -> None:
        super().__init__(code=code, message=message, **kwargs)


class MissingOptionError(InvalidArgumentError):
    """Raised when a required option key is absent."""

    def __init__(self, option: str, **kwargs: Any) -> None:
        super().__init__(
            f'Option "{option}" is mandatory.',
            code="MISSING_OPTION",
            details={"option": option},
            **kwargs,
        )

    @property
    def option(self) -> str:
        """The missing option name."""
        return self.details["option"]


class InvalidOptionTypeError(InvalidArgumentError):
    """Raised when an option has the wrong runtime type."""

    def __init__(self, option: str, types: str | list[str], actual: Any = None, **kwargs: Any) -> None:
        expected = [types] if isinstance(types, str) else list(types)
        super().__init__(
            f'Option "{option}" must be one of the following types "{", ".join(expected)}", '
            f"got {type(actual).__name__}.",
            code="INVALID_OPTION_TYPE",
            details={"option": option, "expected": expected, "actual": type(actual).__name__},
            **kwargs,
        )

    @property
    def option(self) -> str:
        """The option whose value had the wrong type."""
        return self.details["option"]


class FileDoesNotExistError(InvalidArgumentError):
    """Raised when a source path is not a regular file."""

    def __init__(self, file_path: str, **kwargs: Any) -> None:
        super().__init__(
            f'File "{file_path}" does not exist.',
            code="FILE_DOES_NOT_EXIST",
            details={"file_path": file_path},
            **kwargs,
        )

    @property
    def file_path(self) -> str:
        """The path that was not found."""
        return self.details["file_path"]


class FileIsNotReadableError(InvalidArgumentError):
    """Raised when a source file exists but cannot be read."""

    def __init__(self, file_path: str, **kwargs: Any) -> None:
        super().__init__(
            f'File "{file_path}" is not readable.',
            code="FILE_NOT_READABLE",
            details={"file_path": file_path},
            **kwargs,
        )

    @property
    def file_path(self) -> str:
        """The path that could not be read."""
        return self.details["file_path"]


class UnsupportedFormatError(InvalidArgumentError):
    """Raised when no codec handles a file's format."""

    def __init__(self, file_path: str, file_format: str, **kwargs: Any) -> None:
        super().__init__(
            f'Unsupported format "{file_format}" for file "{file_path}".',
            code="UNSUPPORTED_FORMAT",
            details={"file_path": file_path, "format": file_format},
            **kwargs,
        )


class ConfigParseError(ConfigStoreError):
    """Raised when a file's contents cannot be decoded into a mapping."""

    def __init__(self, file_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=f'Cannot parse "{file_path}": {reason}',
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )


class ImportDirectiveError(ConfigStoreError):
    """Raised when an "import" directive has the wrong shape."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="IMPORT_ERROR", message=message, **kwargs)


class ConfigurationError(ConfigStoreError):
    """Raised when store options are unusable, e.g. a hook is not callable."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIGURATION_ERROR", message=message, **kwargs)


class ReadOnlyError(ConfigStoreError):
    """Raised when mutating a store that has been marked read-only."""

    def __init__(self, operation: str, **kwargs: Any) -> None:
        super().__init__(
            code="READ_ONLY",
            message=f'Cannot call "{operation}" on a read-only config store.',
            details={"operation": operation},
            **kwargs,
        )


class UnsupportedStrategyError(ConfigStoreError):
    """Raised when an unknown merge strategy name is requested."""

    def __init__(self, strategy: str, **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_STRATEGY",
            message=f'Unsupported merge strategy "{strategy}".',
            details={"strategy": strategy},
            **kwargs,
        )


class ErrorCodes:
    """All confstore error codes as constants."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    MISSING_OPTION = "MISSING_OPTION"
    INVALID_OPTION_TYPE = "INVALID_OPTION_TYPE"
    FILE_DOES_NOT_EXIST = "FILE_DOES_NOT_EXIST"
    FILE_NOT_READABLE = "FILE_NOT_READABLE"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    IMPORT_ERROR = "IMPORT_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    READ_ONLY = "READ_ONLY"
    UNSUPPORTED_STRATEGY = "UNSUPPORTED_STRATEGY"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
