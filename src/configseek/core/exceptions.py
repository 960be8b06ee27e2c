"""Domain exceptions for configseek.

All library errors inherit from ConfigseekError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


def describe_extension(extension: str) -> str:
    """Human-readable description of an extension key.

    Example:
        >>> describe_extension(".ini")
        'extension ".ini"'
        >>> describe_extension("")
        'files without extensions'
    """
    return f'extension "{extension}"' if extension else "files without extensions"


class ConfigseekError(Exception):
    """Base class for all configseek exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigNotFoundError(ConfigseekError):
    """Raised when a config path does not exist or is a directory.

    The search loop treats this as "try the next candidate"; a direct
    load surfaces it to the caller.

    Attributes:
        filepath: The path that could not be read.
        cause: The underlying OSError, if any.
    """

    def __init__(self, filepath: Path, cause: Exception | None = None) -> None:
        self.filepath = filepath
        self.cause = cause
        super().__init__(f"No config file at {filepath}")

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the path."""
        return f"Verify the config file exists and is a regular file: {self.filepath}"


class NoLoaderError(ConfigseekError):
    """Raised when no loader is registered for a file's extension.

    Attributes:
        extension: The extension that has no loader ("" for none).
        filepath: The file that could not be parsed.
    """

    def __init__(self, extension: str, filepath: Path | None = None) -> None:
        self.extension = extension
        self.filepath = filepath
        super().__init__(f"No loader specified for {describe_extension(extension)}")

    @property
    def recovery_hint(self) -> str:
        """Suggest registering a loader."""
        key = self.extension or "noExt"
        return f"Register a loader under '{key}' or a 'default' loader"


class ConfigParseError(ConfigseekError):
    """Raised when a loader fails to parse a config file.

    Attributes:
        filepath: Path to the file that failed to parse.
        cause: The exception raised by the loader.
    """

    def __init__(
        self,
        message: str,
        filepath: Path,
        cause: Exception | None = None,
    ) -> None:
        self.filepath = filepath
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the file for syntax errors."""
        return f"Check {self.filepath.name} for syntax errors"


class ManifestParseError(ConfigParseError):
    """Raised when a package manifest (package.json, pyproject.toml) is malformed."""

    pass


class ConfigurationError(ConfigseekError):
    """Raised for invalid explorer options or meta-config contents."""

    pass
