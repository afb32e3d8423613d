"""
Exception hierarchy for config_file_reader.

All exceptions inherit from ConfigFileReaderError, so callers can treat
every configuration problem as fatal at start-up with a single except
clause, or pick out the specific failure:

    >>> try:
    ...     port = reader.get_int("port")
    ... except ElementNotFoundError:
    ...     ...  # element missing from the current section
    ... except ConfigParseError as e:
    ...     print(f"bad value {e.text!r} for {e.element_name}")
"""

from typing import Optional

__all__ = [
    'ConfigFileReaderError',
    'ConfigIOError',
    'ElementNotFoundError',
    'ConfigParseError',
    'ConfigReadError',
]


class ConfigFileReaderError(Exception):
    """Base exception for all config_file_reader errors."""

    pass


class ConfigIOError(ConfigFileReaderError, OSError):
    """
    Raised at construction when the configuration cannot be loaded.

    Covers a missing or unreadable file and XML that is not well-formed.
    Also an OSError, so ``except IOError`` catches it.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ElementNotFoundError(ConfigFileReaderError):
    """
    Raised when a required element does not exist in the current scope.

    That is either the configured section (at construction or on reset)
    or a leaf element read without a default.
    """

    def __init__(self, element_name: str, message: Optional[str] = None):
        super().__init__(message or f"Element not found: '{element_name}'")
        self.element_name = element_name


class ConfigParseError(ConfigFileReaderError, ValueError):
    """Raised when element text exists but does not convert to the requested type."""

    def __init__(self, element_name: str, text: str, reason: str):
        super().__init__(
            f"Cannot read element '{element_name}': {reason}"
        )
        self.element_name = element_name
        self.text = text
        self.reason = reason


class ConfigReadError(ConfigFileReaderError):
    """
    Raised for structural failures while reading collections.

    For example a map entry lacking its key attribute when skipping is not
    allowed, or a cursor stepped past its last element.
    """

    pass
