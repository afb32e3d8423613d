"""
config-file-reader: typed access to sections of XML configuration files.

Main package exports for user-facing API.
"""

from config_file_reader.config import ReaderSettings, get_settings, reset_settings
from config_file_reader.cursor import SectionCursor
from config_file_reader.exceptions import (
    ConfigFileReaderError,
    ConfigIOError,
    ConfigParseError,
    ConfigReadError,
    ElementNotFoundError,
)
from config_file_reader.reader import ConfigReader
from config_file_reader.section import Section

__version__ = "0.2.0"

__all__ = [
    'ConfigReader',
    'Section',
    'SectionCursor',
    'ReaderSettings',
    'get_settings',
    'reset_settings',
    'ConfigFileReaderError',
    'ConfigIOError',
    'ConfigParseError',
    'ConfigReadError',
    'ElementNotFoundError',
]
