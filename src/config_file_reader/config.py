"""
Reader settings using Pydantic Settings.

Settings are loaded from environment variables (prefix ``CONFIG_READER_``)
and an optional ``.env`` file. They control how XML text is read and how
lxml is configured, not what the configuration documents contain.
"""

from typing import List, Literal, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReaderSettings(BaseSettings):
    """
    Behaviour knobs for ConfigReader.

    Environment Variables (from .env):
        CONFIG_READER_TRIM_TEXT: Strip whitespace around element text
        CONFIG_READER_EXPECTED_ROOT: Required tag of the top-level element
        CONFIG_READER_HUGE_TREE: Lift lxml's tree depth/size limits
        CONFIG_READER_RESOLVE_ENTITIES: true, false or internal (default)
        CONFIG_READER_FALLBACK_ENCODINGS: JSON list, e.g. '["euc-kr"]'

    Attributes:
        trim_text: Strip surrounding whitespace from element text before
            it is returned or converted
        expected_root: Tag the document's top-level element must carry,
            or None to accept any (conventionally "config")
        huge_tree: Passed through to lxml.etree.XMLParser
        resolve_entities: Passed through to lxml.etree.XMLParser;
            'internal' expands internal DTD entities but never loads
            external ones
        fallback_encodings: Encodings tried in order when the file cannot
            be decoded with its declared encoding

    Example:
        >>> settings = ReaderSettings(trim_text=True)
        >>> reader = ConfigReader("app.xml", "database", settings=settings)
    """

    trim_text: bool = Field(
        default=False,
        description="Strip surrounding whitespace from element text"
    )

    expected_root: Optional[str] = Field(
        default=None,
        description="Required tag of the top-level element (None = any)"
    )

    huge_tree: bool = Field(
        default=False,
        description="Disable lxml security limits on tree depth and text size"
    )

    resolve_entities: Union[bool, Literal["internal"]] = Field(
        default="internal",
        description="Entity expansion: 'internal' expands DTD-declared entities only"
    )

    fallback_encodings: List[str] = Field(
        default_factory=list,
        description="Encodings to retry with when decoding fails"
    )

    model_config = SettingsConfigDict(
        env_prefix='CONFIG_READER_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @field_validator('expected_root')
    @classmethod
    def blank_root_means_any(cls, value: Optional[str]) -> Optional[str]:
        """Treat an empty expected_root (e.g. ``CONFIG_READER_EXPECTED_ROOT=``) as unset."""
        if value is not None and not value.strip():
            return None
        return value


# Singleton pattern - loaded once, cached until reset
_settings: Optional[ReaderSettings] = None


def get_settings() -> ReaderSettings:
    """
    Get global reader settings (lazy-loaded singleton).

    Returns:
        Singleton ReaderSettings instance

    Example:
        >>> settings = get_settings()
        >>> settings is get_settings()
        True
    """
    global _settings
    if _settings is None:
        _settings = ReaderSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
