"""
ConfigReader: typed access to one section of an XML configuration file.

Configuration files have a single top-level element holding named
sections; each section holds named, possibly repeated, child elements:

    <config>
        <database>
            <host>db.local</host>
            <port>5432</port>
        </database>
        <clients>
            <client id="c1">12345</client>
            <client id="c2">xyz</client>
        </clients>
    </config>

A reader is bound to one section at construction and answers lookups
against its "current section", which starts at that section and can be
moved by set_current_section() or the step_into()/step_next() cursor.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from lxml import etree

from config_file_reader.config import ReaderSettings, get_settings
from config_file_reader.cursor import SectionCursor
from config_file_reader.exceptions import ElementNotFoundError
from config_file_reader.parsers.xml_parser import (
    find_child,
    find_children,
    load_document,
    load_document_from_string,
)
from config_file_reader.section import ElementAccessor, Section

logger = logging.getLogger(__name__)


class ConfigReader(ElementAccessor):
    """
    Reader for one section of a parsed XML configuration document.

    The file is parsed once at construction and not held open. Every
    accessor (get_int, get_list, get_map, ...) reads direct children of
    the current section.

    Not thread-safe: the current section and the step_into() cursor are
    unguarded instance state. Share a reader between threads only with
    external locking, or hand each thread its own Section/SectionCursor
    obtained from cursor().

    Usage:
        reader = ConfigReader("app.xml", "database")
        host = reader.get_string("host")
        port = reader.get_int("port", 5432, True)

        # Repeated blocks, one level at a time
        reader.step_into("replica")
        while reader.has_next():
            reader.step_next()
            print(reader.get_string("host"))
        reader.step_into(None)  # back to <database>

    Attributes:
        settings: Reader settings (text trimming, lxml options)
    """

    def __init__(
        self,
        path: Union[str, Path],
        section_name: str,
        settings: Optional[ReaderSettings] = None,
    ):
        """
        Parse the configuration file and resolve the section.

        Args:
            path: Path to the XML configuration file
            section_name: Name of the top-level element's child to read
            settings: Reader settings (default: get_settings())

        Raises:
            ConfigIOError: If the file cannot be read or is not
                well-formed XML
            ElementNotFoundError: If the section (or the configured
                expected root) does not exist
        """
        settings = settings if settings is not None else get_settings()
        logger.info(f"Loading configuration section '{section_name}' from {path}")
        document = load_document(path, settings)
        self._initialize(document, section_name, settings, str(path))

    @classmethod
    def from_string(
        cls,
        text: Union[str, bytes],
        section_name: str,
        settings: Optional[ReaderSettings] = None,
    ) -> 'ConfigReader':
        """
        Build a reader from an in-memory XML document.

        Raises:
            ConfigIOError: If the text is not well-formed XML
            ElementNotFoundError: If the section does not exist

        Example:
            >>> reader = ConfigReader.from_string(
            ...     "<config><s><age>7</age></s></config>", "s")
            >>> reader.get_int("age")
            7
        """
        settings = settings if settings is not None else get_settings()
        document = load_document_from_string(text, settings)
        reader = cls.__new__(cls)
        reader._initialize(document, section_name, settings, '<string>')
        return reader

    def _initialize(
        self,
        document: etree._ElementTree,
        section_name: str,
        settings: ReaderSettings,
        source: str,
    ) -> None:
        """Set up all instance state from an already-parsed document."""
        self.settings = settings
        self._source = source
        self._document = document
        self._section_name = section_name
        self._stepper: Optional[SectionCursor] = None
        self._current: Optional[etree._Element] = None

        expected_root = self.settings.expected_root
        if expected_root is not None and self.root.tag != expected_root:
            raise ElementNotFoundError(
                expected_root,
                f"Top-level element is <{self.root.tag}>, expected <{expected_root}> in {self._source}"
            )

        self.set_current_section(None)

    # === Document Access ===

    @property
    def document(self) -> etree._ElementTree:
        return self._document

    @property
    def root(self) -> etree._Element:
        """The document's top-level element."""
        return self._document.getroot()

    @property
    def section_name(self) -> str:
        """Name of the configured section (the reset target)."""
        return self._section_name

    @property
    def source(self) -> str:
        """Path the document was read from, or '<string>'."""
        return self._source

    @property
    def current_section(self) -> etree._Element:
        """Element the next lookup resolves against."""
        return self._current

    @property
    def element(self) -> etree._Element:
        return self._current

    # === Section Resolution ===

    def _resolve_section(self) -> etree._Element:
        section = find_child(self.root, self._section_name)
        if section is None:
            raise ElementNotFoundError(
                self._section_name,
                f"Section '{self._section_name}' does not exist under <{self.root.tag}> in {self._source}"
            )
        return section

    def set_current_section(self, element: Union[etree._Element, Section, None]) -> None:
        """
        Point lookups at an arbitrary element, or back at the configured section.

        Args:
            element: Element (or Section) to read from; None re-resolves
                the configured section

        Raises:
            ElementNotFoundError: If element is None and the configured
                section no longer resolves
        """
        if element is None:
            self._current = self._resolve_section()
            logger.debug(f"Current section reset to <{self._section_name}>")
        elif isinstance(element, Section):
            self._current = element.element
        else:
            self._current = element

    def section(self) -> Section:
        """Immutable view over the current section."""
        return Section(self._current, self.settings)

    # === One-level Cursor ===

    def step_into(self, element_name: Optional[str]) -> None:
        """
        Start stepping through the current section's children named element_name.

        Passing None ends stepping: the cursor is dropped and the current
        section is reset to the configured section. Starting a new
        step_into() replaces any cursor already active; there is no
        nesting.

        Example:
            >>> reader.step_into("subsection")
            >>> while reader.has_next():
            ...     reader.step_next()
            ...     print(reader.get_string("name"))
            >>> reader.step_into(None)
        """
        if element_name is None:
            self._stepper = None
            self.set_current_section(None)
            return

        self._stepper = SectionCursor(find_children(self._current, element_name), self.settings)
        logger.debug(
            f"Stepping into {len(self._stepper)} <{element_name}> element(s) of <{self._current.tag}>"
        )

    def has_next(self) -> bool:
        """True if a step_into() cursor is active and has elements left."""
        if self._stepper is None:
            return False
        return self._stepper.has_next()

    def step_next(self) -> None:
        """
        Make the cursor's next element the current section.

        Does nothing if no step_into() cursor is active.

        Raises:
            ConfigReadError: If the cursor has no elements left
        """
        if self._stepper is None:
            return
        self.set_current_section(self._stepper.step_next())

    def __repr__(self) -> str:
        return (
            f"ConfigReader(source='{self._source}', section='{self._section_name}', "
            f"current=<{self._current.tag}>)"
        )
