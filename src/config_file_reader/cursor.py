"""
Cursor over repeated configuration blocks.

A SectionCursor walks an ordered list of same-named elements captured at
creation, handing each out as a Section:

    <section4>
        <subsection><name>a</name><age>1</age></subsection>
        <subsection><name>b</name><age>2</age></subsection>
    </section4>

    >>> cursor = reader.cursor("subsection")
    >>> while cursor.has_next():
    ...     sub = cursor.step_next()
    ...     print(sub.get_string("name"), sub.get_int("age"))
"""

from typing import Iterator, List, Optional

from lxml import etree

from config_file_reader.config import ReaderSettings, get_settings
from config_file_reader.exceptions import ConfigReadError
from config_file_reader.section import Section


class SectionCursor:
    """
    Forward-only cursor over a fixed sequence of elements.

    The cursor starts before the first element. It is also a Python
    iterator, so ``for section in cursor`` consumes the remaining
    elements.

    Attributes:
        settings: Reader settings passed on to every Section
    """

    def __init__(self, elements: List[etree._Element], settings: Optional[ReaderSettings] = None):
        self._elements = list(elements)
        self._position = 0
        self.settings = settings if settings is not None else get_settings()

    def has_next(self) -> bool:
        """True if at least one element has not been stepped to yet."""
        return self._position < len(self._elements)

    def step_next(self) -> Section:
        """
        Advance to the next element.

        Returns:
            Section view over the element just reached

        Raises:
            ConfigReadError: If the cursor is exhausted
        """
        if not self.has_next():
            raise ConfigReadError(
                f"Cursor exhausted: all {len(self._elements)} element(s) already visited"
            )
        element = self._elements[self._position]
        self._position += 1
        return Section(element, self.settings)

    @property
    def position(self) -> int:
        """Number of elements stepped to so far."""
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._elements) - self._position

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Section]:
        return self

    def __next__(self) -> Section:
        if not self.has_next():
            raise StopIteration
        return self.step_next()

    def __repr__(self) -> str:
        return f"SectionCursor(position={self._position}, total={len(self._elements)})"
