"""
Typed accessors over a single configuration element.

ElementAccessor holds every lookup rule (scalar getters with default
fallback, list and map collectors). Two classes use it:

- Section: an immutable view over one element, handed out by cursors
- ConfigReader: resolves its scope from a mutable "current section"
"""

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Optional

from lxml import etree

from config_file_reader.config import ReaderSettings, get_settings
from config_file_reader.exceptions import (
    ConfigParseError,
    ConfigReadError,
    ElementNotFoundError,
)
from config_file_reader.parsers.values import (
    ParseResult,
    parse_boolean,
    parse_int,
    parse_long,
    parse_string,
)
from config_file_reader.parsers.xml_parser import (
    element_attributes,
    element_text,
    find_child,
    find_children,
    iter_children,
)

if TYPE_CHECKING:
    from config_file_reader.cursor import SectionCursor

logger = logging.getLogger(__name__)


class ElementAccessor:
    """
    Lookup operations against the element returned by ``element``.

    Subclasses provide ``element`` (the scope) and ``settings``. All
    lookups read direct children of the scope only.
    """

    settings: ReaderSettings

    @property
    def element(self) -> etree._Element:
        raise NotImplementedError

    def _text(self, child: etree._Element) -> str:
        return element_text(child, trim=self.settings.trim_text)

    def _read_scalar(
        self,
        element_name: str,
        default: Any,
        use_default: bool,
        parse: Callable[[str], ParseResult],
    ) -> Any:
        child = find_child(self.element, element_name)
        if child is None:
            if use_default:
                logger.debug(f"'{element_name}' not found in <{self.element.tag}>, using default {default!r}")
                return default
            raise ElementNotFoundError(
                element_name,
                f"Element not found: '{element_name}' in <{self.element.tag}>"
            )

        text = self._text(child)
        result = parse(text)
        if result.ok:
            return result.value

        if use_default:
            logger.debug(f"'{element_name}' unreadable ({result.error}), using default {default!r}")
            return default
        raise ConfigParseError(element_name, text, result.error)

    # === Scalar Accessors ===

    def get_int(self, element_name: str, default: int = 0, use_default: bool = False) -> int:
        """
        Read a signed 32-bit integer from the first child named element_name.

        Args:
            element_name: Name of the child element holding the value
            default: Returned instead of failing when use_default is True
            use_default: Fall back to default when the element is missing
                or its text is not a valid int

        Returns:
            Parsed integer, or default

        Raises:
            ElementNotFoundError: Element missing and use_default is False
            ConfigParseError: Text not a valid int and use_default is False

        Example:
            >>> reader.get_int("port")
            8080
            >>> reader.get_int("timeout", 30, True)
            30
        """
        return self._read_scalar(element_name, default, use_default, parse_int)

    def get_long(self, element_name: str, default: int = 0, use_default: bool = False) -> int:
        """Read a signed 64-bit integer; same rules as get_int."""
        return self._read_scalar(element_name, default, use_default, parse_long)

    def get_boolean(self, element_name: str, default: bool = False, use_default: bool = False) -> bool:
        """
        Read a boolean; "true" in any case is True and anything else is False.

        Only a missing element can fall back to default, since every text
        converts.
        """
        return self._read_scalar(element_name, default, use_default, parse_boolean)

    def get_string(self, element_name: str, default: str = "", use_default: bool = False) -> str:
        return self._read_scalar(element_name, default, use_default, parse_string)

    # === Collection Accessors ===

    def get_list(self, element_name: str) -> List[str]:
        """
        Text of every child named element_name, in document order.

        Example:
            >>> # <flavor>choc</flavor><flavor>van</flavor>
            >>> reader.get_list("flavor")
            ['choc', 'van']
        """
        return [self._text(child) for child in iter_children(self.element, element_name)]

    def get_map(
        self,
        element_name: str,
        attribute_name: str,
        continue_if_possible: bool = False,
    ) -> Dict[str, str]:
        """
        Map each child's attribute_name value to the child's text.

        Args:
            element_name: Name of the repeated child elements
            attribute_name: Attribute whose value becomes the key
            continue_if_possible: Skip children lacking the attribute
                instead of failing

        Returns:
            Dictionary of attribute value → text. Duplicate keys keep the
            last value seen.

        Raises:
            ConfigReadError: A child lacks attribute_name and
                continue_if_possible is False

        Example:
            >>> # <client id="c1">12345</client><client id="c2">xyz</client>
            >>> reader.get_map("client", "id")
            {'c1': '12345', 'c2': 'xyz'}
        """
        result: Dict[str, str] = {}

        for position, child in enumerate(iter_children(self.element, element_name)):
            key = child.get(attribute_name)
            if key is None:
                message = (
                    f"<{element_name}> #{position + 1} (line {child.sourceline}) "
                    f"lacks attribute '{attribute_name}'"
                )
                if continue_if_possible:
                    logger.warning(f"Skipping map entry: {message}")
                    continue
                raise ConfigReadError(f"Cannot read map from <{self.element.tag}>: {message}")
            result[key] = self._text(child)

        return result

    def get_maps(self, element_name: str) -> Dict[str, List[Dict[str, str]]]:
        """
        Group the attributes of each child under the child's text.

        Every child named element_name contributes one attribute dictionary,
        appended to the list kept under its text. Children sharing a text
        accumulate in encounter order.

        Example:
            >>> # <client car="Honda" wife="Glenda">client1</client>
            >>> # <client>client2</client>
            >>> reader.get_maps("client")
            {'client1': [{'car': 'Honda', 'wife': 'Glenda'}], 'client2': [{}]}
        """
        result: Dict[str, List[Dict[str, str]]] = defaultdict(list)
        for child in iter_children(self.element, element_name):
            result[self._text(child)].append(element_attributes(child))
        return dict(result)

    # === Navigation ===

    def has_element(self, element_name: str) -> bool:
        return find_child(self.element, element_name) is not None

    def iter_elements(self, element_name: str) -> Iterator[etree._Element]:
        """
        Raw children named element_name, for manual navigation.

        Example:
            >>> for element in reader.iter_elements("client"):
            ...     reader.set_current_section(element)
            ...     print(reader.get_int("intval"))
            >>> reader.set_current_section(None)
        """
        return iter_children(self.element, element_name)

    def cursor(self, element_name: str) -> 'SectionCursor':
        """
        Caller-owned cursor over the children named element_name.

        The cursor captures the children when created and yields Section
        views; it does not change this object's scope, so any number of
        cursors (including nested ones) can be open at once.

        Example:
            >>> for sub in reader.cursor("subsection"):
            ...     print(sub.get_string("name"), sub.get_int("age"))
        """
        from config_file_reader.cursor import SectionCursor
        return SectionCursor(find_children(self.element, element_name), self.settings)


class Section(ElementAccessor):
    """
    Immutable view over one configuration element.

    Attributes:
        element: The wrapped lxml element
        settings: Reader settings applied to text reads

    Example:
        >>> section = Section(element)
        >>> section.name
        'subsection'
        >>> section.get_string("name")
        'alice'
    """

    def __init__(self, element: etree._Element, settings: Optional[ReaderSettings] = None):
        self._element = element
        self.settings = settings if settings is not None else get_settings()

    @property
    def element(self) -> etree._Element:
        return self._element

    @property
    def name(self) -> str:
        return self._element.tag

    @property
    def text(self) -> str:
        return self._text(self._element)

    @property
    def attributes(self) -> Dict[str, str]:
        return element_attributes(self._element)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self._element is other._element

    def __hash__(self) -> int:
        return hash(self._element)

    def __repr__(self) -> str:
        return f"Section(<{self.name}> line {self._element.sourceline})"
