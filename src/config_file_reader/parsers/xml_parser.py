"""
Low-level XML loading and element helpers built on lxml.

Configuration files are parsed once into an lxml tree. Everything above
this module works on lxml elements through the helpers here, so text and
child lookup rules live in one place:

1. Element text is the element's DIRECT text (leading text plus the tails
   of its children), never descendant text
2. Child lookup matches the plain tag name, without namespace, and only
   direct children
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from lxml import etree

from config_file_reader.config import ReaderSettings
from config_file_reader.exceptions import ConfigIOError

logger = logging.getLogger(__name__)


def _make_parser(settings: ReaderSettings, encoding: Optional[str] = None) -> etree.XMLParser:
    return etree.XMLParser(
        recover=False,
        huge_tree=settings.huge_tree,
        resolve_entities=settings.resolve_entities,
        no_network=True,
        encoding=encoding,
    )


def load_document(path: Union[str, Path], settings: ReaderSettings) -> etree._ElementTree:
    """
    Parse an XML configuration file.

    The file is first parsed with its declared (or detected) encoding. If
    that fails with a decoding error, each of settings.fallback_encodings
    is tried in order.

    Args:
        path: Path to the XML file
        settings: Reader settings (parser options, fallback encodings)

    Returns:
        Parsed lxml ElementTree

    Raises:
        ConfigIOError: If the file is missing, unreadable, or not
            well-formed XML
    """
    xml_path = Path(path)

    if not xml_path.exists():
        error_msg = f"Cannot read configuration file {xml_path}: file does not exist"
        logger.error(error_msg)
        raise ConfigIOError(error_msg, path=str(xml_path))

    try:
        data = xml_path.read_bytes()
    except OSError as e:
        error_msg = f"Cannot read configuration file {xml_path}: {e}"
        logger.error(error_msg)
        raise ConfigIOError(error_msg, path=str(xml_path)) from e

    if not data.strip():
        error_msg = f"Malformed XML in configuration file {xml_path}: file is empty"
        logger.error(error_msg)
        raise ConfigIOError(error_msg, path=str(xml_path))

    encodings: List[Optional[str]] = [None] + list(settings.fallback_encodings)
    last_error: Optional[Exception] = None

    for encoding in encodings:
        try:
            root = etree.fromstring(data, _make_parser(settings, encoding), base_url=str(xml_path))
        except (etree.XMLSyntaxError, OSError) as e:
            # lxml reports undecodable input as either exception type
            last_error = e
            if 'encoding' in str(e).lower():
                logger.debug(f"Decoding {xml_path} with {encoding or 'declared encoding'} failed: {e}")
                continue
            break
        else:
            logger.debug(f"Parsed {xml_path} (encoding: {encoding or 'declared'})")
            return root.getroottree()

    error_msg = f"Malformed XML in configuration file {xml_path}: {last_error}"
    logger.error(error_msg)
    raise ConfigIOError(error_msg, path=str(xml_path)) from last_error


def load_document_from_string(text: Union[str, bytes], settings: ReaderSettings) -> etree._ElementTree:
    """
    Parse an in-memory XML document.

    A str is encoded as UTF-8 and parsed as such, ignoring any encoding
    declaration it carries; bytes are parsed as-is.

    Raises:
        ConfigIOError: If the text is not well-formed XML
    """
    if isinstance(text, str):
        data = text.encode('utf-8')
        parser = _make_parser(settings, 'utf-8')
    else:
        data = text
        parser = _make_parser(settings)

    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        error_msg = f"Malformed XML in configuration text: {e}"
        logger.error(error_msg)
        raise ConfigIOError(error_msg) from e

    return root.getroottree()


def element_text(element: etree._Element, trim: bool = False) -> str:
    """
    Direct text content of an element.

    Concatenates the text before the first child and the tail of every
    child, so comments and nested elements do not split or pollute the
    value. An empty element yields ''.

    Args:
        element: lxml element
        trim: Strip surrounding whitespace

    Example:
        >>> el = etree.fromstring('<a>x<!-- note -->y<b>skip</b>z</a>')
        >>> element_text(el)
        'xyz'
    """
    parts = [element.text or '']
    parts.extend(child.tail or '' for child in element)
    text = ''.join(parts)
    return text.strip() if trim else text


def iter_children(element: etree._Element, name: str) -> Iterator[etree._Element]:
    """Direct children of element with tag `name` (no namespace), in document order."""
    return element.iterchildren(tag=name)


def find_children(element: etree._Element, name: str) -> List[etree._Element]:
    return list(iter_children(element, name))


def find_child(element: etree._Element, name: str) -> Optional[etree._Element]:
    """First direct child named `name`, or None."""
    return next(iter_children(element, name), None)


def element_attributes(element: etree._Element) -> Dict[str, str]:
    """Attribute name → value mapping, in document order."""
    return dict(element.attrib)
