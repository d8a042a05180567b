"""
Check that an XML document is structurally included in another.

Copyright 2022-2026, Levente Hunyadi
"""

import logging
from pathlib import Path
from typing import Optional, Union

import lxml.etree as ET

from .errors import ParseError
from .nodes import Comment, Element, Node, QName, Text

LOGGER = logging.getLogger(__name__)

ElementType = ET._Element  # pyright: ignore [reportPrivateUsage]


def _parser() -> ET.XMLParser:
    return ET.XMLParser(
        remove_comments=False,
        remove_pis=True,
        no_network=True,
    )


def _append_text(children: list[Node], value: Optional[str]) -> None:
    if not value:
        return

    # merge with adjacent text, e.g. when a processing instruction has been dropped in between
    if children and isinstance(children[-1], Text):
        children[-1] = Text(children[-1].value + value)
    else:
        children.append(Text(value))


def from_element(element: ElementType) -> Element:
    """
    Converts an lxml element tree into an element node.

    Text and tail text become text nodes, comments become comment nodes, and processing instructions are dropped.
    Namespace prefixes are resolved to namespace URIs by lxml.

    :param element: Root of an lxml element tree.
    :returns: Element node with all of its descendants.
    """

    qname = ET.QName(element)
    children: list[Node] = []
    _append_text(children, element.text)

    for child in element:
        if isinstance(child, ET._Comment):  # pyright: ignore [reportPrivateUsage]
            children.append(Comment(child.text or ""))
        elif isinstance(child, ET._ProcessingInstruction):  # pyright: ignore [reportPrivateUsage]
            pass
        elif isinstance(child, ET._Entity):  # pyright: ignore [reportPrivateUsage]
            # unresolved entity reference such as `&copy;`
            _append_text(children, child.text)
        else:
            children.append(from_element(child))
        _append_text(children, child.tail)

    return Element(
        name=QName(qname.localname, qname.namespace, element.prefix),
        attributes={str(key): str(value) for key, value in element.attrib.items()},
        children=tuple(children),
    )


def element_from_string(content: Union[str, bytes]) -> ElementType:
    """
    Parses an XML string into an lxml element tree, keeping comments.

    :param content: XML document as a string.
    :returns: Root element of the document.
    """

    if isinstance(content, str):
        content = content.encode("utf-8")

    try:
        return ET.fromstring(content, parser=_parser())
    except ET.XMLSyntaxError as ex:
        raise ParseError(f"malformed XML: {ex}") from ex


def parse_string(content: Union[str, bytes]) -> Element:
    """
    Parses an XML string into an element node.

    :param content: XML document as a string.
    :returns: Root element of the document.
    """

    return from_element(element_from_string(content))


def parse_file(path: Path) -> Element:
    """
    Parses an XML file into an element node.

    :param path: Path to an XML document.
    :returns: Root element of the document.
    """

    LOGGER.debug("Parsing XML document: %s", path)
    try:
        tree = ET.parse(str(path), parser=_parser())
    except ET.XMLSyntaxError as ex:
        raise ParseError(f"malformed XML in {path}: {ex}") from ex

    return from_element(tree.getroot())
