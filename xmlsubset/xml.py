"""
Check that an XML document is structurally included in another.

Copyright 2022-2026, Levente Hunyadi
"""

from collections.abc import Iterable
from typing import Optional, Union

from .comparison import Comparison
from .matcher import PathMatcher
from .nodes import Element
from .outcome import ComparisonOutcome
from .tree import ElementType, from_element, parse_string

XmlSource = Union[str, bytes, ElementType, Element]


def _as_node(source: XmlSource) -> Element:
    if isinstance(source, Element):
        return source
    elif isinstance(source, (str, bytes)):
        return parse_string(source)
    elif isinstance(source, ElementType):
        return from_element(source)
    else:
        raise TypeError(f"expected: XML string or element tree; got: {type(source).__name__}")


def compare_xml(
    expected: XmlSource,
    actual: XmlSource,
    *,
    ignore_paths: Optional[Iterable[Union[str, PathMatcher]]] = None,
    ignore_text: bool = False,
) -> ComparisonOutcome:
    """
    Checks whether an expected XML document is included in an actual XML document.

    :param expected: Expected XML document as a string or an element tree.
    :param actual: Actual XML document as a string or an element tree.
    :param ignore_paths: Patterns that select element subtrees in the expected document to skip.
    :param ignore_text: When true, only document structure is compared.
    :returns: `NO_DIFF` if the expected document is included, or a description of the first difference found.
    """

    comparison = Comparison.create(ignore_paths=ignore_paths, ignore_text=ignore_text)
    return comparison(_as_node(expected), _as_node(actual))


def is_xml_included(
    expected: XmlSource,
    actual: XmlSource,
    *,
    ignore_paths: Optional[Iterable[Union[str, PathMatcher]]] = None,
    ignore_text: bool = False,
) -> bool:
    """
    Checks whether all elements, attributes and text of an expected XML document are found in an actual XML document.

    :returns: True if the expected document is included, False otherwise.
    """

    return compare_xml(expected, actual, ignore_paths=ignore_paths, ignore_text=ignore_text).is_similar
