"""
Check that an XML document is structurally included in another.

Copyright 2022-2026, Levente Hunyadi
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class QName:
    """
    Qualified name of an element or attribute with the namespace prefix already resolved.

    :param local: Local name (label) without prefix.
    :param namespace: Namespace URI the prefix resolves to, or `None` for no namespace.
    :param prefix: Prefix used in the source document, only kept for display purposes.
    """

    local: str
    namespace: Optional[str] = None
    prefix: Optional[str] = field(default=None, compare=False)

    @property
    def clark(self) -> str:
        "Name in Clark notation, e.g. `{http://example.com}local`."

        if self.namespace:
            return f"{{{self.namespace}}}{self.local}"
        else:
            return self.local

    def __str__(self) -> str:
        if self.prefix:
            return f"{self.prefix}:{self.local}"
        else:
            return self.local


@dataclass(frozen=True)
class Text:
    "A text node."

    value: str

    def is_whitespace(self) -> bool:
        return not self.value.strip()


@dataclass(frozen=True)
class Comment:
    "A comment node. Contents are never inspected by the comparison."

    value: str


@dataclass(frozen=True)
class Element:
    """
    An element node.

    :param name: Qualified name of the element.
    :param attributes: Attribute values keyed by attribute name in Clark notation.
    :param children: Child nodes in document order.
    """

    name: QName
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple["Node", ...] = ()

    @property
    def label(self) -> str:
        return self.name.local


Node = Union[Element, Text, Comment]


def describe(node: Node) -> str:
    "Short human-readable representation of a node for use in diagnostic messages."

    match node:
        case Element(name=name):
            return f"<{name}>"
        case Text(value=value):
            if not value.strip():
                return f"whitespace {value!r}"
            return f'"{value.strip()}"'
        case Comment(value=value):
            return f"<!--{value}-->"
        case _:
            raise NotImplementedError("type match not exhaustive")
