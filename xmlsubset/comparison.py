"""
Check that an XML document is structurally included in another.

Copyright 2022-2026, Levente Hunyadi
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Optional, Union

from .matcher import PathMatcher
from .nodes import Comment, Element, Node, Text, describe
from .options import ComparisonOptions
from .outcome import NO_DIFF, ComparisonOutcome, Match, Mismatch
from .path import Path

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeChanges:
    """
    Differences between the attributes of an expected and an actual element.

    :param changed: Attributes present in both elements but with different values, mapped to (expected, actual) value pairs.
    :param added: Attributes present only in the actual element.
    :param removed: Attributes present only in the expected element.
    """

    changed: dict[str, tuple[str, str]]
    added: dict[str, str]
    removed: dict[str, str]


def attribute_changes(expected: Mapping[str, str], actual: Mapping[str, str]) -> AttributeChanges:
    "Partitions the attribute names of two elements into changed, added and removed."

    return AttributeChanges(
        changed={key: (value, actual[key]) for key, value in expected.items() if key in actual and actual[key] != value},
        added={key: value for key, value in actual.items() if key not in expected},
        removed={key: value for key, value in expected.items() if key not in actual},
    )


def _format_attributes(items: Iterable[str]) -> str:
    return ", ".join(items) or "(none)"


def _wrong_attributes(expected: Element, actual: Element) -> str:
    changes = attribute_changes(expected.attributes, actual.attributes)
    changed = _format_attributes(f'{key}="{old}" -> "{new}"' for key, (old, new) in changes.changed.items())
    added = _format_attributes(f'{key}="{value}"' for key, value in changes.added.items())
    removed = _format_attributes(f'{key}="{value}"' for key, value in changes.removed.items())
    return f"Attributes are different at {describe(expected)}\n\tChanged: {changed}\n\tAdded: {added}\n\tRemoved: {removed}"


class Comparison:
    """
    Compares an expected document against an actual document.

    The documents match when all elements and attributes in the expected document are found in the actual document, and
    their values are equal. The actual document may have additional elements and attributes that don't make the
    comparison fail.

    The order of elements does not matter but text and comments are compared in document order. Elements selected by an
    ignore path are skipped. If text is ignored, text content and attribute values are not compared, and only document
    structure matters.

    The comparison object holds no state other than its options, and may be reused.
    """

    options: ComparisonOptions

    def __init__(self, options: Optional[ComparisonOptions] = None) -> None:
        self.options = options if options is not None else ComparisonOptions()

    @classmethod
    def create(
        cls,
        *,
        ignore_paths: Optional[Iterable[Union[str, PathMatcher]]] = None,
        ignore_text: bool = False,
    ) -> "Comparison":
        return cls(ComparisonOptions.create(ignore_paths=ignore_paths, ignore_text=ignore_text))

    def __call__(self, expected: Node, actual: Node) -> ComparisonOutcome:
        return self.compare(expected, actual, Path())

    def ignored(self, label: str, path: Path) -> bool:
        "True if the element with the given label, enclosed in the elements of the path, is to be skipped."

        labels = path.labels + (label,)
        return any(pattern.matches(labels) for pattern in self.options.ignore_paths)

    def same_elem(self, expected: Element, actual: Element, path: Path) -> bool:
        "True if the elements have the same qualified name, or the expected element is ignored."

        return self.ignored(expected.label, path) or expected.name == actual.name

    def includes_attributes(self, expected: Element, actual: Element) -> bool:
        "True if the attributes of the expected element are included in the attributes of the actual element."

        for key, value in expected.attributes.items():
            actual_value = actual.attributes.get(key)
            if actual_value is None:
                return False
            if not self.options.ignore_text and actual_value != value:
                return False
        return True

    def compare(self, expected: Node, actual: Node, path: Path = Path()) -> ComparisonOutcome:
        """
        Compares an expected node to an actual node.

        Comments match any node. Text is compared with leading and trailing whitespace removed. Elements match if their
        attributes and content (including children) exist and are the same in the actual element.

        :param expected: Node in the expected document.
        :param actual: Node in the actual document.
        :param path: Labels of the elements that enclose the nodes being compared.
        :returns: `NO_DIFF` if the nodes match, or a description of the first difference found.
        """

        match expected, actual:
            case (Comment(), _) | (_, Comment()):
                return NO_DIFF

            case (Text() as t1, Text() as t2):
                if self.options.ignore_text or t1.value.strip() == t2.value.strip():
                    return NO_DIFF
                return Mismatch(path, f"Expected {describe(t1)} but {describe(t2)} found.")

            case (Element() as e1, Element() as e2):
                return self._compare_element(e1, e2, path)

            case (Element() | Text(), Element() | Text()):
                return Mismatch(path, f"Expected {describe(expected)} but {describe(actual)} found.")

            case _:
                raise NotImplementedError("type match not exhaustive")

    def _compare_element(self, expected: Element, actual: Element, path: Path) -> ComparisonOutcome:
        inner = path.push(expected.label)

        if self.ignored(expected.label, path):
            LOGGER.debug("Skipping ignored element: %s", inner)
            return NO_DIFF

        if not self.same_elem(expected, actual, path):
            expected_name, actual_name = str(expected.name), str(actual.name)
            if expected_name == actual_name:
                # same prefix bound to different namespaces
                expected_name, actual_name = expected.name.clark, actual.name.clark
            return Mismatch(inner, f"Expected <{expected_name}> but <{actual_name}> found.")

        if not self.includes_attributes(expected, actual):
            return Mismatch(inner, _wrong_attributes(expected, actual))

        return self.compare_elems(expected.children, actual.children, inner)

    def compare_elems(self, expected: Sequence[Node], actual: Sequence[Node], path: Path) -> ComparisonOutcome:
        """
        Compares a list of nodes to another.

        Element order does not matter: each expected element is matched against the first element in the actual list
        that is found to match (not the best match), and each actual element is used at most once. Other nodes are
        required to be in the same order. Whitespace-only text in the expected list is skipped, and whitespace-only text in
        the actual list is skipped when looking for the text that corresponds to expected text.

        :param expected: Child nodes of an expected element.
        :param actual: Child nodes of the corresponding actual element.
        :param path: Labels of the elements that enclose the nodes, including their parent.
        """

        pool = list(actual)
        for node in expected:
            match node:
                case Element():
                    if self.ignored(node.label, path):
                        LOGGER.debug("Skipping ignored element: %s", path.push(node.label))
                        continue

                    if not pool:
                        return Mismatch(path, f"Expected {describe(node)}.")

                    candidates = [
                        index for index, other in enumerate(pool) if isinstance(other, Element) and self.same_elem(node, other, path)
                    ]
                    if not candidates:
                        return Mismatch(path, f"Expected {describe(node)}.")

                    LOGGER.debug("Found %d candidate(s) for %s", len(candidates), path.push(node.label))
                    failures: list[ComparisonOutcome] = []
                    for index in candidates:
                        result = self.compare(node, pool[index], path)
                        if isinstance(result, Match):
                            # remove the matched instance, not an equal sibling
                            del pool[index]
                            break
                        failures.append(result)
                    else:
                        details = "".join(f"\n\t{failure}" for failure in failures)
                        return Mismatch(path, f"None of the elements found fully matches {describe(node)}:{details}")

                case Text() if node.is_whitespace():
                    continue

                case Text() | Comment():
                    if isinstance(node, Text):
                        # whitespace in the actual list is tolerated as extra content
                        while pool and isinstance(pool[0], Text) and pool[0].is_whitespace():
                            del pool[0]

                    if not pool:
                        return Mismatch(path, f"Expected {describe(node)}.")

                    result = self.compare(node, pool[0], path)
                    if not result.is_similar:
                        return result
                    del pool[0]

                case _:
                    raise NotImplementedError("type match not exhaustive")

        return NO_DIFF
