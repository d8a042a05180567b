"""
Check that an XML document is structurally included in another.

Copyright 2022-2026, Levente Hunyadi
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from typing import Protocol, runtime_checkable

from .errors import ArgumentError


@runtime_checkable
class PathMatcher(Protocol):
    """
    A protocol for patterns that select element subtrees to skip during comparison.
    """

    def matches(self, labels: Sequence[str]) -> bool:
        """
        True if the pattern selects the element identified by its ancestor labels.

        :param labels: Element labels from the document root to the element being tested (inclusive).
        """
        ...


def _match_segments(segments: Sequence[str], labels: Sequence[str]) -> bool:
    if not segments:
        return not labels

    head, rest = segments[0], segments[1:]
    if head == "**":
        # matches zero or more labels
        return any(_match_segments(rest, labels[index:]) for index in range(len(labels) + 1))

    return len(labels) > 0 and fnmatchcase(labels[0], head) and _match_segments(rest, labels[1:])


@dataclass(frozen=True)
class SimplePath:
    """
    An XPath-like pattern of element labels separated by `/`.

    * A pattern that starts with `/` is anchored at the document root, e.g. `/html/head/title`.
    * A pattern without a leading `/` matches at any depth, e.g. `head/title`.
    * Each segment is a shell-style wildcard, e.g. `*` stands for any single element.
    * The segment `**` stands for any number of elements, including none.

    :param pattern: Pattern string to parse.
    """

    pattern: str
    segments: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        pattern = self.pattern.strip()
        if not pattern:
            raise ArgumentError("expected: non-empty ignore path")

        if pattern.startswith("/"):
            segments = tuple(pattern[1:].split("/"))
        else:
            segments = ("**",) + tuple(pattern.split("/"))

        if any(not segment for segment in segments):
            raise ArgumentError(f"empty segment in ignore path: {self.pattern}")

        object.__setattr__(self, "segments", segments)

    def matches(self, labels: Sequence[str]) -> bool:
        return _match_segments(self.segments, labels)

    def __str__(self) -> str:
        return self.pattern
