"""
Check that an XML document is structurally included in another.

Copyright 2022-2026, Levente Hunyadi
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Union

from .matcher import PathMatcher, SimplePath


def _as_matcher(item: Union[str, PathMatcher]) -> PathMatcher:
    if isinstance(item, str):
        return SimplePath(item)
    elif isinstance(item, PathMatcher):
        return item
    else:
        raise TypeError(f"expected: ignore path as a string or a path matcher; got: {type(item).__name__}")


@dataclass(frozen=True)
class ComparisonOptions:
    """
    Options that control how an expected document is compared against an actual document.

    Options are fixed when the comparison object is created, and may be shared by comparisons running concurrently.

    :param ignore_paths: Patterns that select element subtrees in the expected document that are always considered a match.
    :param ignore_text: When true, text content and attribute values are not compared, only document structure matters.
    """

    ignore_paths: tuple[PathMatcher, ...] = ()
    ignore_text: bool = False

    @classmethod
    def create(
        cls,
        *,
        ignore_paths: Optional[Iterable[Union[str, PathMatcher]]] = None,
        ignore_text: bool = False,
    ) -> "ComparisonOptions":
        """
        Creates comparison options, converting pattern strings into path matchers.

        :param ignore_paths: Pattern strings (see `SimplePath`) or path matcher objects.
        :param ignore_text: Whether to skip comparing text content and attribute values.
        """

        matchers = tuple(_as_matcher(item) for item in ignore_paths) if ignore_paths else ()
        return cls(ignore_paths=matchers, ignore_text=ignore_text)
