"""
Check that an XML document is structurally included in another.

Copyright 2022-2026, Levente Hunyadi
"""

from dataclasses import dataclass
from typing import Literal, Union

from .path import Path


@dataclass(frozen=True)
class Match:
    "No difference has been found."

    @property
    def is_similar(self) -> Literal[True]:
        return True

    def __str__(self) -> str:
        return "No diff"


@dataclass(frozen=True)
class Mismatch:
    """
    A difference between the expected and the actual document.

    :param path: Labels of the elements enclosing the location where the difference has been detected.
    :param message: Explanation of the difference.
    """

    path: Path
    message: str

    @property
    def is_similar(self) -> Literal[False]:
        return False

    def __str__(self) -> str:
        return f"Diff at {self.path}: {self.message}"


ComparisonOutcome = Union[Match, Mismatch]

NO_DIFF = Match()
