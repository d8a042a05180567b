"""
Check that an XML document is structurally included in another.

Copyright 2022-2026, Levente Hunyadi
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Path:
    """
    Labels of the ancestor elements of the node being compared, starting with the document root.

    Paths are values: extending a path returns a new path and leaves the original unchanged.

    :param labels: Element labels, root first.
    """

    labels: tuple[str, ...] = ()

    def push(self, label: str) -> "Path":
        "Path of a child element with the given label."

        return Path(self.labels + (label,))

    def __len__(self) -> int:
        return len(self.labels)

    def __str__(self) -> str:
        return "/" + "/".join(self.labels)
