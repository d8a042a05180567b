"""
Check that an XML document is structurally included in another.

Copyright 2022-2026, Levente Hunyadi
"""


class ArgumentError(ValueError):
    "Raised when wrong arguments are passed to a function call."


class ParseError(RuntimeError):
    "Raised when an XML document cannot be parsed."
