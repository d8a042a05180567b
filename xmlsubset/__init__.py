"""
Check that an XML document is structurally included in another.

Compares an expected XML tree against an actual XML tree. The comparison succeeds when every element, attribute and text
value in the expected tree is also found in the actual tree. Element order does not matter, and additional content in the
actual tree is tolerated.
"""

from ._version import __version__

__all__ = ["__version__"]

__author__ = "Levente Hunyadi"
__copyright__ = "Copyright 2022-2026, Levente Hunyadi"
__license__ = "MIT"
__maintainer__ = "Levente Hunyadi"
__status__ = "Production"
