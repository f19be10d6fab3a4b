"""HTML escaping shared by the compiler and the runtime.

The same table is used for static text escaped once at compile time and for
dynamic values escaped at render time, so both paths agree byte for byte.
"""

from __future__ import annotations

# Single-pass translation table: & < > ' "
_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        "'": "&apos;",
        '"': "&quot;",
    }
)

_SPECIAL = frozenset("&<>'\"")


def html_escape(text: str) -> str:
    """Escape ``&``, ``<``, ``>``, ``'`` and ``"``; everything else passes through.

    Example:
        >>> html_escape('<a href="x">Tom & Jerry\\'s</a>')
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;'
    """
    # Fast path: most text has nothing to escape
    if _SPECIAL.isdisjoint(text):
        return text
    return text.translate(_ESCAPE_TABLE)
