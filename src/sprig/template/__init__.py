"""Compiled templates and bound fragments.

- core: Template (compiled code, ``bind``, ``render``, ``python_source``)
- fragment: Fragment (a template bound to a context; writes into a buffer)

"""

from __future__ import annotations

from sprig.template.core import Template
from sprig.template.fragment import Fragment

__all__ = ["Fragment", "Template"]
