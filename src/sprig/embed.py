"""Inline templates in Python code.

``html()`` compiles a template where it is written and binds it in one
step. Compilation goes through a shared default Environment, so a template
inside a function is compiled on the first call and reused afterwards.

Example:
    >>> from sprig import html
    >>> def badge(label, count):
    ...     return html('span[class="badge"] { @label ": " @count }')
    >>> badge("Inbox", 3).render()
    '<span class="badge">Inbox: 3</span>'

With no keyword arguments the template sees the caller's globals and locals,
just as an f-string would. Pass keywords to bind an explicit context instead.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import TYPE_CHECKING, Any

from sprig.environment import Environment

if TYPE_CHECKING:
    from sprig.template import Fragment

_default_env: Environment | None = None
_default_env_lock = threading.Lock()


def default_environment() -> Environment:
    """The process-wide Environment used by ``html()``, created on first use."""
    global _default_env
    if _default_env is None:
        with _default_env_lock:
            if _default_env is None:
                _default_env = Environment()
    return _default_env


def html(source: str, /, **context: Any) -> Fragment:
    """Compile ``source`` and bind it to ``context`` (or the caller's scope).

    The template is named ``<html FILE:LINE>`` after the calling line, so
    syntax errors point at the embedding site.

    Raises:
        TemplateSyntaxError: If the template is invalid
    """
    caller = sys._getframe(1)
    try:
        filename = os.path.basename(caller.f_code.co_filename)
        name = f"<html {filename}:{caller.f_lineno}>"
        if not context:
            context = {**caller.f_globals, **caller.f_locals}
    finally:
        del caller
    return default_environment().from_string(source, name=name).bind(context)
