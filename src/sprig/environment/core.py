"""sprig Environment: compilation entry point and template cache.

Architecture:
    ```
    Environment
    ├── parse(source)        # Lexer + Parser → Group
    ├── compile(source)      # parse + Compiler → Template (uncached)
    ├── from_string(source)  # compile through the LRU cache
    └── _cache: LRUCache     # (name, source) → Template
    ```

Thread-Safety:
- Configuration is fixed at construction
- The template cache is guarded by a lock
- Compilation is deterministic; two threads missing on the same key build
  equal templates and the last one wins

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sprig.compiler import Compiler
from sprig.lexer import tokenize
from sprig.parser import Parser
from sprig.template import Template
from sprig.utils.lru_cache import LRUCache

if TYPE_CHECKING:
    from sprig.nodes import Group

logger = logging.getLogger(__name__)


class Environment:
    """Compile and cache sprig templates.

    Args:
        cache_size: Maximum number of compiled templates kept by
            ``from_string`` (0 disables caching)

    Example:
            >>> env = Environment()
            >>> page = env.from_string('''
            ...     ul {
            ...         @for item in items { li { @item } }
            ...     }
            ... ''')
            >>> page.render(items=["a", "b"])
            '<ul><li>a</li><li>b</li></ul>'

    """

    __slots__ = ("_cache", "cache_size")

    def __init__(self, *, cache_size: int = 400):
        self.cache_size = cache_size
        self._cache = LRUCache(maxsize=cache_size)

    def parse(self, source: str, name: str | None = None) -> Group:
        """Parse template source into its AST.

        Raises:
            TemplateSyntaxError: LexerError or ParseError at the first problem
        """
        return Parser(tokenize(source, name), name=name, source=source).parse()

    def compile(self, source: str, name: str | None = None) -> Template:
        """Compile template source, bypassing the cache.

        Raises:
            TemplateSyntaxError: If the source (or the Python it produces)
                is invalid
        """
        group = self.parse(source, name)
        compiler = Compiler()
        module = compiler.generate(group)
        code = compiler.compile_module(module, name=name, source=source)
        logger.debug("Compiled template %s (%d chars)", name or "<template>", len(source))
        return Template(code, module, name=name, source=source)

    def from_string(self, source: str, name: str | None = None) -> Template:
        """Compile template source, reusing a cached Template when possible.

        Templates are cached by ``(name, source)``.
        """
        key = (name, source)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Template cache hit: %s", name or "<template>")
            return cached
        template = self.compile(source, name)
        self._cache.set(key, template)
        return template

    def clear_cache(self) -> None:
        """Drop every cached template and reset the statistics."""
        self._cache.clear()
        logger.debug("Template cache cleared")

    def cache_info(self) -> dict[str, Any]:
        """Cache statistics: size, max_size, hits, misses, hit_rate."""
        return self._cache.stats()

    def __repr__(self) -> str:
        return f"Environment(cache_size={self.cache_size})"
