"""Template caching -- compile once, render many times.

``Environment.from_string`` keeps compiled templates in an LRU cache keyed
by ``(name, source)``. Rendering a cached template never touches the lexer,
parser, or compiler again. ``cache_info()`` reports hits and misses.

``Environment.compile`` always recompiles, which is what you want for
one-off templates that should not occupy a cache slot.

Run:
    python app.py
"""

from sprig import Environment

env = Environment(cache_size=2)

ROW = 'tr { td { @name } td[class="num"] { @count } }'
TABLE = "table { @for row in rows { @row } }"

stock = [("apples", 3), ("pears", 0), ("plums", 12)]

row_template = env.from_string(ROW, name="row")

# Same source every iteration: served from the cache
rows = [env.from_string(ROW, name="row").bind(name=n, count=c) for n, c in stock]
info_after_rows = env.cache_info()

output = env.from_string(TABLE, name="table").render(rows=rows)

# A third template overflows the two-slot cache and evicts the oldest entry
env.from_string("caption { @title }", name="caption")
info_after_overflow = env.cache_info()
row_recompiled = env.from_string(ROW, name="row") is not row_template

# compile() bypasses the cache entirely
one_off = env.compile("p { once }")


def main() -> None:
    print(output)
    print()
    print(f"After rows:     {info_after_rows}")
    print(f"After overflow: {info_after_overflow}")
    print(f"Row template recompiled: {row_recompiled}")


if __name__ == "__main__":
    main()
