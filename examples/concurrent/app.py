"""Concurrent rendering: one template shared by 8 threads.

A compiled sprig template is immutable. Every ``bind()`` builds a fresh
globals dict for the render function and every render writes to its own
buffer, so threads can share a template without locks.

The threads wait on a barrier so that all renders overlap.

Run:
    python app.py
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from sprig import Environment

WORKERS = 8

env = Environment()

template = env.from_string(
    """
    article[id=f"page-{page_id}"] {
        h1 { @title }
        ul { @for tag in tags { li { @tag } } }
    }
    """
)

start = threading.Barrier(WORKERS)


def render_page(page_id: int) -> tuple[int, str]:
    start.wait()
    tags = [f"tag-{page_id}-{suffix}" for suffix in "abc"]
    fragment = template.bind(page_id=page_id, title=f"Page {page_id}", tags=tags)
    return page_id, fragment.render()


with ThreadPoolExecutor(max_workers=WORKERS) as pool:
    results = dict(pool.map(render_page, range(WORKERS)))


def main() -> None:
    for page_id, html in sorted(results.items()):
        print(f"[{page_id}] {html}")


if __name__ == "__main__":
    main()
