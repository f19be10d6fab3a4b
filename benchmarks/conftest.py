"""Shared fixtures for sprig benchmarks.

Every template is written twice, once in sprig and once as the equivalent
autoescaped Jinja2 template, so that each benchmark group compares the two
engines on identical output.

Run with: pytest benchmarks/ --benchmark-only
"""

from __future__ import annotations

import pytest
from jinja2 import Environment as Jinja2Environment

from sprig import Environment as SprigEnvironment

# (sprig source, jinja2 source)
TEMPLATES: dict[str, tuple[str, str]] = {
    "minimal": (
        "p { @name }",
        "<p>{{ name }}</p>",
    ),
    "static": (
        """
        html {
            head { meta[charset="UTF-8"]; title { "Static page" } }
            body {
                header[class="site"] { h1 { "Welcome" } }
                main { p { "Nothing on this page is dynamic." } }
                footer { "&copy; nobody" }
            }
        }
        """,
        '<html><head><meta charset="UTF-8"><title>Static page</title></head>'
        '<body><header class="site"><h1>Welcome</h1></header>'
        "<main><p>Nothing on this page is dynamic.</p></main>"
        "<footer>&amp;copy; nobody</footer></body></html>",
    ),
    "small": (
        """
        div[class="profile"] {
            h1 { @user.name }
            @if user.bio { p { @user.bio } } else { p { "No bio" } }
            ul { @for tag in user.tags { li { @tag } } }
        }
        """,
        '<div class="profile"><h1>{{ user.name }}</h1>'
        "{% if user.bio %}<p>{{ user.bio }}</p>{% else %}<p>No bio</p>{% endif %}"
        "<ul>{% for tag in user.tags %}<li>{{ tag }}</li>{% endfor %}</ul></div>",
    ),
    "large": (
        """
        table {
            @for row in rows {
                tr[class=row.kind] {
                    td { @row.id }
                    td { @row.title }
                    td {
                        @match row.status {
                            "open" => { span[class="ok"] { "open" } },
                            "closed" => "closed",
                            _ => "unknown",
                        }
                    }
                }
            }
        }
        """,
        "<table>{% for row in rows %}"
        '<tr class="{{ row.kind }}"><td>{{ row.id }}</td><td>{{ row.title }}</td><td>'
        '{% if row.status == "open" %}<span class="ok">open</span>'
        '{% elif row.status == "closed" %}closed{% else %}unknown{% endif %}'
        "</td></tr>{% endfor %}</table>",
    ),
}


class _User:
    def __init__(self) -> None:
        self.name = "Ada <Lovelace>"
        self.bio = "Wrote the first program & more"
        self.tags = ["math", "engines", "poetry", "<science>", "notes"]


class _Row:
    def __init__(self, i: int) -> None:
        self.id = i
        self.title = f"Ticket #{i} & friends"
        self.kind = "even" if i % 2 == 0 else "odd"
        self.status = ("open", "closed", "stale")[i % 3]


@pytest.fixture(scope="session")
def sprig_env() -> SprigEnvironment:
    return SprigEnvironment()


@pytest.fixture(scope="session")
def jinja2_env() -> Jinja2Environment:
    return Jinja2Environment(autoescape=True)


@pytest.fixture(scope="session")
def minimal_context() -> dict[str, object]:
    return {"name": "Benchmark"}


@pytest.fixture(scope="session")
def small_context() -> dict[str, object]:
    return {"user": _User()}


@pytest.fixture(scope="session")
def large_context() -> dict[str, object]:
    return {"rows": [_Row(i) for i in range(1000)]}
