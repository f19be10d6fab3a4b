"""Components -- plain Python functions that return fragments.

sprig has no macro system of its own. A component is a function that binds
a template and returns the resulting Fragment; interpolating a Fragment
(``@card(...)``) streams it into the enclosing template's buffer.

``html()`` compiles the template where it is written and binds it to the
surrounding variables, so components read like f-strings.

Run:
    python app.py
"""

from dataclasses import dataclass

from sprig import Fragment, html


@dataclass
class Feature:
    name: str
    desc: str
    stable: bool = True


def badge(stable: bool) -> Fragment:
    return html("""
        @if stable {
            span[class="badge ok"] { "stable" }
        } else {
            span[class="badge warn"] { "preview" }
        }
    """)


def card(feature: Feature) -> Fragment:
    return html("""
        article[class="card"] {
            h2 { @feature.name " " @badge(feature.stable) }
            p { @feature.desc }
        }
    """)


def page(title: str, features: list[Feature], notice: str | None = None) -> Fragment:
    return html("""
        html {
            head { meta[charset="UTF-8"]; title { @title } }
            body {
                h1 { @title }
                @if notice { div[class="notice", role="alert"] { @notice } }
                section[class="grid"] {
                    @for feature in features { @card(feature) }
                }
            }
        }
    """)


features = [
    Feature("Compiled", "Templates become plain Python functions"),
    Feature("Escaped", "Static text is escaped once, values at render time"),
    Feature("Pattern matching", "Arms are Python patterns", stable=False),
]

output = page("Component Demo", features, notice="Alpha & unstable").render()


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
