"""Error reporting -- what sprig tells you when a template is wrong.

Syntax errors are raised at compile time with the template name, line,
column, a caret under the offending token, and the set of tokens that would
have been accepted. Render errors carry the template line that failed.

Run:
    python app.py
"""

from sprig import Environment, ParseError, TemplateRuntimeError, UndefinedError

env = Environment()

# 1. An extra closing bracket after the attribute list
try:
    env.from_string('meta[charset="UTF-8"]];', name="head.sprig")
except ParseError as e:
    syntax_error = e

# 2. A misspelled variable, reported as a NameError subclass
profile = env.from_string(
    """
    div[class="profile"] {
        h1 { @user_name }
        p { @bio }
    }
    """,
    name="profile.sprig",
)
try:
    profile.render(username="ada", bio="...")
except UndefinedError as e:
    undefined_error = e

# 3. A value sprig does not know how to render
try:
    env.from_string("ul {\n  @items\n}", name="list.sprig").render(items={"a", "b"})
except TemplateRuntimeError as e:
    render_error = e


def main() -> None:
    for error in (syntax_error, undefined_error, render_error):
        print(error.format_compact())
        print()


if __name__ == "__main__":
    main()
