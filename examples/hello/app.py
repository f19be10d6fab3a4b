"""Hello World: a sprig template in three lines.

The template below is compiled once into a Python ``render`` function; the
static markup around ``@name`` is already escaped and merged into two string
constants.

Run:
    python app.py
"""

from sprig import Environment

env = Environment()
template = env.from_string('p[class="greeting"] { "Hello, " @name "!" }')
output = template.render(name="World")


def main() -> None:
    print(output)
    for name in ("sprig", "Tom & Jerry", "<script>"):
        print(template.render(name=name))

    print("\nGenerated Python:\n")
    print(template.python_source)


if __name__ == "__main__":
    main()
