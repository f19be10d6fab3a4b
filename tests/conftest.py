"""Pytest configuration and fixtures for sprig tests."""

import ast

import pytest

from sprig import Environment
from sprig.compiler import Compiler
from sprig.parser import parse


@pytest.fixture
def env():
    """Create a basic sprig Environment."""
    return Environment()


@pytest.fixture
def env_nocache():
    """Create a sprig Environment with the template cache disabled."""
    return Environment(cache_size=0)


def render(source: str, **context: object) -> str:
    """Compile ``source`` without caching and render it with ``context``."""
    return Environment(cache_size=0).compile(source).render(context)


def render_ops(source: str) -> list[tuple[str, str]]:
    """Classify the statements of the generated ``render`` body.

    Returns a list of ``("flush", text)``, ``("write", expr_source)`` and
    ``("block", statement_type)`` entries, skipping the local-caching
    prologue and ``pass`` placeholders.
    """
    module = Compiler().generate(parse(source))
    func = module.body[-1]
    assert isinstance(func, ast.FunctionDef)
    return classify(func.body[3:])


def classify(stmts: list[ast.stmt]) -> list[tuple[str, str]]:
    ops: list[tuple[str, str]] = []
    for stmt in stmts:
        if isinstance(stmt, ast.Pass):
            continue
        if (
            isinstance(stmt, ast.Expr)
            and isinstance(stmt.value, ast.Call)
            and isinstance(stmt.value.func, ast.Name)
        ):
            call = stmt.value
            if call.func.id == "_append":
                assert isinstance(call.args[0], ast.Constant)
                ops.append(("flush", call.args[0].value))
                continue
            if call.func.id == "_write":
                ops.append(("write", ast.unparse(call.args[0])))
                continue
        ops.append(("block", type(stmt).__name__))
    return ops
