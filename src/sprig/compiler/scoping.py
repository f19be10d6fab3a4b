"""Block scoping for ``@for`` targets and ``@match`` captures.

All template code runs in one ``render`` function, where a plain Python
``for`` or ``case`` binding would be visible to the whole function. A name
bound by a loop target or an arm pattern is therefore renamed to a fresh
local (``user`` → ``_l1_user``), and only the host expressions inside that
loop body or arm see the new name:

    h1 { @user }
    @for user in users { li { @user } }
    p { @user }

Generates:
    _write(user, _buf)
    for _l1_user in users:
        ...
        _write(_l1_user, _buf)
    ...
    _write(user, _buf)

The first and last ``@user`` read the context; the loop never touches it.
"""

from __future__ import annotations

import ast

# Prefix of the locals that loop targets and match captures are renamed to
LOCAL_PREFIX = "_l"


def local_name(scope: int, name: str) -> str:
    return f"{LOCAL_PREFIX}{scope}_{name}"


def target_names(target: ast.expr) -> list[str]:
    """Names a ``for`` target binds, in source order."""
    return [
        node.id
        for node in ast.walk(target)
        if isinstance(node, ast.Name) and isinstance(node.ctx, ast.Store)
    ]


def pattern_names(pattern: ast.pattern) -> list[str]:
    """Names a ``case`` pattern captures, in source order, without duplicates.

    Or-patterns bind the same names in every alternative.
    """
    names: list[str] = []
    for node in ast.walk(pattern):
        if isinstance(node, (ast.MatchAs, ast.MatchStar)):
            name = node.name
        elif isinstance(node, ast.MatchMapping):
            name = node.rest
        else:
            continue
        if name is not None and name not in names:
            names.append(name)
    return names


class LocalRenamer(ast.NodeTransformer):
    """Rewrite names bound by enclosing blocks to their renamed locals.

    ``loads`` applies to names that are read, ``stores`` to names that are
    bound. For a host expression both are the current scope, so comprehension
    targets and their uses stay consistent. Lambda parameters shadow the
    mapping inside the lambda body.
    """

    def __init__(self, loads: dict[str, str], stores: dict[str, str] | None = None):
        self.loads = loads
        self.stores = loads if stores is None else stores

    def visit_Name(self, node: ast.Name) -> ast.Name:
        mapping = self.stores if isinstance(node.ctx, ast.Store) else self.loads
        renamed = mapping.get(node.id)
        if renamed is not None:
            node.id = renamed
        return node

    def visit_Lambda(self, node: ast.Lambda) -> ast.Lambda:
        args = node.args
        args.defaults = [self.visit(d) for d in args.defaults]
        args.kw_defaults = [None if d is None else self.visit(d) for d in args.kw_defaults]
        params = {
            a.arg
            for a in (*args.posonlyargs, *args.args, *args.kwonlyargs, args.vararg, args.kwarg)
            if a is not None
        }
        if params & (self.loads.keys() | self.stores.keys()):
            inner = LocalRenamer(
                {k: v for k, v in self.loads.items() if k not in params},
                {k: v for k, v in self.stores.items() if k not in params},
            )
            node.body = inner.visit(node.body)
        else:
            node.body = self.visit(node.body)
        return node

    # Capture names live on the pattern nodes themselves, not in ast.Name
    def visit_MatchAs(self, node: ast.MatchAs) -> ast.MatchAs:
        self.generic_visit(node)
        if node.name is not None:
            node.name = self.stores.get(node.name, node.name)
        return node

    def visit_MatchStar(self, node: ast.MatchStar) -> ast.MatchStar:
        if node.name is not None:
            node.name = self.stores.get(node.name, node.name)
        return node

    def visit_MatchMapping(self, node: ast.MatchMapping) -> ast.MatchMapping:
        self.generic_visit(node)
        if node.rest is not None:
            node.rest = self.stores.get(node.rest, node.rest)
        return node


def rename(node: ast.AST, loads: dict[str, str], stores: dict[str, str] | None = None) -> ast.AST:
    """Apply ``LocalRenamer`` to ``node`` in place and return it."""
    if not loads and not stores:
        return node
    return LocalRenamer(loads, stores).visit(node)
