"""Pytest configuration for the sprig examples.

Each example directory holds an ``app.py`` that does its work at import time
and a ``test_*.py`` that inspects the resulting module-level names through
the ``example_app`` fixture.
"""

from pathlib import Path
from runpy import run_path
from types import SimpleNamespace

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> SimpleNamespace:
    """Run the app.py beside the requesting test and expose its globals.

    The script runs afresh for every test, so no state leaks between tests.
    """
    app_path = Path(request.path).with_name("app.py")
    namespace = run_path(str(app_path), run_name=f"sprig_example_{app_path.parent.name}")
    return SimpleNamespace(**namespace)
