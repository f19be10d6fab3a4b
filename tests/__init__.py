"""sprig test suite."""
