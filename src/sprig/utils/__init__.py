"""Shared utilities for sprig (escaping, host fragments, caching)."""
