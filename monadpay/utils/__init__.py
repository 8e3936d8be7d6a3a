"""Shared utilities: errors, unit conversion, formatting."""
