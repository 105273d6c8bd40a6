"""Rentiva: tenant/owner compatibility scoring."""

__version__ = "0.1.0"
