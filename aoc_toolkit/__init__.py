"""Shared support library for the daily puzzle solvers."""

__version__ = "0.1.0"
