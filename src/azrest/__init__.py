"""Async REST clients for the management groups and file storage APIs."""

__version__ = "0.1.0"
