"""Declare MongoDB collections, validate and translate them, and drive a project's migrations."""

__version__ = "0.1.0"