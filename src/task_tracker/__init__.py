"""Single-user task tracker backed by a flat JSON file."""

__version__ = "0.1.0"
