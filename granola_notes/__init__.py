"""
granola_notes package

Read-only command-line access to the Granola desktop app's local cache.
Use `python -m granola_notes` or the `granola` console script, both of which
call `granola_notes.cli.main`.
"""

__all__ = ["cli"]
__version__ = "0.1.0"
