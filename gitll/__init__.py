"""Public package surface for gitll.

Exports ``main`` for programmatic CLI invocation.
Layout, git status, and rendering live in submodules under ``gitll``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
