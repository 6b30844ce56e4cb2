"""CLI package bootstrap.

Exposes the ``unjumble`` click command defined in :mod:`unjumble.cli.core`.
"""
# Absolute import keeps `python -m unjumble.cli` and console scripts working alike
from unjumble.cli.core import cli

__all__ = ["cli"]
