"""Command-line interface for fao56_et."""

from .interface import cli

__all__ = ['cli']
