"""Command-line interface for ghfolio.

This module provides the CLI that builds the portfolio page for a GitHub user.
"""

from .main import main

__all__ = ["main"]
