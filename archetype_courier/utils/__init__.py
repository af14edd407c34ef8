"""
Utility Functions

Logging helpers shared by the resolvers and the CLI.
"""

from .logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
