"""
Core framework for the Cosmos DB SDK demos.

The dispatcher owns the menu loop; the console owns terminal I/O.
Demo routines live in the demos package and only see the client.
"""

from .console import Console
from .dispatcher import CommandDispatcher, DemoRoutine, format_error_chain

__all__ = [
    "Console",
    "CommandDispatcher",
    "DemoRoutine",
    "format_error_chain",
]
