"""
Console I/O for the interactive greeter
"""

from .reader import ConsoleReader
from .session import InteractiveSession, status

__all__ = [
    'ConsoleReader',
    'InteractiveSession',
    'status'
]
