"""
Todo Service Domain Entities

Each entity in its own file.
"""

from .user import User
from .todo import Todo

__all__ = [
    "User",
    "Todo",
]
