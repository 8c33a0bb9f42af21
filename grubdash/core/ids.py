"""
GrubDash — ID generation
"""
import uuid
from typing import Callable

IdGenerator = Callable[[], str]


def next_id() -> str:
    """Generate a unique 32-char hex record ID."""
    return uuid.uuid4().hex
