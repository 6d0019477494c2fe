"""Session management using Factory Pattern."""
from .session_factory import SessionFactory
from .session_manager import SessionManager

__all__ = [
    'SessionFactory',
    'SessionManager',
]
