"""Upload services module."""
from .file_service import FileValidator, FileReader, AsyncFileReader, discover_files

__all__ = [
    'FileValidator',
    'FileReader',
    'AsyncFileReader',
    'discover_files',
]
