"""Persistence backends for request processors."""

from .base_store import ProcessorStore
from .file_store import FileProcessorStore
from .sqlite_store import SqliteProcessorStore
from .memory_store import MemoryProcessorStore

__all__ = [
    'ProcessorStore',
    'FileProcessorStore',
    'SqliteProcessorStore',
    'MemoryProcessorStore',
]
