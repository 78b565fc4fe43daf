from .base import StorageBackend
from .file_storage import JsonFileStorage
from .memory import InMemoryStorage
from .repository import AnalysisRepository, StorageError

__all__ = [
    "AnalysisRepository",
    "InMemoryStorage",
    "JsonFileStorage",
    "StorageBackend",
    "StorageError",
]
