from .storage import (
    StorageBackend,
    MemoryStorage,
    JsonFileStorage,
    WellnessStorage,
    MOODS_KEY,
    JOURNAL_KEY
)
from .manager import DatabaseManager

__all__ = [
    'StorageBackend',
    'MemoryStorage',
    'JsonFileStorage',
    'WellnessStorage',
    'MOODS_KEY',
    'JOURNAL_KEY',
    'DatabaseManager'
]
