from .sector_store import SectorStore, SectorStoreStats
from .exceptions import StorageError

__all__ = ["SectorStore", "SectorStoreStats", "StorageError"]
