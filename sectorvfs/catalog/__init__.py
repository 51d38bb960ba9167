from .index_entry import IndexEntry
from .index_codec import encode, decode
from .directory import VirtualDirectory, normalize
from .persistence import IndexPersistence

__all__ = [
    "IndexEntry",
    "encode",
    "decode",
    "VirtualDirectory",
    "normalize",
    "IndexPersistence",
]
